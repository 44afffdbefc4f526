"""Sprite-sheet animation."""

from __future__ import annotations

import pygame


class AnimatedSprite:
    """Cycles through the frames of one row of a sprite sheet."""

    def __init__(self) -> None:
        self._texture: pygame.Surface | None = None
        self.frame_width = 0
        self.frame_height = 0
        self.frame_count = 0
        self.frame_time = 0.1
        self.current_frame = 0
        self.current_row = 0
        self._time_accumulated = 0.0
        self.is_playing = True
        self.position: tuple[float, float] = (0.0, 0.0)

    def set_texture(
        self,
        texture: pygame.Surface,
        frame_width: int,
        frame_height: int,
        frame_count: int,
        frame_time: float,
        row: int = 0,
    ) -> None:
        """Use ``texture`` as the sprite sheet and restart at the first frame of ``row``."""
        if frame_count <= 0:
            raise ValueError("frame_count must be positive")
        self._texture = texture
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.frame_count = frame_count
        self.frame_time = frame_time
        self.current_row = row
        self.current_frame = 0
        self._time_accumulated = 0.0

    def set_row(self, row: int) -> None:
        """Switch to another row of the sheet, starting at its first frame."""
        self.current_row = row
        self.current_frame = 0
        self._time_accumulated = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the animation clock, moving on at most one frame."""
        if not (self.is_playing and self._texture is not None):
            return
        self._time_accumulated += delta_time
        if self._time_accumulated >= self.frame_time:
            self.current_frame = (self.current_frame + 1) % self.frame_count
            self._time_accumulated -= self.frame_time

    def play(self) -> None:
        self.is_playing = True

    def pause(self) -> None:
        self.is_playing = False

    def stop(self) -> None:
        """Pause and rewind to the first frame of the current row."""
        self.is_playing = False
        self.current_frame = 0
        self._time_accumulated = 0.0

    def frame_rect(self) -> pygame.Rect | None:
        """The area of the sheet shown now, or None without a texture."""
        if self._texture is None:
            return None
        return pygame.Rect(
            self.current_frame * self.frame_width,
            self.current_row * self.frame_height,
            self.frame_width,
            self.frame_height,
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the current frame onto ``surface`` at ``position``."""
        area = self.frame_rect()
        if area is None:
            return
        surface.blit(self._texture, self.position, area)