"""The title screen with its play and quit buttons."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

from genkingdom.play import PlayState
from genkingdom.states import GameState, StateManager

BACKGROUND_COLOR = (0x57, 0x80, 0xD3)
BUTTON_COLOR = (0x5D, 0x75, 0xA7)
HOVER_COLOR = (0x1C, 0x52, 0xBF)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

FONT_FILE = Path("fonts") / "PERRYGOT.TTF"
LOGO_FILE = Path("images") / "GenKing.png"
LOGO_SCALE = 0.15
LOGO_POSITION = (45, -100)
TEXT_SIZE = 30
OUTLINE_THICKNESS = 2


@dataclass
class _Button:
    label: str
    rect: pygame.Rect
    text_position: tuple[int, int]
    fill: tuple[int, int, int] = BUTTON_COLOR
    outline: tuple[int, int, int] = WHITE
    text_color: tuple[int, int, int] = WHITE

    @property
    def bounds(self) -> pygame.Rect:
        """The area the button covers, outline included."""
        return self.rect.inflate(2 * OUTLINE_THICKNESS, 2 * OUTLINE_THICKNESS)

    def contains(self, point: tuple[float, float]) -> bool:
        return self.bounds.collidepoint(point)

    def set_hovered(self, hovered: bool) -> None:
        if hovered:
            self.fill, self.outline, self.text_color = HOVER_COLOR, HOVER_COLOR, BLACK
        else:
            self.fill, self.outline, self.text_color = BUTTON_COLOR, WHITE, WHITE

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(surface, self.outline, self.bounds)
        pygame.draw.rect(surface, self.fill, self.rect)
        surface.blit(font.render(self.label, True, self.text_color), self.text_position)


class MainMenu(GameState):
    """The first screen: start a game or leave."""

    def __init__(self, manager: StateManager, asset_dir: str | Path = "assets") -> None:
        self.manager = manager
        self.asset_dir = Path(asset_dir)

        try:
            self.font = pygame.font.Font(str(self.asset_dir / FONT_FILE), TEXT_SIZE)
        except (FileNotFoundError, OSError, pygame.error):
            print("Error loading font", file=sys.stderr)
            self.font = pygame.font.Font(None, TEXT_SIZE)

        self.logo: pygame.Surface | None = None
        try:
            image = pygame.image.load(str(self.asset_dir / LOGO_FILE))
        except (FileNotFoundError, pygame.error):
            print("Error loading logo", file=sys.stderr)
        else:
            width, height = image.get_size()
            self.logo = pygame.transform.scale(
                image, (int(width * LOGO_SCALE), int(height * LOGO_SCALE))
            )

        self.play_button = _Button(
            "Iniciar Partida", pygame.Rect(60, 300, 300, 65), (70, 315)
        )
        self.quit_button = _Button(
            "Salir del Juego", pygame.Rect(60, 400, 300, 65), (75, 415)
        )

    def handle_event(self, window: Any, event: Any) -> None:
        if event.type == pygame.QUIT:
            window.close()

        if event.type == pygame.MOUSEBUTTONDOWN:
            position = window.mouse_position()
            if self.play_button.contains(position):
                self.manager.push(PlayState(self.manager, asset_dir=self.asset_dir))
            if self.quit_button.contains(position):
                print("Quit button clicked!")
                window.close()

        position = window.mouse_position()
        self.play_button.set_hovered(self.play_button.contains(position))
        self.quit_button.set_hovered(self.quit_button.contains(position))

    def update(self, window: Any) -> None:
        """The menu has nothing to advance between frames."""

    def render(self, window: Any) -> None:
        window.clear(BACKGROUND_COLOR)
        surface = window.surface
        if self.logo is not None:
            surface.blit(self.logo, LOGO_POSITION)
        self.play_button.draw(surface, self.font)
        self.quit_button.draw(surface, self.font)