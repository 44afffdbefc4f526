"""The game window and the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pygame

from genkingdom.menu import MainMenu
from genkingdom.states import StateManager

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Genetic Kingdom"
FRAME_RATE = 60


class Window:
    """A drawing surface that can be opened, polled for events and closed."""

    def __init__(
        self,
        size: tuple[int, int] = WINDOW_SIZE,
        title: str = WINDOW_TITLE,
        surface: pygame.Surface | None = None,
    ) -> None:
        self._on_screen = surface is None
        if surface is None:
            surface = pygame.display.set_mode(size)
            pygame.display.set_caption(title)
        self.surface = surface
        self._open = True

    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        self._open = False

    def mouse_position(self) -> tuple[int, int]:
        return pygame.mouse.get_pos()

    def poll_events(self) -> list[pygame.event.Event]:
        """Take every pending event off the queue."""
        return pygame.event.get()

    def clear(self, color: tuple[int, int, int] = (0, 0, 0)) -> None:
        self.surface.fill(color)

    def display(self) -> None:
        """Show what has been drawn since the last call."""
        if self._on_screen:
            pygame.display.flip()


def run_frame(window: Window, manager: StateManager) -> None:
    """Dispatch pending events, then update and draw the active state."""
    for event in window.poll_events():
        state = manager.current()
        if state is not None:
            state.handle_event(window, event)

    state = manager.current()
    if state is not None:
        state.update(window)

    window.clear((0, 0, 0))

    state = manager.current()
    if state is not None:
        state.render(window)
    window.display()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="genkingdom", description=WINDOW_TITLE)
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding the game assets"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        window = Window()
        manager = StateManager()
        manager.push(MainMenu(manager, asset_dir=args.assets))
        clock = pygame.time.Clock()
        while window.is_open():
            run_frame(window, manager)
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())