"""Game states and the stack that decides which one is active."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class GameState(ABC):
    """A screen of the game: it reacts to events, advances and draws itself."""

    @abstractmethod
    def handle_event(self, window: Any, event: Any) -> None:
        """React to a single input or window event."""

    @abstractmethod
    def update(self, window: Any) -> None:
        """Advance the state by one frame."""

    @abstractmethod
    def render(self, window: Any) -> None:
        """Draw the state onto the window."""


class StateManager:
    """A stack of game states; the state on top is the active one."""

    def __init__(self) -> None:
        self._states: list[GameState] = []

    def __len__(self) -> int:
        return len(self._states)

    def push(self, state: GameState) -> None:
        """Make ``state`` the active state."""
        self._states.append(state)

    def pop(self) -> GameState | None:
        """Remove and return the active state; does nothing when empty."""
        if self._states:
            return self._states.pop()
        return None

    def current(self) -> GameState | None:
        """Return the active state, or None when the stack is empty."""
        if self._states:
            return self._states[-1]
        return None