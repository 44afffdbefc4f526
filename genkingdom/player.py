"""The player's purse."""

from __future__ import annotations


class Player:
    """Holds the player's gold."""

    def __init__(self, gold: int = 0) -> None:
        self._gold = gold

    @property
    def gold(self) -> int:
        return self._gold

    def add_gold(self, amount: int) -> None:
        """Add ``amount`` gold."""
        self._gold += amount

    def spend_gold(self, amount: int) -> bool:
        """Spend ``amount`` gold if there is enough; report whether it was spent."""
        if self._gold >= amount:
            self._gold -= amount
            return True
        return False