"""Genetic Kingdom: a pygame game with a main menu, a tile map and an animated coin."""

__version__ = "0.1.0"