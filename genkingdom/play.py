"""The in-game screen: the tile map, the player's purse and the gold counter."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Any, Callable

import pygame

from genkingdom.animation import AnimatedSprite
from genkingdom.player import Player
from genkingdom.states import GameState, StateManager
from genkingdom.tilemap import TileMap, TileType

MAP_WIDTH = 26
MAP_HEIGHT = 19
START_POSITION = (0, 0)
GOAL_POSITION = (25, 9)
TILE_SIZE = 25

BACKGROUND_COLOR = (0x57, 0x80, 0xD3)
OUTLINE_COLOR = (255, 255, 255)
DEFAULT_TILE_COLOR = (255, 255, 255)
TILE_COLORS = {
    TileType.EMPTY: (0x57, 0xA4, 0xD3),
    TileType.START: (0, 255, 0),
    TileType.GOAL: (255, 0, 0),
    TileType.TOWER: (0, 0, 255),
}

COIN_SPRITE = Path("sprites") / "coin.png"
COIN_FRAME_SIZE = 16
COIN_FRAME_COUNT = 15
COIN_FRAME_TIME = 0.1


class PlayState(GameState):
    """The screen where the game itself is played."""

    def __init__(
        self,
        manager: StateManager,
        asset_dir: str | Path = "assets",
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.manager = manager
        self.asset_dir = Path(asset_dir)
        self.player = Player()
        self.tile_map = TileMap(MAP_WIDTH, MAP_HEIGHT)
        self.tile_map.set_start(*START_POSITION)
        self.tile_map.set_goal(*GOAL_POSITION)
        self.gold_animation = AnimatedSprite()
        self._clock = clock
        self._last_tick = clock()

        try:
            texture = pygame.image.load(str(self.asset_dir / COIN_SPRITE))
        except (FileNotFoundError, pygame.error):
            print("Error loading texture", file=sys.stderr)
        else:
            self.gold_animation.set_texture(
                texture,
                COIN_FRAME_SIZE,
                COIN_FRAME_SIZE,
                COIN_FRAME_COUNT,
                COIN_FRAME_TIME,
            )

    def handle_event(self, window: Any, event: Any) -> None:
        if event.type == pygame.QUIT:
            window.close()

    def update(self, window: Any) -> None:
        now = self._clock()
        delta_time = now - self._last_tick
        self._last_tick = now
        self.gold_animation.update(delta_time)

    def render(self, window: Any) -> None:
        window.clear(BACKGROUND_COLOR)
        surface = window.surface
        for row in self.tile_map.grid:
            for tile in row:
                rect = pygame.Rect(
                    tile.x * TILE_SIZE, tile.y * TILE_SIZE, TILE_SIZE, TILE_SIZE
                )
                pygame.draw.rect(
                    surface, TILE_COLORS.get(tile.type, DEFAULT_TILE_COLOR), rect
                )
                pygame.draw.rect(surface, OUTLINE_COLOR, rect.inflate(2, 2), 1)
        self.gold_animation.draw(surface)