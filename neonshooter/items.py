"""Power-up items and the manager that spawns and hands them out."""

from __future__ import annotations

import random
from enum import Enum

from neonshooter.circle import SCREEN_HEIGHT, SCREEN_WIDTH, Circle
from neonshooter.vector2 import Vector2

Color = tuple[int, int, int]


class ItemType(Enum):
    """Kinds of power-up; END means no item."""

    PLAYER_SPEED = 0
    BULLET_SPEED = 1
    BULLET_POWER = 2
    CHANGE_GUN = 3
    END = 4


_SPAWNABLE = [t for t in ItemType if t is not ItemType.END]

PEN_COLORS: dict[ItemType, Color] = {
    ItemType.PLAYER_SPEED: (255, 114, 94),
    ItemType.BULLET_SPEED: (135, 206, 235),
    ItemType.BULLET_POWER: (144, 238, 144),
    ItemType.CHANGE_GUN: (177, 156, 217),
}


class Item(Circle):
    """A power-up lying on the playfield."""

    RADIUS = 15
    ADD_SPEED = 5.0
    ADD_BULLET_SPEED = 5.0
    ADD_BULLET_POWER = 5
    PEN_WIDTH = 10

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(self.RADIUS)
        self._rng = rng if rng is not None else random.Random()
        self.tag = ItemType.END
        self.color: Color = PEN_COLORS[ItemType.PLAYER_SPEED]

    def spawn(self, position: Vector2) -> None:
        """Place the item at position with a random kind."""
        self.center = position.copy()
        self.active = True
        self.tag = _SPAWNABLE[self._rng.randrange(len(_SPAWNABLE))]
        self.color = PEN_COLORS[self.tag]


class ItemManager:
    """Spawns an item every few seconds and lets the player pick them up."""

    SPAWN_TIME = 10.0
    POOL_SIZE = 10

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.items = [Item(self._rng) for _ in range(self.POOL_SIZE)]
        for item in self.items:
            item.active = False
        self._spawn_time = 0.0

    def update(self, dt: float) -> None:
        """Advance the spawn clock and place a free item when it runs out."""
        self._spawn_time += dt
        if self._spawn_time <= self.SPAWN_TIME:
            return
        self._spawn_time = 0.0
        for item in self.items:
            if not item.active:
                position = Vector2(
                    float(self._rng.randrange(SCREEN_WIDTH)),
                    float(self._rng.randrange(SCREEN_HEIGHT)),
                )
                item.spawn(position)
                break

    def collect(self, player: Circle) -> ItemType:
        """Pick up the first active item touching the player; END if none."""
        for item in self.items:
            if item.active and item.collides_with(player):
                item.active = False
                return item.tag
        return ItemType.END

    def active_items(self) -> list[Item]:
        return [item for item in self.items if item.active]