"""Bullets fired by the player and by enemies, and the pools that recycle them."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Iterable

from neonshooter.circle import (
    FULL_ANGLE,
    HALF_ANGLE,
    PI,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Circle,
)
from neonshooter.vector2 import Vector2

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
PLAYER_BULLET_COLOR: Color = (0, 191, 255)

_DEGREE_TO_RADIAN = PI / HALF_ANGLE


class BulletType(Enum):
    """The player's firing modes."""

    UP = 0
    DOWN = 1
    SHOTGUN = 2
    CROSS = 3
    CRAZY = 4
    CIRCLE = 5
    END = 6


def _off_screen(center: Vector2) -> bool:
    return (
        center.y < 0
        or center.y > SCREEN_HEIGHT
        or center.x < 0
        or center.x > SCREEN_WIDTH
    )


class Bullet(Circle):
    """An enemy bullet with its own speed, colour and tag."""

    RADIUS = 5
    DEFAULT_SPEED = 500.0

    def __init__(self) -> None:
        super().__init__(self.RADIUS)
        self.speed = self.DEFAULT_SPEED
        self.color: Color = WHITE
        self.tag = ""
        self.direction = Vector2.up()

    def update(self, dt: float) -> None:
        """Move along the direction; leaving the screen deactivates the bullet."""
        self.center += self.direction * self.speed * dt
        if _off_screen(self.center):
            self.active = False

    def fire(
        self,
        pos: Vector2,
        direction: Vector2 | None = None,
        color: Color = WHITE,
    ) -> None:
        """Launch from pos towards direction (up by default).

        Raises ZeroDivisionError for a zero direction.
        """
        if direction is None:
            direction = Vector2.up()
        self.direction = direction.normalized()
        self.color = color
        self.active = True
        self.center = pos.copy()


class PlayerBullet(Circle):
    """A bullet fired by the player at a fixed speed."""

    RADIUS = 7
    SPEED = 500.0
    COLOR: Color = PLAYER_BULLET_COLOR

    def __init__(self) -> None:
        super().__init__(self.RADIUS)
        self.direction = Vector2.up()

    def update(self, dt: float) -> None:
        """Move along the direction; leaving the screen deactivates the bullet."""
        self.center += self.direction * self.SPEED * dt
        if _off_screen(self.center):
            self.active = False

    def fire(self, pos: Vector2, direction: Vector2 | None = None) -> None:
        """Launch from pos towards direction (up by default)."""
        if direction is None:
            direction = Vector2.up()
        self.direction = direction.normalized()
        self.active = True
        self.center = pos.copy()


def _first_hit(bullets: Iterable[Circle], circle: Circle) -> bool:
    for bullet in bullets:
        if bullet.active and bullet.collides_with(circle):
            bullet.active = False
            return True
    return False


class EnemyBulletPool:
    """A fixed pool of enemy bullets that are reused once inactive."""

    POOL_SIZE = 300

    def __init__(self) -> None:
        self.bullets = [Bullet() for _ in range(self.POOL_SIZE)]
        for bullet in self.bullets:
            bullet.active = False

    def update(self, dt: float) -> None:
        for bullet in self.bullets:
            bullet.update(dt)

    def hits(self, circle: Circle) -> bool:
        """True if an active bullet touches the circle; that bullet is used up."""
        return _first_hit(self.bullets, circle)

    def fire(
        self,
        pos: Vector2,
        direction: Vector2 | None = None,
        color: Color = WHITE,
    ) -> Bullet | None:
        """Fire the first free bullet; None when the pool is exhausted."""
        for bullet in self.bullets:
            if not bullet.active:
                bullet.fire(pos, direction, color)
                return bullet
        return None

    def active_bullets(self) -> list[Bullet]:
        return [bullet for bullet in self.bullets if bullet.active]


class PlayerBulletPool:
    """A fixed pool of player bullets with the various firing patterns."""

    POOL_SIZE = 100

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.bullets = [PlayerBullet() for _ in range(self.POOL_SIZE)]
        for bullet in self.bullets:
            bullet.active = False

    def update(self, dt: float) -> None:
        for bullet in self.bullets:
            bullet.update(dt)

    def hits(self, circle: Circle) -> bool:
        """True if an active bullet touches the circle; that bullet is used up."""
        return _first_hit(self.bullets, circle)

    def active_bullets(self) -> list[PlayerBullet]:
        return [bullet for bullet in self.bullets if bullet.active]

    def _free(self) -> Iterable[PlayerBullet]:
        return (bullet for bullet in self.bullets if not bullet.active)

    def _fire_one(self, pos: Vector2, direction: Vector2) -> None:
        bullet = next(iter(self._free()), None)
        if bullet is not None:
            bullet.fire(pos, direction)

    def _fire_fan(self, pos: Vector2, radians: Iterable[float]) -> None:
        for bullet, radian in zip(self._free(), radians):
            bullet.fire(pos, Vector2(math.cos(radian), math.sin(radian)))

    def fire(self, pos: Vector2) -> None:
        """One bullet straight up."""
        self._fire_one(pos, Vector2.up())

    def down_fire(self, pos: Vector2) -> None:
        """One bullet straight down."""
        self._fire_one(pos, Vector2.down())

    def cross_fire(self, pos: Vector2) -> None:
        """Four bullets a quarter turn apart."""
        count = 4
        step = FULL_ANGLE / count
        self._fire_fan(pos, [step * i * _DEGREE_TO_RADIAN for i in range(count)])

    def circle_fire(self, pos: Vector2) -> None:
        """Twelve bullets evenly round a full circle."""
        count = 12
        step = FULL_ANGLE / count
        self._fire_fan(pos, [step * i * _DEGREE_TO_RADIAN for i in range(count)])

    def crazy_fire(self, pos: Vector2) -> None:
        """One bullet at a random angle in the lower half-turn."""
        angle = self._rng.random() * PI
        self._fire_one(pos, Vector2(math.cos(angle), math.sin(angle)))

    def shotgun_fire(self, pos: Vector2) -> None:
        """Five bullets fanned across the upper half-turn."""
        count = 6
        step = HALF_ANGLE / count
        self._fire_fan(
            pos, [-(step * i) * _DEGREE_TO_RADIAN for i in range(1, count)]
        )