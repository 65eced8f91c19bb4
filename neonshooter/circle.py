"""Circle shape with collision tests, and the playfield constants."""

from __future__ import annotations

from typing import Iterable

from neonshooter.vector2 import Vector2

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 800

FULL_ANGLE = 360.0
HALF_ANGLE = 180.0
PI = 3.141592


class Circle:
    """A circle with an integer radius, a centre and an active flag."""

    def __init__(self, radius: int, center: Vector2 | None = None, active: bool = True) -> None:
        self.radius = radius
        self.center = center.copy() if center is not None else Vector2()
        self.active = active

    def _hits(self, px: float, py: float, reach: int) -> bool:
        # Offsets are truncated to whole pixels before comparing.
        dx = int(self.center.x - px)
        dy = int(self.center.y - py)
        return dx * dx + dy * dy <= reach * reach

    def collides_with_point(self, point: Iterable[float]) -> bool:
        """True if the point (a Vector2 or an (x, y) pair) lies inside or on the circle."""
        px, py = point
        return self._hits(px, py, self.radius)

    def collides_with(self, other: Circle) -> bool:
        """True if this circle and the other touch or overlap."""
        return self._hits(other.center.x, other.center.y, self.radius + other.radius)