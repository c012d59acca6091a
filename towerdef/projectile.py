"""Square projectiles fired by towers at stationary targets."""

from __future__ import annotations

from towerdef.dummy_critter import CRITTER_SIZE
from towerdef.geometry import Rect
from towerdef.gridmap import SCREEN_HEIGHT, SCREEN_WIDTH

DEFAULT_SIZE = 3


class Projectile:
    """A square shot that travels in straight steps and hits what it overlaps.

    ``is_area`` is carried along for area damage but has no effect yet.
    """

    def __init__(
        self,
        x: float,
        y: float,
        damage: int,
        is_area: bool = False,
        size: int = DEFAULT_SIZE,
    ) -> None:
        self.x = x
        self.y = y
        self.damage = damage
        self.is_area = is_area
        self.size = size

    def move(self, dx: float, dy: float) -> None:
        """Shift the projectile by the given number of pixels."""
        self.x += dx
        self.y += dy

    def is_outside(self) -> bool:
        """True once the projectile has left the screen area."""
        return self.x < 0 or self.x > SCREEN_WIDTH or self.y < 0 or self.y > SCREEN_HEIGHT

    def collides_with(self, critter_x: float, critter_y: float) -> bool:
        """True when the projectile overlaps a target square whose corner is given."""
        return (
            self.x < critter_x + CRITTER_SIZE
            and self.x + self.size > critter_x
            and self.y < critter_y + CRITTER_SIZE
            and self.y + self.size > critter_y
        )

    def rect(self) -> Rect:
        """The square the projectile occupies on screen."""
        return Rect(self.x, self.y, self.size, self.size)

    def __repr__(self) -> str:
        return f"Projectile(x={self.x}, y={self.y}, damage={self.damage}, size={self.size})"