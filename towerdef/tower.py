"""Base tower: placement, targeting, refunds and upgrade costs."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from towerdef.dummy_critter import CRITTER_SIZE, DummyCritter
from towerdef.projectile import Projectile

TOWER_SIZE = 30
MAX_SHOOTING_TIMER = 100
REFUND_PER_UPGRADE = 50
REFUND_RATIO = 0.5


class Tower:
    """A square tower that targets the first critter within its range."""

    SIZE = TOWER_SIZE

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        buying_cost: int = 0,
        attack_range: int = 0,
        power: int = 0,
        rate_of_fire: int = 0,
        refund_value: Optional[int] = None,
    ) -> None:
        self.x = x
        self.y = y
        self.buying_cost = buying_cost
        self.base_refund = (
            int(REFUND_RATIO * buying_cost) if refund_value is None else refund_value
        )
        self.range = attack_range
        self.power = power
        self.rate_of_fire = rate_of_fire
        self.level = 1
        self.shooting_timer = 0
        self.projectiles: list[Projectile] = []

    @property
    def centre(self) -> tuple[float, float]:
        return self.x + TOWER_SIZE / 2, self.y + TOWER_SIZE / 2

    def find_critter(self, critters: Iterable[DummyCritter]) -> Optional[DummyCritter]:
        """The first critter within range, or None."""
        return next((c for c in critters if self.is_critter_in_range(c)), None)

    def clear_projectiles(self) -> None:
        self.projectiles.clear()

    def shoot_projectile(self, critter: Optional[DummyCritter]) -> None:
        """Fire at the critter; the base tower does not shoot."""

    def upgrade(self) -> bool:
        """Raise the tower's level; the base tower cannot be upgraded."""
        return False

    def refund_value(self) -> int:
        """Coins returned on sale, growing with each level gained."""
        return self.base_refund + (self.level - 1) * REFUND_PER_UPGRADE

    def upgrade_cost(self) -> int:
        return 100 + self.level * 50

    def contains_point(self, x: float, y: float) -> bool:
        """True when the point lies on the tower's square, edges included."""
        return self.x <= x <= self.x + TOWER_SIZE and self.y <= y <= self.y + TOWER_SIZE

    def is_critter_in_range(self, critter: DummyCritter) -> bool:
        return self.range >= self.distance_to(critter)

    def distance_to(self, critter: DummyCritter) -> float:
        """Distance between the centres of the tower and the critter."""
        px, py = self.centre
        cx, cy = _critter_centre(critter)
        return math.hypot(px - cx, py - cy)

    def _aim(self, critter: DummyCritter) -> tuple[float, float]:
        """Unit direction from the tower's centre to the critter's centre."""
        px, py = self.centre
        cx, cy = _critter_centre(critter)
        distance = math.hypot(px - cx, py - cy)
        if distance == 0.0:
            return 0.0, 0.0
        return (cx - px) / distance, (cy - py) / distance

    def _advance_projectiles(self, critter: DummyCritter, step: float) -> None:
        """Move every shot towards the critter, applying hits and dropping spent shots.

        After a shot is removed the one that takes its place waits until the next frame.
        """
        dir_x, dir_y = self._aim(critter)
        cx, cy = _critter_centre(critter)
        index = 0
        while index < len(self.projectiles):
            shot = self.projectiles[index]
            shot.move(step * dir_x, step * dir_y)
            if shot.collides_with(cx, cy):
                critter.damage(self.power)
                del self.projectiles[index]
                if critter.health <= 0:
                    self.projectiles.clear()
            elif shot.is_outside():
                del self.projectiles[index]
            index += 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x}, y={self.y}, level={self.level}, "
            f"range={self.range}, power={self.power})"
        )


def _critter_centre(critter: DummyCritter) -> tuple[float, float]:
    return critter.x + CRITTER_SIZE / 2, critter.y + CRITTER_SIZE / 2