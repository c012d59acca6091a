"""The concrete towers: standard, rapid-fire and cannon."""

from __future__ import annotations

from typing import ClassVar, Optional

from towerdef.dummy_critter import DummyCritter
from towerdef.projectile import DEFAULT_SIZE, Projectile
from towerdef.tower import MAX_SHOOTING_TIMER, Tower

STANDARD_RANGE = 100
STANDARD_POWER = 3
STANDARD_RATE_OF_FIRE = 4
STANDARD_MAX_LEVEL = 5

RAPID_RANGE = 75
RAPID_POWER = 1
RAPID_RATE_OF_FIRE = 10
RAPID_MAX_LEVEL = 3
MAX_RAPID_FIRE_BREAK = 200

CANNON_RANGE = 125
CANNON_POWER = 10
CANNON_RATE_OF_FIRE = 1
CANNON_MAX_LEVEL = 3


class _ShootingTower(Tower):
    """A tower that fires on a timer and moves its shots by a fixed step each frame."""

    STEP: ClassVar[float] = 1.0
    PROJECTILE_SIZE: ClassVar[int] = DEFAULT_SIZE

    def _fire_when_ready(self) -> None:
        """Fire a shot if the timer has run out, otherwise run the timer down."""
        if self.shooting_timer <= 0:
            px, py = self.centre
            self.projectiles.append(Projectile(px, py, self.power, False, self.PROJECTILE_SIZE))
            self.shooting_timer = MAX_SHOOTING_TIMER
        else:
            self.shooting_timer -= self.rate_of_fire

    def _fire(self) -> None:
        self._fire_when_ready()

    def _shoot(self, critter: Optional[DummyCritter]) -> None:
        """Fire at the critter and advance shots; with no target, drop all shots."""
        if critter is None:
            self.projectiles.clear()
            return
        self._fire()
        self._advance_projectiles(critter, self.STEP)


class StandardTower(_ShootingTower):
    """A cheap tower with moderate range, power and rate of fire."""

    STEP = 10.0
    PROJECTILE_SIZE = DEFAULT_SIZE
    MAX_LEVEL: ClassVar[int] = STANDARD_MAX_LEVEL

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        buying_cost: int = 0,
        refund_value: Optional[int] = None,
    ) -> None:
        super().__init__(
            x,
            y,
            buying_cost,
            STANDARD_RANGE,
            STANDARD_POWER,
            STANDARD_RATE_OF_FIRE,
            refund_value,
        )

    def upgrade(self) -> bool:
        """Slightly raise range, power and rate of fire, up to the maximum level."""
        if self.level >= STANDARD_MAX_LEVEL:
            return False
        self.range += 20
        self.power += 1
        self.rate_of_fire += 1
        self.level += 1
        return True

    def shoot_projectile(self, critter: Optional[DummyCritter]) -> None:
        """Fire fast, default-sized shots at the critter; with no target, drop all shots."""
        self._shoot(critter)


class RapidFireTower(_ShootingTower):
    """A tower that fires quickly in bursts separated by breaks."""

    STEP = 5.0
    PROJECTILE_SIZE = 3
    MAX_LEVEL: ClassVar[int] = RAPID_MAX_LEVEL

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        buying_cost: int = 0,
        refund_value: Optional[int] = None,
    ) -> None:
        super().__init__(
            x,
            y,
            buying_cost,
            RAPID_RANGE,
            RAPID_POWER,
            RAPID_RATE_OF_FIRE,
            refund_value,
        )
        self.fire_break = 0
        self.fire_break_rate = 5
        self.burst_size = 50
        self.burst_count = 0

    def upgrade(self) -> bool:
        """Raise range, rate of fire and burst length, up to the maximum level."""
        if self.level >= RAPID_MAX_LEVEL:
            return False
        self.range += 10
        self.rate_of_fire += 3
        self.burst_size += 20
        self.level += 1
        return True

    def _fire(self) -> None:
        if self.fire_break <= 0:
            self._fire_when_ready()
            if self.burst_count == self.burst_size:
                self.fire_break = MAX_RAPID_FIRE_BREAK
            self.burst_count += 1
        else:
            self.burst_count = 0
            self.fire_break -= self.fire_break_rate

    def shoot_projectile(self, critter: Optional[DummyCritter]) -> None:
        """Fire bursts of small shots at the critter; with no target, drop all shots."""
        self._shoot(critter)


class CannonTower(_ShootingTower):
    """A slow, long-range tower firing large, powerful shots."""

    STEP = 3.0
    PROJECTILE_SIZE = 6
    MAX_LEVEL: ClassVar[int] = CANNON_MAX_LEVEL

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        buying_cost: int = 0,
        refund_value: Optional[int] = None,
    ) -> None:
        super().__init__(
            x,
            y,
            buying_cost,
            CANNON_RANGE,
            CANNON_POWER,
            CANNON_RATE_OF_FIRE,
            refund_value,
        )

    def upgrade(self) -> bool:
        """Greatly raise range, and raise rate of fire and power, up to the maximum level."""
        if self.level >= CANNON_MAX_LEVEL:
            return False
        self.range += 50
        self.rate_of_fire += 1
        self.power += 5
        self.level += 1
        return True

    def shoot_projectile(self, critter: Optional[DummyCritter]) -> None:
        """Fire slow, large shots at the critter; with no target, drop all shots."""
        self._shoot(critter)