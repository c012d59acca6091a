"""A stationary target with health, used to exercise towers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

CRITTER_SIZE = 15


@dataclass
class DummyCritter:
    """A square target at a fixed pixel position."""

    SIZE: ClassVar[int] = CRITTER_SIZE

    x: float
    y: float
    health: int

    def damage(self, amount: int) -> bool:
        """Remove health; return True once the target has none left."""
        self.health -= amount
        return self.health <= 0