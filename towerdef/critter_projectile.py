"""Homing projectiles fired by critter-hunting towers."""

from __future__ import annotations

import math
from dataclasses import replace

from towerdef.geometry import Rect

SPEED = 200.0
COLLISION_TOLERANCE = -4.0


class CritterProjectile:
    """A shot that follows its target's current position each frame."""

    def __init__(self, start: Rect, target: Rect, damage: int) -> None:
        self.position = replace(start)
        self.target = replace(target)
        self.damage = damage
        self.speed = SPEED
        self.active = True

    def update(self, delta_time: float, target: Rect) -> None:
        """Retarget and move towards the target's corner at constant speed."""
        self.target = replace(target)
        dx = self.target.x - self.position.x
        dy = self.target.y - self.position.y
        distance = math.hypot(dx, dy)
        if distance > 0.0:
            self.position.x += dx / distance * self.speed * delta_time
            self.position.y += dy / distance * self.speed * delta_time

    def collides_with(self, rect: Rect) -> bool:
        """True when the shot overlaps the rectangle by more than the tolerance margin."""
        tol = COLLISION_TOLERANCE
        pos = self.position
        return (
            pos.x < rect.x + rect.w + tol
            and pos.x + pos.w > rect.x - tol
            and pos.y < rect.y + rect.h + tol
            and pos.y + pos.h > rect.y - tol
        )

    def __repr__(self) -> str:
        return f"CritterProjectile(position={self.position!r}, damage={self.damage})"