"""Towers that hunt moving critters with homing projectiles."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional, Sequence

from towerdef.critter import Critter
from towerdef.critter_projectile import CritterProjectile
from towerdef.geometry import Rect

PROJECTILE_SIZE = 10.0
STARTING_HEALTH = 100


class CritterTower:
    """A tower that fires at the first critter in range on a cooldown."""

    def __init__(
        self,
        cost: int,
        damage: int,
        attack_range: float,
        fire_rate: float,
        position: Rect,
    ) -> None:
        self.cost = cost
        self.damage = damage
        self.range = attack_range
        self.fire_rate = fire_rate
        self.position = replace(position)
        self.health = STARTING_HEALTH
        self.time_since_last_shot = 0.0
        self.projectiles: list[CritterProjectile] = []

    def shoot_projectile(self, target: Critter) -> None:
        """Launch a projectile from the tower's centre towards the target."""
        start = Rect(
            self.position.x + (self.position.w - PROJECTILE_SIZE) / 2,
            self.position.y + (self.position.h - PROJECTILE_SIZE) / 2,
            PROJECTILE_SIZE,
            PROJECTILE_SIZE,
        )
        self.projectiles.append(CritterProjectile(start, target.position, self.damage))

    def update(self, delta_time: float, critters: Sequence[Critter]) -> None:
        """Fire when ready, steer shots to the nearest critter and apply hits."""
        if self.time_since_last_shot >= self.fire_rate:
            target = next((c for c in critters if self.is_in_range(c)), None)
            if target is not None:
                self.shoot_projectile(target)
                self.time_since_last_shot = 0.0

        if not critters:
            self.projectiles.clear()

        for shot in self.projectiles:
            closest = _closest(shot, critters)
            if closest is not None:
                shot.update(delta_time, closest.position)

        remaining = []
        for shot in self.projectiles:
            victim = next((c for c in critters if shot.collides_with(c.position)), None)
            if victim is None:
                remaining.append(shot)
            else:
                victim.take_damage(shot.damage)
        self.projectiles = remaining

        self.time_since_last_shot += delta_time

    def is_destroyed(self) -> bool:
        return self.health <= 0

    def take_damage(self, amount: int) -> None:
        self.health -= amount

    def is_in_range(self, critter: Critter) -> bool:
        """True when the critter's corner lies within range of the tower's corner."""
        dx = critter.position.x - self.position.x
        dy = critter.position.y - self.position.y
        return math.hypot(dx, dy) <= self.range

    @staticmethod
    def can_buy(player_coins: int, cost: int) -> bool:
        return player_coins >= cost

    @staticmethod
    def buy_tower(player_coins: int, cost: int) -> int:
        """Coins left after buying; unchanged when the player cannot afford it."""
        if CritterTower.can_buy(player_coins, cost):
            return player_coins - cost
        return player_coins

    @staticmethod
    def sell_tower(player_coins: int, sell_value: int) -> int:
        """Coins after selling a tower for the given value."""
        return player_coins + sell_value

    def __repr__(self) -> str:
        return (
            f"CritterTower(cost={self.cost}, damage={self.damage}, "
            f"range={self.range}, position={self.position!r})"
        )


def _closest(shot: CritterProjectile, critters: Sequence[Critter]) -> Optional[Critter]:
    best: Optional[Critter] = None
    best_distance = math.inf
    for critter in critters:
        distance = math.hypot(
            critter.position.x - shot.position.x, critter.position.y - shot.position.y
        )
        if distance < best_distance:
            best_distance = distance
            best = critter
    return best