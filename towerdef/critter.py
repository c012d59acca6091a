"""Critters that walk towards an exit, take damage and steal gold."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from towerdef.geometry import Rect

CRITTER_SIZE = 20.0
HEALTH_BAR_OFFSET = 10.0
HEALTH_BAR_HEIGHT = 5.0
EXIT_TOLERANCE = 1.0


class Critter:
    """A creature that moves along one axis at a time towards its exit."""

    def __init__(
        self,
        level: int,
        speed: float,
        hit_points: int,
        strength: int,
        reward: int,
        start: Rect,
        end: Rect,
    ) -> None:
        self.level = level
        self.speed = speed
        self.hit_points = hit_points
        self.max_hit_points = hit_points
        self.strength = strength
        self.reward = reward
        self.start_position = replace(start)
        self.exit_position = replace(end)
        self.position = replace(start)
        self.at_exit = False
        self.health_bar_visible = False
        self.health_bar_width = 0.0
        self.health_bar_time = 0.0

    def move(self, delta_time: float, critters: Iterable["Critter"], spacing: float) -> None:
        """Step towards the exit, holding back when another critter is too close.

        Horizontal movement happens only once the critter is level with the exit;
        otherwise it moves vertically.
        """
        direction_x = 0.0
        direction_y = 0.0
        move_x = abs(self.position.x - self.exit_position.x) > EXIT_TOLERANCE
        move_y = abs(self.position.y - self.exit_position.y) > EXIT_TOLERANCE

        if move_x and not move_y:
            direction_x = 1.0 if self.exit_position.x > self.position.x else -1.0
        elif move_y:
            direction_y = 1.0 if self.exit_position.y > self.position.y else -1.0

        next_x = self.position.x + direction_x * self.speed * delta_time
        next_y = self.position.y + direction_y * self.speed * delta_time

        blocked = any(
            abs(next_x - other.position.x) < spacing and abs(next_y - other.position.y) < spacing
            for other in critters
            if other is not self
        )

        if blocked:
            if direction_y != 0.0:
                next_y = self.position.y
            elif direction_x != 0.0:
                next_x = self.position.x

        self.position.x = next_x
        self.position.y = next_y

    def take_damage(self, damage: int) -> None:
        """Lose hit points and show the health bar for a moment."""
        self.hit_points -= damage
        self.health_bar_visible = True
        self.health_bar_width = 50.0
        self.health_bar_time = 0.5

    @property
    def alive(self) -> bool:
        return self.hit_points > 0

    def mark_at_exit(self, value: bool) -> None:
        """Record arrival at the exit; the critter's hit points drop to zero."""
        self.hit_points = 0
        self.at_exit = value

    def steal_gold(self, player_gold: int) -> int:
        """Return the player's gold after this critter takes its share."""
        return player_gold - self.strength

    @property
    def body(self) -> Rect:
        """The square the critter occupies on screen."""
        return Rect(self.position.x, self.position.y, CRITTER_SIZE, CRITTER_SIZE)

    def health_bars(self) -> tuple[Rect, Rect]:
        """The remaining-health and lost-health parts of the bar above the critter."""
        bar = Rect(self.position.x, self.position.y - HEALTH_BAR_OFFSET, CRITTER_SIZE, HEALTH_BAR_HEIGHT)
        fraction = self.hit_points / self.max_hit_points if self.max_hit_points else 0.0
        green = replace(bar, w=bar.w * fraction)
        red = replace(bar, x=green.x + green.w, w=bar.w - green.w)
        return green, red

    def __repr__(self) -> str:
        return (
            f"Critter(level={self.level}, hit_points={self.hit_points}, "
            f"position=({self.position.x}, {self.position.y}))"
        )