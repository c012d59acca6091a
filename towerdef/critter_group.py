"""Waves of critters: spawning, movement, rewards and the countdown between waves."""

from __future__ import annotations

import math
from dataclasses import replace

from towerdef.critter import Critter
from towerdef.geometry import Rect

SPAWN_SPACING = 100.0
SPAWN_DELAY = 5.0
MOVE_SPACING = 5.0
WAVE_COUNTDOWN = 3.0
CRITTERS_PER_LEVEL = 10
CRITTER_SPEED = 50.0
EXIT_TOLERANCE = 1.0


class CritterGroup:
    """All critters of the current wave together with the player's gold and wave level."""

    def __init__(self, wave_level: int, player_gold: int, start: Rect, end: Rect) -> None:
        self.wave_level = wave_level
        self.player_gold = player_gold
        self.start_position = replace(start)
        self.end_position = replace(end)
        self.critters: list[Critter] = []
        self.critters_cleared = 0
        self.wave_in_progress = True
        self.wave_countdown = WAVE_COUNTDOWN
        self._spawn_index = 0
        self._spawn_elapsed = 0.0

    def generate_critters(self, start: Rect, end: Rect, delta_time: float) -> None:
        """Spawn the next critter once the delay has passed and the start is clear."""
        self._spawn_elapsed += delta_time
        if self._spawn_elapsed < SPAWN_DELAY:
            return
        if self._spawn_index >= self.wave_level * CRITTERS_PER_LEVEL:
            return

        occupied = any(
            abs(start.x - critter.position.x) < SPAWN_SPACING
            and abs(start.y - critter.position.y) < SPAWN_SPACING
            for critter in self.critters
        )
        if occupied:
            return

        level = self.wave_level
        self.critters.append(
            Critter(level, CRITTER_SPEED, 100 + level * 20, level * 5, level * 10, start, end)
        )
        self._spawn_index += 1
        self._spawn_elapsed = 0.0

    def update(self, delta_time: float, new_end: Rect) -> None:
        """Advance the wave: count down between waves, or move and settle critters."""
        if not self.wave_in_progress:
            self.wave_countdown -= delta_time
            if self.wave_countdown <= 0.0:
                self.wave_in_progress = True
                self.wave_level += 1
            return

        alive = 0
        for critter in list(self.critters):
            if not critter.alive:
                if critter.at_exit:
                    self.player_gold = critter.steal_gold(self.player_gold)
                else:
                    self.player_gold += critter.reward
                self.critters.remove(critter)
                self.critters_cleared += 1
                continue

            alive += 1
            critter.exit_position = replace(new_end)
            critter.move(delta_time, self.critters, MOVE_SPACING)
            if (
                not critter.at_exit
                and abs(critter.position.x - critter.exit_position.x) <= EXIT_TOLERANCE
                and abs(critter.position.y - critter.exit_position.y) <= EXIT_TOLERANCE
            ):
                critter.mark_at_exit(True)

        if alive == 0 and self.critters_cleared >= self.wave_level * CRITTERS_PER_LEVEL:
            self.wave_in_progress = False
            self.wave_countdown = WAVE_COUNTDOWN

    def attack(self, damage: int) -> None:
        """Deal the same damage to every critter."""
        for critter in self.critters:
            critter.take_damage(damage)

    def alive_count(self) -> int:
        return sum(1 for critter in self.critters if critter.alive)

    def hud_lines(self) -> list[str]:
        """Status lines shown on screen for this group."""
        lines = [f"Living Critters: {self.alive_count()}"]
        if not self.wave_in_progress:
            lines.append(f"Next wave in: {math.ceil(self.wave_countdown)}")
        return lines