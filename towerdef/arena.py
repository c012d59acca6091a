"""Arena with a moving spawn and exit, critter waves and buyable towers."""

from __future__ import annotations

import enum

from towerdef.critter_group import CritterGroup
from towerdef.critter_tower import CritterTower
from towerdef.geometry import Rect
from towerdef.gridmap import SCREEN_WIDTH

STARTING_GOLD = 100
STARTING_WAVE = 1
SQUARE_SIZE = 50.0
SQUARE_Y = 300.0
KEY_STEP = 10.0

TOWER_COST = 20
TOWER_DAMAGE = 20
TOWER_RANGE = 150.0
TOWER_FIRE_RATE = 1.5
TOWER_SIZE = 50.0

SPAWN_DELTA = 0.16
FRAME_DELTA = 0.016


class Key(enum.Enum):
    """Keys that move the spawn (W/S) and exit (UP/DOWN) squares."""

    W = "w"
    S = "s"
    UP = "up"
    DOWN = "down"


class Arena:
    """Critters run from the start square to the end square past player towers."""

    def __init__(self) -> None:
        self.start = Rect(0.0, SQUARE_Y, SQUARE_SIZE, SQUARE_SIZE)
        self.end = Rect(SCREEN_WIDTH - SQUARE_SIZE, SQUARE_Y, SQUARE_SIZE, SQUARE_SIZE)
        self.critter_group = CritterGroup(STARTING_WAVE, STARTING_GOLD, self.start, self.end)
        self.towers: list[CritterTower] = []
        self.warning_message = ""

    @property
    def player_gold(self) -> int:
        return self.critter_group.player_gold

    @player_gold.setter
    def player_gold(self, value: int) -> None:
        self.critter_group.player_gold = value

    @property
    def wave_level(self) -> int:
        return self.critter_group.wave_level

    def handle_key(self, key: Key) -> None:
        """Shift the start or end square by one step."""
        if key is Key.W:
            self.start.y -= KEY_STEP
        elif key is Key.S:
            self.start.y += KEY_STEP
        elif key is Key.UP:
            self.end.y -= KEY_STEP
        elif key is Key.DOWN:
            self.end.y += KEY_STEP

    def place_tower(self, x: float, y: float) -> bool:
        """Buy a tower at the pixel position unless unaffordable or too close to another."""
        if not CritterTower.can_buy(self.player_gold, TOWER_COST):
            return False
        spot = Rect(float(int(x)), float(int(y)), TOWER_SIZE, TOWER_SIZE)
        for tower in self.towers:
            if (
                abs(spot.x - tower.position.x) < TOWER_SIZE
                and abs(spot.y - tower.position.y) < TOWER_SIZE
            ):
                return False
        self.player_gold = CritterTower.buy_tower(self.player_gold, TOWER_COST)
        self.towers.append(
            CritterTower(TOWER_COST, TOWER_DAMAGE, TOWER_RANGE, TOWER_FIRE_RATE, spot)
        )
        return True

    def sell_tower(self, x: float, y: float) -> bool:
        """Sell the first tower near the pixel position for half its cost."""
        x, y = int(x), int(y)
        for tower in self.towers:
            if abs(tower.position.x - x) < TOWER_SIZE and abs(tower.position.y - y) < TOWER_SIZE:
                self.player_gold = CritterTower.sell_tower(self.player_gold, tower.cost // 2)
                self.towers.remove(tower)
                return True
        return False

    def update(self) -> None:
        """Advance one frame: spawn, move critters and let towers fire."""
        self.critter_group.generate_critters(self.start, self.end, SPAWN_DELTA)
        self.critter_group.update(FRAME_DELTA, self.end)
        for tower in self.towers:
            tower.update(FRAME_DELTA, self.critter_group.critters)

    def hud(self) -> list[str]:
        """Text lines shown on screen: gold, wave, critter status and any warning."""
        lines = [f"Gold: {self.player_gold}", f"Wave: {self.wave_level}"]
        lines.extend(self.critter_group.hud_lines())
        if self.warning_message:
            lines.append(self.warning_message)
        return lines