"""Tower workshop: buy, upgrade and sell towers against stationary targets."""

from __future__ import annotations

import enum
from typing import Optional

from towerdef.dummy_critter import DummyCritter
from towerdef.gridmap import SCREEN_WIDTH
from towerdef.tower import TOWER_SIZE, Tower
from towerdef.tower_kinds import CannonTower, RapidFireTower, StandardTower

STANDARD_TOWER_COST = 25
RAPID_FIRE_TOWER_COST = 50
CANNON_TOWER_COST = 100
STARTING_COINS = 700

BUTTON_X_SPACING = 50
BUTTON_Y_SPACING = 10
# Buttons are laid out with the tower-button width but clicked over the
# generic button's area.
LAYOUT_BUTTON_WIDTH = 100
HIT_BUTTON_WIDTH = 200
HIT_BUTTON_HEIGHT = 100

DUMMY_CRITTER_HEALTH = 40
DUMMY_CRITTER_POSITIONS = ((100, 100), (300, 100), (100, 300), (300, 300))


class Action(enum.IntEnum):
    """What a workshop button selects."""

    STANDARD = 0
    RAPID_FIRE = 1
    CANNON = 2
    SELL = 3
    UPGRADE = 4


_LABELS = {
    Action.STANDARD: "regular",
    Action.RAPID_FIRE: "rapid fire",
    Action.CANNON: "cannon",
    Action.SELL: "sell",
    Action.UPGRADE: "upgrade",
}

_PURCHASES = {
    Action.STANDARD: (StandardTower, STANDARD_TOWER_COST, "StandardTower"),
    Action.RAPID_FIRE: (RapidFireTower, RAPID_FIRE_TOWER_COST, "RapidFireTower"),
    Action.CANNON: (CannonTower, CANNON_TOWER_COST, "CannonTower"),
}


class TowerWorkshop:
    """A sandbox with a coin purse, placed towers and four target dummies."""

    def __init__(self, coins: int = STARTING_COINS) -> None:
        self.coins = coins
        self.towers: list[Tower] = []
        self.critters: list[DummyCritter] = [
            DummyCritter(x, y, DUMMY_CRITTER_HEALTH) for x, y in DUMMY_CRITTER_POSITIONS
        ]
        self.selection: Optional[Action] = None
        self.buttons: dict[Action, tuple[float, float]] = {
            action: (
                SCREEN_WIDTH - LAYOUT_BUTTON_WIDTH - BUTTON_X_SPACING,
                action * (HIT_BUTTON_HEIGHT + BUTTON_Y_SPACING),
            )
            for action in Action
        }
        self.log: list[str] = [f"Starting coins: {coins}"]

    @staticmethod
    def label(action: Action) -> str:
        return _LABELS[action]

    def button_at(self, x: float, y: float) -> Optional[Action]:
        """The button under the point, edges included, or None."""
        for action, (bx, by) in self.buttons.items():
            if bx <= x <= bx + HIT_BUTTON_WIDTH and by <= y <= by + HIT_BUTTON_HEIGHT:
                return action
        return None

    def click(self, x: float, y: float) -> list[str]:
        """Handle a left click and return the messages it produced."""
        messages: list[str] = []

        button = self.button_at(x, y)
        if button is not None:
            self.selection = button

        index = 0
        while index < len(self.towers):
            tower = self.towers[index]
            if tower.contains_point(x, y):
                if self.selection == Action.SELL:
                    self.coins += tower.refund_value()
                    del self.towers[index]
                    messages.append(f"Current coins: {self.coins}")
                elif self.selection == Action.UPGRADE:
                    messages.extend(self._upgrade(tower))
            index += 1

        if button is None and self.selection in _PURCHASES:
            messages.extend(self._buy(self.selection, x, y))

        self.log.extend(messages)
        return messages

    def _upgrade(self, tower: Tower) -> list[str]:
        messages = []
        cost = tower.upgrade_cost()
        if self.coins >= cost:
            if tower.upgrade():
                messages.append("Upgrading tower")
                self.coins -= cost
            else:
                messages.append("Could not upgrade Tower")
        else:
            messages.append("Not enough coins for Tower upgrade")
        messages.append(f"Current coins: {self.coins}")
        return messages

    def _buy(self, action: Action, x: float, y: float) -> list[str]:
        kind, cost, name = _PURCHASES[action]
        messages = []
        if self.coins >= cost:
            self.coins -= cost
            messages.append(f"Placing down {name}")
            half = TOWER_SIZE // 2
            self.towers.append(kind(x - half, y - half, cost))
        else:
            messages.append(f"Not enough coins for {name}")
        messages.append(f"Current coins: {self.coins}")
        return messages

    def update(self) -> None:
        """Let every tower fire at its target, then drop defeated dummies.

        A dummy that directly follows a removed one is checked on the next update.
        """
        for tower in self.towers:
            target = tower.find_critter(self.critters) if self.critters else None
            if target is not None:
                tower.shoot_projectile(target)
            else:
                tower.clear_projectiles()

        index = 0
        while index < len(self.critters):
            if self.critters[index].health <= 0:
                del self.critters[index]
            index += 1