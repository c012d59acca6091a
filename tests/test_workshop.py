import pytest

from towerdef.tower import TOWER_SIZE
from towerdef.tower_kinds import CannonTower, StandardTower
from towerdef.workshop import (
    CANNON_TOWER_COST,
    RAPID_FIRE_TOWER_COST,
    STANDARD_TOWER_COST,
    STARTING_COINS,
    Action,
    TowerWorkshop,
)


def _press(shop, action):
    bx, by = shop.buttons[action]
    shop.click(bx + 1, by + 1)


def test_initial_state():
    shop = TowerWorkshop()
    assert shop.coins == STARTING_COINS
    assert [(c.x, c.y) for c in shop.critters] == [(100, 100), (300, 100), (100, 300), (300, 300)]
    assert all(c.health == 40 for c in shop.critters)
    assert shop.log == [f"Starting coins: {STARTING_COINS}"]


@pytest.mark.parametrize("action", list(Action))
def test_button_at_finds_each_button(action):
    shop = TowerWorkshop()
    bx, by = shop.buttons[action]
    assert shop.button_at(bx, by) == action
    assert shop.button_at(bx + 5, by + 5) == action


def test_button_at_misses():
    shop = TowerWorkshop()
    assert shop.button_at(0, 0) is None


def test_labels():
    assert TowerWorkshop.label(Action.RAPID_FIRE) == "rapid fire"
    assert TowerWorkshop.label(Action.STANDARD) == "regular"


def test_place_standard_tower():
    shop = TowerWorkshop()
    _press(shop, Action.STANDARD)
    messages = shop.click(200, 200)
    assert len(shop.towers) == 1
    tower = shop.towers[0]
    assert isinstance(tower, StandardTower)
    assert (tower.x, tower.y) == (200 - TOWER_SIZE // 2, 200 - TOWER_SIZE // 2)
    assert shop.coins == STARTING_COINS - STANDARD_TOWER_COST
    assert messages[0] == "Placing down StandardTower"
    assert messages[-1] == f"Current coins: {shop.coins}"


def test_clicking_scenery_without_selection_places_nothing():
    shop = TowerWorkshop()
    assert shop.click(200, 200) == []
    assert shop.towers == []
    assert shop.coins == STARTING_COINS


def test_not_enough_coins():
    shop = TowerWorkshop(coins=10)
    _press(shop, Action.RAPID_FIRE)
    messages = shop.click(200, 200)
    assert shop.towers == []
    assert shop.coins == 10
    assert "Not enough coins for RapidFireTower" in messages
    assert RAPID_FIRE_TOWER_COST > 10


def test_sell_tower_refunds():
    shop = TowerWorkshop()
    _press(shop, Action.CANNON)
    shop.click(200, 200)
    refund = shop.towers[0].refund_value()
    _press(shop, Action.SELL)
    shop.click(200, 200)
    assert shop.towers == []
    assert shop.coins == STARTING_COINS - CANNON_TOWER_COST + refund


def test_upgrade_tower():
    shop = TowerWorkshop()
    _press(shop, Action.STANDARD)
    shop.click(200, 200)
    tower = shop.towers[0]
    cost = tower.upgrade_cost()
    _press(shop, Action.UPGRADE)
    messages = shop.click(200, 200)
    assert tower.level == 2
    assert "Upgrading tower" in messages
    assert shop.coins == STARTING_COINS - STANDARD_TOWER_COST - cost
    assert len(shop.towers) == 1


def test_upgrade_stops_at_max_level():
    shop = TowerWorkshop(coins=5000)
    _press(shop, Action.CANNON)
    shop.click(200, 200)
    tower = shop.towers[0]
    assert isinstance(tower, CannonTower)
    _press(shop, Action.UPGRADE)
    for _ in range(tower.MAX_LEVEL - 1):
        shop.click(200, 200)
    assert tower.level == tower.MAX_LEVEL
    coins = shop.coins
    messages = shop.click(200, 200)
    assert "Could not upgrade Tower" in messages
    assert shop.coins == coins


def test_upgrade_without_coins():
    shop = TowerWorkshop(coins=STANDARD_TOWER_COST)
    _press(shop, Action.STANDARD)
    shop.click(200, 200)
    _press(shop, Action.UPGRADE)
    messages = shop.click(200, 200)
    assert "Not enough coins for Tower upgrade" in messages
    assert shop.towers[0].level == 1


def test_update_defeats_target_in_range():
    shop = TowerWorkshop()
    _press(shop, Action.STANDARD)
    shop.click(150, 107)
    for _ in range(2000):
        shop.update()
    assert [(c.x, c.y) for c in shop.critters] == [(300, 100), (100, 300), (300, 300)]
    assert all(c.health == 40 for c in shop.critters)
    assert shop.towers[0].projectiles == []


def test_update_without_towers_changes_nothing():
    shop = TowerWorkshop()
    shop.update()
    assert len(shop.critters) == 4