from towerdef.critter import Critter
from towerdef.critter_group import CritterGroup
from towerdef.geometry import Rect

START = Rect(0.0, 300.0, 50.0, 50.0)
END = Rect(670.0, 300.0, 50.0, 50.0)


def make_group(level=1, gold=100):
    return CritterGroup(level, gold, START, END)


def add_critters(group, count, spacing=200.0):
    for i in range(count):
        group.critters.append(
            Critter(1, 50.0, 10, 5, 10, Rect(i * spacing, 0.0, 50.0, 50.0), Rect(i * spacing, 500.0, 50.0, 50.0))
        )


def test_no_spawn_before_delay():
    group = make_group()
    group.generate_critters(START, END, 4.0)
    assert group.critters == []


def test_spawn_after_delay_uses_wave_level():
    group = make_group()
    group.generate_critters(START, END, 5.0)
    assert len(group.critters) == 1
    critter = group.critters[0]
    assert critter.hit_points == 120
    assert critter.position == START


def test_spawn_blocked_when_start_occupied():
    group = make_group()
    group.generate_critters(START, END, 5.0)
    group.generate_critters(START, END, 5.0)
    assert len(group.critters) == 1
    group.critters[0].position.x = 500.0
    group.generate_critters(START, END, 0.1)
    assert len(group.critters) == 2


def test_spawn_limited_per_wave():
    group = make_group(level=1)
    for _ in range(30):
        group.generate_critters(START, END, 5.0)
        for critter in group.critters:
            critter.position.x = 1000.0
    assert len(group.critters) == 10


def test_dead_critter_pays_reward():
    group = make_group(gold=100)
    add_critters(group, 1)
    reward = group.critters[0].reward
    group.attack(1000)
    group.update(0.016, END)
    assert group.critters == []
    assert group.player_gold == 100 + reward


def test_critter_at_exit_steals_gold():
    group = make_group(gold=100)
    group.critters.append(Critter(1, 50.0, 10, 5, 10, END, END))
    strength = group.critters[0].strength
    group.update(0.016, END)
    assert group.critters[0].at_exit
    assert group.player_gold == 100
    group.update(0.016, END)
    assert group.critters == []
    assert group.player_gold == 100 - strength


def test_alive_critters_move_to_new_end():
    group = make_group()
    add_critters(group, 1)
    new_end = Rect(0.0, 600.0, 50.0, 50.0)
    group.update(0.5, new_end)
    critter = group.critters[0]
    assert critter.exit_position == new_end
    assert critter.position.y > 0.0


def test_wave_ends_and_countdown_starts_new_wave():
    group = make_group(level=1, gold=0)
    add_critters(group, 10)
    group.attack(1000)
    group.update(0.016, END)
    assert not group.wave_in_progress
    assert group.hud_lines() == ["Living Critters: 0", "Next wave in: 3"]
    group.update(1.0, END)
    assert group.wave_level == 1
    group.update(2.5, END)
    assert group.wave_in_progress
    assert group.wave_level == 2


def test_wave_continues_until_enough_cleared():
    group = make_group(level=1)
    add_critters(group, 3)
    group.attack(1000)
    group.update(0.016, END)
    assert group.wave_in_progress
    assert group.critters_cleared == 3


def test_alive_count_and_hud():
    group = make_group()
    add_critters(group, 3)
    group.critters[0].take_damage(100)
    assert group.alive_count() == 2
    assert group.hud_lines() == [f"Living Critters: {group.alive_count()}"]