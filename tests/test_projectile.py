import pytest

from towerdef.dummy_critter import CRITTER_SIZE
from towerdef.geometry import Rect
from towerdef.gridmap import SCREEN_HEIGHT, SCREEN_WIDTH
from towerdef.projectile import DEFAULT_SIZE, Projectile


def test_default_size_is_three():
    shot = Projectile(1.0, 2.0, 5)
    assert shot.size == 3
    assert shot.size == DEFAULT_SIZE
    assert shot.is_area is False


def test_move_adds_offsets():
    shot = Projectile(10.0, 20.0, 1, False)
    shot.move(2.5, -4.0)
    assert shot.x == pytest.approx(12.5)
    assert shot.y == pytest.approx(16.0)


def test_rect_matches_position_and_size():
    shot = Projectile(7.0, 9.0, 1, False, 6)
    assert shot.rect() == Rect(7.0, 9.0, 6, 6)


@pytest.mark.parametrize(
    "x, y, outside",
    [
        (0.0, 0.0, False),
        (SCREEN_WIDTH, SCREEN_HEIGHT, False),
        (-0.5, 10.0, True),
        (10.0, -0.5, True),
        (SCREEN_WIDTH + 1, 10.0, True),
        (10.0, SCREEN_HEIGHT + 1, True),
    ],
)
def test_is_outside_bounds(x, y, outside):
    assert Projectile(x, y, 1, False).is_outside() is outside


def test_collides_when_on_target():
    shot = Projectile(100.0, 100.0, 1, False)
    assert shot.collides_with(100.0, 100.0) is True


def test_no_collision_far_away():
    shot = Projectile(0.0, 0.0, 1, False)
    assert shot.collides_with(200.0, 200.0) is False


def test_collision_edges_are_exclusive():
    right_edge = Projectile(50.0 + CRITTER_SIZE, 50.0, 1, False)
    assert right_edge.collides_with(50.0, 50.0) is False
    left_edge = Projectile(50.0 - DEFAULT_SIZE, 50.0, 1, False)
    assert left_edge.collides_with(50.0, 50.0) is False
    just_inside = Projectile(50.0 + CRITTER_SIZE - 0.5, 50.0, 1, False)
    assert just_inside.collides_with(50.0, 50.0) is True