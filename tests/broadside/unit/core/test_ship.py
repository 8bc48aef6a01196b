import pytest

from broadside.game.core.models import Coord, Direction, Player
from broadside.game.core.ship import Ship, footprint


def test_footprint_extends_along_facing() -> None:
    anchor = Coord(2, 2)
    assert footprint(anchor, 3, Direction.UP) == [Coord(2, 2), Coord(2, 3), Coord(2, 4)]
    assert footprint(anchor, 3, Direction.DOWN) == [Coord(2, 2), Coord(2, 1), Coord(2, 0)]
    assert footprint(anchor, 3, Direction.LEFT) == [Coord(2, 2), Coord(1, 2), Coord(0, 2)]
    assert footprint(anchor, 3, Direction.RIGHT) == [Coord(2, 2), Coord(3, 2), Coord(4, 2)]


def test_footprint_rejects_invalid_facing_and_length() -> None:
    with pytest.raises(ValueError):
        footprint(Coord(0, 0), 2, "DIAGONAL")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        footprint(Coord(0, 0), 0, Direction.UP)


def test_ship_defaults_and_unset_anchor() -> None:
    ship = Ship(ship_id=1, owner=Player.ONE, length=2)
    assert ship.facing is Direction.RIGHT
    assert not ship.is_position_set
    with pytest.raises(RuntimeError):
        ship.footprint()


def test_ship_pose_changes_and_reset() -> None:
    ship = Ship(ship_id=1, owner=Player.ONE, length=2)
    ship.set_position(Coord(1, 1))
    ship.rotate(1)
    assert ship.facing is Direction.DOWN
    assert ship.footprint() == [Coord(1, 1), Coord(1, 0)]

    ship.reset_pose()
    assert ship.facing is Direction.RIGHT
    assert ship.anchor is None


def test_placed_ship_pose_is_frozen() -> None:
    ship = Ship(ship_id=1, owner=Player.TWO, length=2, anchor=Coord(0, 0))
    ship.mark_placed()
    assert ship.is_placed and not ship.selection_enabled
    with pytest.raises(RuntimeError):
        ship.rotate(1)
    with pytest.raises(RuntimeError):
        ship.set_position(Coord(2, 2))
    with pytest.raises(RuntimeError):
        ship.set_facing(Direction.UP)
    assert ship.facing is Direction.RIGHT


def test_ship_rejects_non_positive_length() -> None:
    with pytest.raises(ValueError):
        Ship(ship_id=1, owner=Player.ONE, length=0)


def test_set_facing_changes_unplaced_pose() -> None:
    ship = Ship(ship_id=1, owner=Player.ONE, length=3)
    ship.set_facing(Direction.LEFT)
    ship.set_position(Coord(4, 0))
    assert ship.footprint() == [Coord(4, 0), Coord(3, 0), Coord(2, 0)]
