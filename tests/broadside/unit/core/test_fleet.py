import random

import pytest

from broadside.game.core.board import Board
from broadside.game.core.fleet import (
    DEFAULT_FLEET_LENGTHS,
    build_fleet,
    fleet_placed,
    plan_random_placement,
    random_placement,
    unplaced_ships,
)
from broadside.game.core.models import Coord, Direction, Player


def test_build_fleet_assigns_ids_and_owner() -> None:
    fleet = build_fleet(Player.TWO, DEFAULT_FLEET_LENGTHS)
    assert [ship.length for ship in fleet] == [5, 4, 3, 3, 2]
    assert [ship.ship_id for ship in fleet] == [1, 2, 3, 4, 5]
    assert all(ship.owner is Player.TWO for ship in fleet)
    assert not fleet_placed(fleet)
    assert unplaced_ships(fleet) == list(fleet)


def test_random_placement_places_whole_fleet(seeded_rng) -> None:
    board = Board()
    board.initialize(10)
    fleet = build_fleet(Player.ONE, DEFAULT_FLEET_LENGTHS)

    placed = random_placement(board, fleet, seeded_rng)

    assert placed == list(fleet)
    assert fleet_placed(fleet)
    assert len(board.ships) == len(fleet)
    assert board.remaining_ship_cells() == sum(DEFAULT_FLEET_LENGTHS)


def test_random_placement_skips_already_placed_ships(seeded_rng) -> None:
    board = Board()
    board.initialize(6)
    fleet = build_fleet(Player.ONE, (3, 2))
    random_placement(board, fleet[:1], seeded_rng)

    placed = random_placement(board, fleet, seeded_rng)

    assert placed == [fleet[1]]
    assert board.remaining_ship_cells() == 5


def test_random_placement_raises_when_board_is_full(seeded_rng) -> None:
    board = Board()
    board.initialize(2)
    fleet = build_fleet(Player.ONE, (2, 2, 2))
    with pytest.raises(RuntimeError):
        random_placement(board, fleet, seeded_rng)


def test_failed_random_placement_leaves_board_and_ships_untouched(seeded_rng) -> None:
    board = Board()
    board.initialize(3)
    fleet = build_fleet(Player.ONE, (3, 3, 3, 2))
    fleet[0].set_position(Coord(0, 0))
    assert board.add_ship(fleet[0].footprint())
    fleet[0].mark_placed()
    fleet[1].set_facing(Direction.DOWN)
    fleet[1].set_position(Coord(2, 0))

    with pytest.raises(RuntimeError):
        random_placement(board, fleet, seeded_rng)

    assert board.ships == ((Coord(0, 0), Coord(1, 0), Coord(2, 0)),)
    assert board.remaining_ship_cells() == 3
    assert [ship.is_placed for ship in fleet] == [True, False, False, False]
    assert fleet[1].anchor == Coord(2, 0)
    assert fleet[1].facing is Direction.DOWN
    assert all(ship.anchor is None for ship in fleet[2:])


def test_plan_random_placement_does_not_mutate(seeded_rng) -> None:
    board = Board()
    board.initialize(5)
    fleet = build_fleet(Player.ONE, (3, 2))

    plan = plan_random_placement(board, fleet, seeded_rng)

    assert [ship for ship, _, _ in plan] == list(fleet)
    assert board.ships == ()
    assert all(ship.anchor is None and not ship.is_placed for ship in fleet)


def test_random_placement_fills_tight_board_or_nothing() -> None:
    # A 4x4 board holds eight dominoes only as a perfect tiling, so greedy runs
    # regularly strand a cell and must be retried.
    for seed in range(20):
        board = Board()
        board.initialize(4)
        fleet = build_fleet(Player.ONE, (2,) * 8)
        try:
            random_placement(board, fleet, random.Random(seed))
        except RuntimeError:
            assert board.ships == ()
            assert not any(ship.is_placed for ship in fleet)
        else:
            assert fleet_placed(fleet)
            assert board.remaining_ship_cells() == 16
