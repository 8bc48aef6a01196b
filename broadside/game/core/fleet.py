"""Fleet construction, queries and random placement."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from broadside.game.core.board import Board
from broadside.game.core.models import CLOCKWISE_ORDER, Coord, Direction, Player
from broadside.game.core.ship import Ship, footprint

DEFAULT_FLEET_LENGTHS: tuple[int, ...] = (5, 4, 3, 3, 2)


def build_fleet(owner: Player, lengths: Iterable[int]) -> tuple[Ship, ...]:
    """Create the unplaced ships of one player's fleet, ids starting at 1."""
    return tuple(
        Ship(ship_id=ship_id, owner=owner, length=length)
        for ship_id, length in enumerate(lengths, start=1)
    )


def fleet_placed(fleet: Sequence[Ship]) -> bool:
    """Return whether every ship in the fleet is on the board."""
    return all(ship.is_placed for ship in fleet)


def unplaced_ships(fleet: Sequence[Ship]) -> list[Ship]:
    return [ship for ship in fleet if not ship.is_placed]


PlannedPose = tuple[Ship, Coord, Direction]


def random_placement(board: Board, fleet: Sequence[Ship], rng: random.Random) -> list[Ship]:
    """Pose and commit every unplaced ship at random valid positions.

    Returns the ships placed by this call. Raises ``RuntimeError`` without
    touching the board or any ship when no layout is found.
    """
    plan = plan_random_placement(board, fleet, rng)
    return apply_placement(board, plan)


def plan_random_placement(
    board: Board,
    fleet: Sequence[Ship],
    rng: random.Random,
    *,
    attempts: int = 400,
) -> list[PlannedPose]:
    """Pick a pose for every unplaced ship around the board's current contents.

    The board and the ships are left untouched.
    """
    pending = unplaced_ships(fleet)
    if not pending:
        return []
    blocked = _blocked_cells(board)
    for _ in range(attempts):
        plan = _generate_plan(rng, board.size, blocked, pending)
        if plan is not None:
            return plan
    raise RuntimeError(
        f"No room on the board for ships {[ship.ship_id for ship in pending]} after {attempts} attempts."
    )


def apply_placement(board: Board, plan: Sequence[PlannedPose]) -> list[Ship]:
    """Commit planned poses to ``board``; the plan must fit the board as it is."""
    for ship, anchor, facing in plan:
        ship.set_facing(facing)
        ship.set_position(anchor)
        if not board.add_ship(ship.footprint()):
            raise RuntimeError(f"Planned pose for ship {ship.ship_id} no longer fits the board.")
        ship.mark_placed()
    return [ship for ship, _, _ in plan]


def _generate_plan(
    rng: random.Random,
    size: int,
    blocked: set[Coord],
    pending: Sequence[Ship],
) -> list[PlannedPose] | None:
    occupied = set(blocked)
    poses: dict[int, tuple[Coord, Direction]] = {}
    order = list(pending)
    rng.shuffle(order)
    # Longest first; the shuffle only breaks ties between equal lengths.
    order.sort(key=lambda ship: ship.length, reverse=True)

    for ship in order:
        candidates = _candidate_poses(size, occupied, ship.length)
        if not candidates:
            return None
        anchor, facing = rng.choice(candidates)
        poses[id(ship)] = (anchor, facing)
        occupied.update(footprint(anchor, ship.length, facing))

    return [(ship, *poses[id(ship)]) for ship in pending]


def _blocked_cells(board: Board) -> set[Coord]:
    return {
        Coord(x, z)
        for x in range(board.size)
        for z in range(board.size)
        if board.is_filled(Coord(x, z)) or board.is_attacked(Coord(x, z))
    }


def _candidate_poses(size: int, occupied: set[Coord], length: int) -> list[tuple[Coord, Direction]]:
    candidates: list[tuple[Coord, Direction]] = []
    for x in range(size):
        for z in range(size):
            anchor = Coord(x, z)
            for facing in CLOCKWISE_ORDER:
                cells = footprint(anchor, length, facing)
                if all(_inside(cell, size) and cell not in occupied for cell in cells):
                    candidates.append((anchor, facing))
    return candidates


def _inside(coord: Coord, size: int) -> bool:
    return 0 <= coord.x < size and 0 <= coord.z < size
