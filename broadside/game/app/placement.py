"""Selection, posing and committing of pending ships during placement phases."""

from __future__ import annotations

import logging
import random

from broadside.game.app.context import MatchContext
from broadside.game.app.events import CellHovered, ShipPlaced, ShipSelectionChanged, ShipUnplaced
from broadside.game.app.phase_machine import PhaseStateMachine
from broadside.game.core.board import Board
from broadside.game.core.fleet import apply_placement, fleet_placed, plan_random_placement
from broadside.game.core.models import Coord, Player
from broadside.game.core.ship import Ship

logger = logging.getLogger(__name__)


class PlacementController:
    """Tracks the single selected ship and commits it to the placing player's board.

    Committing the last ship of a fleet advances the match phase.
    """

    def __init__(self, context: MatchContext, phases: PhaseStateMachine) -> None:
        self._context = context
        self._phases = phases

    @property
    def selected(self) -> Ship | None:
        return self._context.selected

    def select(self, ship: Ship) -> bool:
        """Select ``ship``, deselecting any previous selection."""
        placing = self._context.phase.placement_player
        if placing is None:
            logger.debug("select_rejected reason=phase phase=%s", self._context.phase)
            return False
        if ship.owner is not placing or ship.is_placed or not ship.selection_enabled:
            logger.debug(
                "select_rejected reason=ship owner=%s ship_id=%s placed=%s",
                ship.owner,
                ship.ship_id,
                ship.is_placed,
            )
            return False
        if self._context.selected is ship:
            return True
        self._clear_selection()
        ship.is_selected = True
        self._context.selected = ship
        self._context.events.publish(
            ShipSelectionChanged(owner=ship.owner, ship_id=ship.ship_id, selected=True)
        )
        return True

    def deselect(self, ship: Ship) -> bool:
        """Release the selected ship, committing it when its position is set.

        A rejected commit keeps the ship selected so the caller can move it and retry.
        """
        placing = self._context.phase.placement_player
        if placing is None or self._context.selected is not ship:
            return False
        if not ship.is_position_set:
            self._clear_selection()
            return True

        board = self._active_board(placing)
        cells = ship.footprint()
        if not board.add_ship(cells):
            logger.debug(
                "placement_rejected owner=%s ship_id=%s anchor=%s facing=%s",
                ship.owner,
                ship.ship_id,
                ship.anchor,
                ship.facing,
            )
            return False

        self._clear_selection()
        ship.mark_placed()
        self._publish_placed(ship, cells)
        self._advance_if_fleet_complete(placing)
        return True

    def set_tentative_position(self, coord: Coord) -> bool:
        """Move the selected ship's anchor; validated only on commit."""
        ship = self._context.selected
        if ship is None or not self._context.phase.is_placement:
            return False
        ship.set_position(coord)
        return True

    def hover_cell(self, owner: Player, coord: Coord) -> bool:
        """Report a hovered cell and drag the selected ship onto it when allowed."""
        self._context.events.publish(CellHovered(owner=owner, coord=coord))
        if owner is not self._context.phase.placement_player:
            return False
        return self.set_tentative_position(coord)

    def rotate(self, direction_delta: int) -> bool:
        """Rotate the selected ship one step; the sign of the delta picks the way."""
        ship = self._context.selected
        if ship is None or direction_delta == 0:
            return False
        ship.rotate(direction_delta)
        return True

    def reset(self) -> bool:
        """Cancel: return the selected ship to its default pose and deselect it."""
        ship = self._context.selected
        if ship is None:
            return False
        ship.reset_pose()
        self._clear_selection()
        self._context.events.publish(ShipUnplaced(owner=ship.owner, ship_id=ship.ship_id))
        return True

    def preview(self) -> tuple[list[Coord], bool] | None:
        """Return the selected ship's tentative cells and whether they would commit."""
        ship = self._context.selected
        placing = self._context.phase.placement_player
        if ship is None or placing is None or not ship.is_position_set:
            return None
        cells = ship.footprint()
        return cells, self._active_board(placing).can_place(cells)

    def auto_place(self, rng: random.Random) -> list[Ship]:
        """Place every remaining ship of the placing player at random valid poses.

        The layout is planned before anything changes, so a ``RuntimeError`` leaves
        the selection, the board and the ships as they were.
        """
        placing = self._context.phase.placement_player
        if placing is None:
            return []
        board = self._active_board(placing)
        plan = plan_random_placement(board, self._context.fleet(placing), rng)
        self._clear_selection()
        placed = apply_placement(board, plan)
        for ship in placed:
            self._publish_placed(ship, ship.footprint())
        self._advance_if_fleet_complete(placing)
        return placed

    def _active_board(self, placing: Player) -> Board:
        return self._context.board(placing)

    def _clear_selection(self) -> None:
        ship = self._context.selected
        if ship is None:
            return
        ship.is_selected = False
        self._context.selected = None
        self._context.events.publish(
            ShipSelectionChanged(owner=ship.owner, ship_id=ship.ship_id, selected=False)
        )

    def _publish_placed(self, ship: Ship, cells: list[Coord]) -> None:
        logger.debug(
            "ship_placed owner=%s ship_id=%s cells=%s",
            ship.owner,
            ship.ship_id,
            [(cell.x, cell.z) for cell in cells],
        )
        self._context.events.publish(
            ShipPlaced(owner=ship.owner, ship_id=ship.ship_id, cells=tuple(cells), facing=ship.facing)
        )

    def _advance_if_fleet_complete(self, placing: Player) -> None:
        if fleet_placed(self._context.fleet(placing)):
            self._phases.advance()
