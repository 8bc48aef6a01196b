"""Attack resolution and turn passing during attack phases."""

from __future__ import annotations

import logging

from broadside.game.app.context import MatchContext
from broadside.game.app.events import CellAttacked
from broadside.game.app.phase_machine import PhaseStateMachine
from broadside.game.core.models import AttackResult, Coord, Phase, Player

logger = logging.getLogger(__name__)


class BattleService:
    """Resolves shots against the opponent's board and hands the turn over.

    Game over is caller-driven unless ``auto_game_over`` is set, in which case a
    shot that destroys a board ends the match instead of passing the turn.
    """

    def __init__(
        self,
        context: MatchContext,
        phases: PhaseStateMachine,
        *,
        auto_game_over: bool = False,
    ) -> None:
        self._context = context
        self._phases = phases
        self._auto_game_over = auto_game_over

    def fire(self, attacker: Player, coord: Coord) -> AttackResult:
        """Attack ``coord`` on the opponent's board on behalf of ``attacker``."""
        phase = self._context.phase
        if phase.attacker is not attacker:
            logger.debug("attack_rejected reason=turn attacker=%s phase=%s", attacker, phase)
            return AttackResult.INVALID

        target = attacker.opponent
        board = self._context.board(target)
        if not board.in_bounds(coord):
            logger.debug("attack_rejected reason=bounds attacker=%s coord=%s", attacker, coord)
            return AttackResult.INVALID
        if board.is_attacked(coord):
            logger.debug("attack_rejected reason=repeat attacker=%s coord=%s", attacker, coord)
            return AttackResult.REPEAT

        hit = board.attack_cell(coord)
        result = AttackResult.HIT if hit else AttackResult.MISS
        sunk = hit and board.is_ship_sunk(coord)
        logger.info(
            "cell_attacked attacker=%s coord=(%s, %s) result=%s sunk=%s",
            attacker,
            coord.x,
            coord.z,
            result,
            sunk,
        )
        self._context.events.publish(CellAttacked(owner=target, coord=coord, result=result, sunk=sunk))

        if self._auto_game_over and board.is_destroyed():
            self._phases.force_game_over()
        else:
            self._phases.advance()
        return result

    def is_fleet_destroyed(self, player: Player) -> bool:
        """Return whether every ship cell on ``player``'s board has been hit."""
        return self._context.board(player).is_destroyed()

    def winner(self) -> Player | None:
        """Return the player whose opponent's fleet is destroyed, if any."""
        for player in (Player.ONE, Player.TWO):
            board = self._context.board(player.opponent)
            if board.ships and board.is_destroyed():
                return player
        return None

    @property
    def is_over(self) -> bool:
        return self._context.phase is Phase.GAME_OVER
