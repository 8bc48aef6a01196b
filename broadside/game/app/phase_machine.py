"""Match phase progression: placement per player, alternating attacks, game over."""

from __future__ import annotations

import logging

from broadside.game.app.context import MatchContext
from broadside.game.app.events import PhaseChanged, ShipSelectionChanged
from broadside.game.core.fleet import fleet_placed
from broadside.game.core.models import Phase, Player
from broadside.runtime.flow import FlowContext, FlowMachine, FlowTransition

logger = logging.getLogger(__name__)

TRIGGER_START = "start"
TRIGGER_ADVANCE = "advance"
TRIGGER_GAME_OVER = "game_over"


class PhaseStateMachine:
    """Owns ``MatchContext.phase`` and applies the side effects of entering a phase."""

    def __init__(self, context: MatchContext) -> None:
        self._context = context
        self._flow: FlowMachine[Phase] = FlowMachine(
            context.phase,
            terminal_states=frozenset({Phase.GAME_OVER}),
        )
        for transition in self._transitions():
            self._flow.add_transition(transition)

    @property
    def phase(self) -> Phase:
        return self._flow.state

    def start(self) -> bool:
        """Begin the match: START -> PLACEMENT_1."""
        return self._flow.trigger(TRIGGER_START)

    def advance(self) -> bool:
        """Move to the next phase if the current phase allows it."""
        changed = self._flow.trigger(TRIGGER_ADVANCE)
        if not changed:
            logger.debug("phase_advance_rejected phase=%s", self.phase)
        return changed

    def can_advance(self) -> bool:
        return self._flow.resolve(TRIGGER_ADVANCE) is not None

    def force_game_over(self) -> bool:
        """Terminate the match from any non-terminal phase."""
        return self._flow.trigger(TRIGGER_GAME_OVER)

    def _transitions(self) -> tuple[FlowTransition[Phase], ...]:
        enter = self._enter
        return (
            FlowTransition(TRIGGER_START, Phase.START, Phase.PLACEMENT_1, after=enter),
            FlowTransition(
                TRIGGER_ADVANCE,
                Phase.PLACEMENT_1,
                Phase.PLACEMENT_2,
                guard=lambda _: fleet_placed(self._context.fleet(Player.ONE)),
                after=enter,
            ),
            FlowTransition(
                TRIGGER_ADVANCE,
                Phase.PLACEMENT_2,
                Phase.ATTACK_1,
                guard=lambda _: fleet_placed(self._context.fleet(Player.TWO)),
                after=enter,
            ),
            FlowTransition(TRIGGER_ADVANCE, Phase.ATTACK_1, Phase.ATTACK_2, after=enter),
            FlowTransition(TRIGGER_ADVANCE, Phase.ATTACK_2, Phase.ATTACK_1, after=enter),
            FlowTransition(TRIGGER_GAME_OVER, None, Phase.GAME_OVER, after=enter),
        )

    def _enter(self, flow: FlowContext[Phase]) -> None:
        context = self._context
        phase = flow.target
        context.phase = phase

        placing = phase.placement_player
        if context.selected is not None and context.selected.owner is not placing:
            self._clear_selection()
        for ship in context.all_ships():
            ship.selection_enabled = ship.owner is placing and not ship.is_placed

        attacker = phase.attacker
        for player, board in context.boards.items():
            board.set_targetable(attacker is not None and player is attacker.opponent)

        logger.info("phase_changed previous=%s phase=%s", flow.source, phase)
        context.events.publish(PhaseChanged(previous=flow.source, phase=phase))

    def _clear_selection(self) -> None:
        ship = self._context.selected
        if ship is None:
            return
        ship.is_selected = False
        self._context.selected = None
        self._context.events.publish(
            ShipSelectionChanged(owner=ship.owner, ship_id=ship.ship_id, selected=False)
        )
