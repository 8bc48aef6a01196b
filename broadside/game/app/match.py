"""Match composition: boards, fleets and the controllers that drive them."""

from __future__ import annotations

import logging

from broadside.game.app.battle import BattleService
from broadside.game.app.context import MatchContext
from broadside.game.app.phase_machine import PhaseStateMachine
from broadside.game.app.placement import PlacementController
from broadside.game.core.board import Board
from broadside.game.core.fleet import build_fleet
from broadside.game.core.models import Phase, Player
from broadside.game.core.ship import Ship
from broadside.game.infra.config import MatchConfig
from broadside.runtime.events import EventBus

logger = logging.getLogger(__name__)


class Match:
    """One two-player match. Hosts call its controllers directly."""

    def __init__(self, config: MatchConfig, context: MatchContext) -> None:
        self.config = config
        self.context = context
        self.phases = PhaseStateMachine(context)
        self.placement = PlacementController(context, self.phases)
        self.battle = BattleService(context, self.phases, auto_game_over=config.auto_game_over)

    @property
    def phase(self) -> Phase:
        return self.context.phase

    @property
    def events(self) -> EventBus:
        return self.context.events

    def board(self, player: Player) -> Board:
        return self.context.board(player)

    def fleet(self, player: Player) -> tuple[Ship, ...]:
        return self.context.fleet(player)

    def start(self) -> bool:
        return self.phases.start()


def create_match(config: MatchConfig | None = None, events: EventBus | None = None) -> Match:
    """Create a match in the START phase with both boards initialized."""
    config = config or MatchConfig()
    boards: dict[Player, Board] = {}
    for player in (Player.ONE, Player.TWO):
        board = Board()
        board.initialize(config.board_size)
        boards[player] = board
    context = MatchContext(
        boards=boards,
        fleets={
            Player.ONE: build_fleet(Player.ONE, config.fleet_one),
            Player.TWO: build_fleet(Player.TWO, config.fleet_two),
        },
        events=events or EventBus(),
    )
    logger.info(
        "match_created board_size=%s fleet_one=%s fleet_two=%s auto_game_over=%s",
        config.board_size,
        list(config.fleet_one),
        list(config.fleet_two),
        config.auto_game_over,
    )
    return Match(config, context)
