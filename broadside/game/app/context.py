"""Shared match state handed to each app-layer component at construction."""

from __future__ import annotations

from dataclasses import dataclass, field

from broadside.game.core.board import Board
from broadside.game.core.models import Phase, Player
from broadside.game.core.ship import Ship
from broadside.runtime.events import EventBus


@dataclass(slots=True)
class MatchContext:
    """Runtime match state.

    ``phase`` is written only by the phase machine and ``selected`` only by the
    phase machine and placement controller.
    """

    boards: dict[Player, Board]
    fleets: dict[Player, tuple[Ship, ...]]
    events: EventBus = field(default_factory=EventBus)
    phase: Phase = Phase.START
    selected: Ship | None = None

    def board(self, player: Player) -> Board:
        return self.boards[player]

    def fleet(self, player: Player) -> tuple[Ship, ...]:
        return self.fleets[player]

    def all_ships(self) -> tuple[Ship, ...]:
        return self.fleets[Player.ONE] + self.fleets[Player.TWO]
