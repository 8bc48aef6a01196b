from __future__ import annotations

import random

import pytest

from broadside.game.app.events import MatchEvent
from broadside.game.app.match import Match, create_match
from broadside.game.core.models import Coord, Direction, Phase, Player
from broadside.game.core.ship import Ship
from broadside.game.infra.config import MatchConfig


def place_ship(match: Match, ship: Ship, anchor: Coord, facing: Direction = Direction.RIGHT) -> bool:
    """Drive the placement controller the way a host would."""
    assert match.placement.select(ship)
    while ship.facing is not facing:
        match.placement.rotate(1)
    assert match.placement.set_tentative_position(anchor)
    return match.placement.deselect(ship)


def small_config(**overrides) -> MatchConfig:
    values: dict[str, object] = {"board_size": 5, "fleet_one": (3, 2), "fleet_two": (3, 2)}
    values.update(overrides)
    return MatchConfig(**values)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def match_factory():
    def _make(**overrides) -> Match:
        match = create_match(small_config(**overrides))
        match.start()
        return match

    return _make


@pytest.fixture
def recorded_events(match_factory):
    """Started small match plus the list of every event it publishes."""
    match = match_factory()
    seen: list[MatchEvent] = []
    match.events.subscribe(MatchEvent, seen.append)
    return match, seen


@pytest.fixture
def battle_match(match_factory) -> Match:
    """Small match with both fleets placed along rows z=0 and z=2, in ATTACK_1."""
    match = match_factory()
    for player in (Player.ONE, Player.TWO):
        three, two = match.fleet(player)
        assert place_ship(match, three, Coord(0, 0))
        assert place_ship(match, two, Coord(0, 2))
    assert match.phase is Phase.ATTACK_1
    return match
