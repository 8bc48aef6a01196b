"""Outbound notifications for presentation collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from broadside.game.core.models import AttackResult, Coord, Direction, Phase, Player


@dataclass(frozen=True, slots=True)
class MatchEvent:
    """Base class for every match notification."""


@dataclass(frozen=True, slots=True)
class CellHovered(MatchEvent):
    """Pointer is over a cell. Informational only."""

    owner: Player
    coord: Coord


@dataclass(frozen=True, slots=True)
class PhaseChanged(MatchEvent):
    previous: Phase
    phase: Phase


@dataclass(frozen=True, slots=True)
class ShipSelectionChanged(MatchEvent):
    owner: Player
    ship_id: int
    selected: bool


@dataclass(frozen=True, slots=True)
class ShipPlaced(MatchEvent):
    owner: Player
    ship_id: int
    cells: tuple[Coord, ...]
    facing: Direction


@dataclass(frozen=True, slots=True)
class ShipUnplaced(MatchEvent):
    """Pending ship returned to its default, unpositioned pose."""

    owner: Player
    ship_id: int


@dataclass(frozen=True, slots=True)
class CellAttacked(MatchEvent):
    owner: Player
    coord: Coord
    result: AttackResult
    sunk: bool = False
