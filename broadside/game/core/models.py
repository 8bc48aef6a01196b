"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate. ``x`` runs across the board, ``z`` along it."""

    x: int
    z: int

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.z + other.z)

    def scaled(self, factor: int) -> Coord:
        return Coord(self.x * factor, self.z * factor)


class Direction(StrEnum):
    """Axis and sign along which a ship extends from its anchor."""

    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"

    @property
    def step(self) -> Coord:
        return DIRECTION_STEPS[self]

    def rotated(self, delta: int) -> Direction:
        """Rotate one step clockwise (delta > 0) or counterclockwise (delta < 0)."""
        if delta == 0:
            return self
        index = CLOCKWISE_ORDER.index(self)
        step = 1 if delta > 0 else -1
        return CLOCKWISE_ORDER[(index + step) % len(CLOCKWISE_ORDER)]


DIRECTION_STEPS: dict[Direction, Coord] = {
    Direction.UP: Coord(0, 1),
    Direction.RIGHT: Coord(1, 0),
    Direction.DOWN: Coord(0, -1),
    Direction.LEFT: Coord(-1, 0),
}

CLOCKWISE_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)

DEFAULT_FACING = Direction.RIGHT


class Player(StrEnum):
    """Match participant."""

    ONE = "ONE"
    TWO = "TWO"

    @property
    def opponent(self) -> Player:
        return OPPONENTS[self]


OPPONENTS: dict[Player, Player] = {
    Player.ONE: Player.TWO,
    Player.TWO: Player.ONE,
}


class Phase(StrEnum):
    """Match phases, in progression order."""

    START = "START"
    PLACEMENT_1 = "PLACEMENT_1"
    PLACEMENT_2 = "PLACEMENT_2"
    ATTACK_1 = "ATTACK_1"
    ATTACK_2 = "ATTACK_2"
    GAME_OVER = "GAME_OVER"

    @property
    def placement_player(self) -> Player | None:
        """Player placing ships in this phase, if any."""
        return PLACEMENT_PLAYERS[self]

    @property
    def attacker(self) -> Player | None:
        """Player firing in this phase, if any."""
        return ATTACKERS[self]

    @property
    def is_placement(self) -> bool:
        return self.placement_player is not None

    @property
    def is_attack(self) -> bool:
        return self.attacker is not None


PLACEMENT_PLAYERS: dict[Phase, Player | None] = {
    Phase.START: None,
    Phase.PLACEMENT_1: Player.ONE,
    Phase.PLACEMENT_2: Player.TWO,
    Phase.ATTACK_1: None,
    Phase.ATTACK_2: None,
    Phase.GAME_OVER: None,
}

ATTACKERS: dict[Phase, Player | None] = {
    Phase.START: None,
    Phase.PLACEMENT_1: None,
    Phase.PLACEMENT_2: None,
    Phase.ATTACK_1: Player.ONE,
    Phase.ATTACK_2: Player.TWO,
    Phase.GAME_OVER: None,
}


class AttackResult(StrEnum):
    """Result of a single attack request."""

    MISS = "MISS"
    HIT = "HIT"
    REPEAT = "REPEAT"
    INVALID = "INVALID"

    @property
    def accepted(self) -> bool:
        """Whether the attack was resolved against the board."""
        return self in (AttackResult.MISS, AttackResult.HIT)


@dataclass(frozen=True, slots=True)
class Cell:
    """Read-only view of one board cell."""

    coord: Coord
    is_filled: bool
    is_attacked: bool
    is_targetable: bool
