"""Ship pose and footprint geometry."""

from __future__ import annotations

from dataclasses import dataclass

from broadside.game.core.models import DEFAULT_FACING, DIRECTION_STEPS, Coord, Direction, Player


def footprint(anchor: Coord, length: int, facing: Direction) -> list[Coord]:
    """Compute the ordered cells a ship covers from its anchor along ``facing``."""
    if length < 1:
        raise ValueError(f"Ship length must be positive, got {length}.")
    try:
        step = DIRECTION_STEPS[facing]
    except KeyError as exc:
        raise ValueError(f"Invalid facing: {facing!r}.") from exc
    return [anchor + step.scaled(i) for i in range(length)]


@dataclass(slots=True, eq=False)
class Ship:
    """A ship of fixed length owned by one player.

    The pose (``facing``/``anchor``) can only change while the ship is unplaced.
    ``anchor`` is ``None`` until a tentative position is set.
    """

    ship_id: int
    owner: Player
    length: int
    facing: Direction = DEFAULT_FACING
    anchor: Coord | None = None
    is_placed: bool = False
    is_selected: bool = False
    selection_enabled: bool = False

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"Ship length must be positive, got {self.length}.")

    @property
    def is_position_set(self) -> bool:
        return self.anchor is not None

    def footprint(self) -> list[Coord]:
        """Return occupied cells for the current pose."""
        if self.anchor is None:
            raise RuntimeError(f"Ship {self.ship_id} has no position set.")
        return footprint(self.anchor, self.length, self.facing)

    def set_position(self, anchor: Coord) -> None:
        self._require_unplaced()
        self.anchor = anchor

    def set_facing(self, facing: Direction) -> None:
        self._require_unplaced()
        self.facing = facing

    def rotate(self, delta: int) -> None:
        self.set_facing(self.facing.rotated(delta))

    def reset_pose(self) -> None:
        """Return to the unset default pose."""
        self._require_unplaced()
        self.facing = DEFAULT_FACING
        self.anchor = None

    def mark_placed(self) -> None:
        self.is_placed = True
        self.is_selected = False
        self.selection_enabled = False

    def _require_unplaced(self) -> None:
        if self.is_placed:
            raise RuntimeError(f"Ship {self.ship_id} is already placed.")
