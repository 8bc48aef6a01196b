"""Board state representation and mutation helpers."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from broadside.game.core.models import Cell, Coord


class BoardNotInitializedError(RuntimeError):
    """Raised when a board is used before ``initialize``."""


class Board:
    """Numpy-backed square grid of cells plus the footprints placed on it.

    Cells are indexed ``[x, z]``. ``attacked`` cells never revert.
    """

    def __init__(self) -> None:
        self._size: int | None = None
        self._filled: np.ndarray | None = None
        self._attacked: np.ndarray | None = None
        self._ships: list[tuple[Coord, ...]] = []
        self._targetable = False

    @property
    def is_initialized(self) -> bool:
        return self._size is not None

    @property
    def size(self) -> int:
        if self._size is None:
            raise BoardNotInitializedError("Board has not been initialized.")
        return self._size

    @property
    def ships(self) -> tuple[tuple[Coord, ...], ...]:
        """Footprints committed to this board, in placement order."""
        return tuple(self._ships)

    @property
    def targetable(self) -> bool:
        return self._targetable

    def initialize(self, size: int) -> None:
        """Allocate an empty ``size`` x ``size`` grid. Must be called exactly once."""
        if self._size is not None:
            raise RuntimeError("Board is already initialized.")
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        self._size = size
        self._filled = np.zeros((size, size), dtype=np.bool_)
        self._attacked = np.zeros((size, size), dtype=np.bool_)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        size = self.size
        return 0 <= coord.x < size and 0 <= coord.z < size

    def is_filled(self, coord: Coord) -> bool:
        filled, _ = self._planes()
        self._require_in_bounds(coord)
        return bool(filled[coord.x, coord.z])

    def is_attacked(self, coord: Coord) -> bool:
        _, attacked = self._planes()
        self._require_in_bounds(coord)
        return bool(attacked[coord.x, coord.z])

    def is_cell_targetable(self, coord: Coord) -> bool:
        """Presentation hint: whether the cell should accept attack input."""
        return self._targetable and not self.is_attacked(coord)

    def cell(self, coord: Coord) -> Cell:
        return Cell(
            coord=coord,
            is_filled=self.is_filled(coord),
            is_attacked=self.is_attacked(coord),
            is_targetable=self.is_cell_targetable(coord),
        )

    def can_place(self, cells: Sequence[Coord]) -> bool:
        """Return whether every cell is in bounds, unfilled and unattacked."""
        filled, attacked = self._planes()
        if not cells:
            return False
        for coord in cells:
            if not self.in_bounds(coord):
                return False
            if filled[coord.x, coord.z] or attacked[coord.x, coord.z]:
                return False
        return True

    def add_ship(self, cells: Sequence[Coord]) -> bool:
        """Fill every cell of the footprint, or nothing if any cell is rejected."""
        if not self.can_place(cells):
            return False
        filled, _ = self._planes()
        for coord in cells:
            filled[coord.x, coord.z] = True
        self._ships.append(tuple(cells))
        return True

    def attack_cell(self, coord: Coord) -> bool:
        """Mark the cell attacked and return whether it held a ship."""
        filled, attacked = self._planes()
        self._require_in_bounds(coord)
        attacked[coord.x, coord.z] = True
        return bool(filled[coord.x, coord.z])

    def is_ship_sunk(self, coord: Coord) -> bool:
        """Return whether the ship covering ``coord`` has every cell attacked."""
        _, attacked = self._planes()
        for cells in self._ships:
            if coord in cells:
                return all(attacked[cell.x, cell.z] for cell in cells)
        return False

    def remaining_ship_cells(self) -> int:
        """Count filled cells not yet attacked."""
        filled, attacked = self._planes()
        return int(np.count_nonzero(filled & ~attacked))

    def is_destroyed(self) -> bool:
        """Return whether every filled cell has been attacked."""
        filled, attacked = self._planes()
        return bool(np.all(~filled | attacked))

    def set_targetable(self, enabled: bool) -> None:
        self._targetable = enabled

    def _planes(self) -> tuple[np.ndarray, np.ndarray]:
        if self._filled is None or self._attacked is None:
            raise BoardNotInitializedError("Board has not been initialized.")
        return self._filled, self._attacked

    def _require_in_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate ({coord.x}, {coord.z}) is outside a {self.size}x{self.size} board.")
