"""World-space placement of board cells for rendering hosts."""

from __future__ import annotations

from dataclasses import dataclass

from broadside.game.core.models import Coord, Player


@dataclass(frozen=True, slots=True)
class BoardLayout:
    """Side-by-side board layout on the x/z plane.

    Player ONE's board grows left from its origin, player TWO's grows right.
    Purely presentational; game rules never read it.
    """

    board_size: int = 10
    cell_spacing: float = 0.1
    cell_scale: float = 1.0
    player_one_origin_x: float = -1.0
    player_two_origin_x: float = 1.0

    @property
    def pitch(self) -> float:
        return self.cell_spacing + self.cell_scale

    def origin_x(self, owner: Player) -> float:
        return self.player_one_origin_x if owner is Player.ONE else self.player_two_origin_x

    def cell_position(self, owner: Player, coord: Coord) -> tuple[float, float]:
        """Return the world (x, z) center of a cell."""
        if owner is Player.ONE:
            # Column 0 sits furthest from the origin so x still grows rightwards.
            offset = -(self.board_size - 1 - coord.x) * self.pitch
        else:
            offset = coord.x * self.pitch
        z = (coord.z - self.board_size // 2) * self.pitch
        return self.origin_x(owner) + offset, z
