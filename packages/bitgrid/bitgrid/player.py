"""Player state - grid position and the single held-token slot."""
from __future__ import annotations

from dataclasses import dataclass

from bitgrid.types import CellId

DIRECTIONS: dict[str, tuple[int, int]] = {
    "north": (1, 0),
    "south": (-1, 0),
    "west": (0, -1),
    "east": (0, 1),
}


def check_step(di: int, dj: int) -> None:
    """Raise ValueError unless ``(di, dj)`` is a single cardinal step."""
    if di not in (-1, 0, 1) or dj not in (-1, 0, 1) or abs(di) + abs(dj) != 1:
        raise ValueError(f"move must be one cardinal step, got ({di}, {dj})")


@dataclass
class Player:
    """Mutable player state.

    Attributes:
        position: Current cell.
        held: Token in hand, or None. Filled only by a pickup and emptied
            only by a craft.
    """

    position: CellId = (0, 0)
    held: int | None = None

    @property
    def holding(self) -> bool:
        return self.held is not None

    def step(self, di: int, dj: int) -> CellId:
        """Move one cell north/south/east/west. Returns the new position."""
        check_step(di, dj)
        i, j = self.position
        self.position = (i + di, j + dj)
        return self.position
