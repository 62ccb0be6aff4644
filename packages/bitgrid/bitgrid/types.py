"""Shared types for bitgrid."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

CellId = tuple[int, int]


@dataclass
class Cell:
    """Logical state of one grid cell.

    Attributes:
        value: Token amount (a power of two) or None when empty.
        outlined: Whether the renderer has been asked to draw the outline.
        labelled: Whether the renderer has been asked to draw a value label.
    """

    value: int | None = None
    outlined: bool = False
    labelled: bool = False


@dataclass(frozen=True)
class Window:
    """Inclusive rectangle of cell indices.

    ``i`` grows northward and ``j`` eastward, so a window spans rows
    ``south..north`` and columns ``west..east``.
    """

    north: int
    south: int
    east: int
    west: int

    @property
    def empty(self) -> bool:
        return self.south > self.north or self.west > self.east

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, tuple) or len(cell) != 2:
            return False
        i, j = cell
        return self.south <= i <= self.north and self.west <= j <= self.east

    def centered_on(self, cell: CellId) -> Window:
        """Same-sized window moved so *cell* is its centre.

        For even sizes the extra row goes north and the extra column west.
        """
        i, j = cell
        height = self.north - self.south + 1
        width = self.east - self.west + 1
        north = i + height // 2
        west = j - width // 2
        return Window(
            north=north,
            south=north - height + 1,
            east=west + width - 1,
            west=west,
        )

    def cells(self) -> Iterator[CellId]:
        """Yield every cell, south-west corner first, row by row."""
        for i in range(self.south, self.north + 1):
            for j in range(self.west, self.east + 1):
                yield (i, j)

    def __len__(self) -> int:
        if self.empty:
            return 0
        return (self.north - self.south + 1) * (self.east - self.west + 1)


@dataclass(frozen=True)
class GeoBounds:
    """Axis-aligned rectangle in map units (degrees for lat/lng maps)."""

    south: float
    west: float
    north: float
    east: float

    @property
    def center(self) -> tuple[float, float]:
        return ((self.south + self.north) / 2, (self.west + self.east) / 2)


class WindowDelta(NamedTuple):
    """Cells that entered and left the visible set during one update."""

    added: tuple[CellId, ...]
    removed: tuple[CellId, ...]
