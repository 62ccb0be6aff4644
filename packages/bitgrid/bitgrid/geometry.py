"""Grid geometry - cell lookup, bounds, and Chebyshev distance."""
from __future__ import annotations

import math

from bitgrid.types import CellId, GeoBounds, Window


def cell_of(lat: float, lng: float, tile_size: float) -> CellId:
    """Cell containing the point ``(lat, lng)``."""
    return (math.floor(lat / tile_size), math.floor(lng / tile_size))


def cell_bounds(cell: CellId, tile_size: float) -> GeoBounds:
    """Rectangle covered by *cell*: ``[i*S, (i+1)*S) x [j*S, (j+1)*S)``."""
    i, j = cell
    return GeoBounds(
        south=i * tile_size,
        west=j * tile_size,
        north=(i + 1) * tile_size,
        east=(j + 1) * tile_size,
    )


def cell_center(cell: CellId, tile_size: float) -> tuple[float, float]:
    i, j = cell
    return (i * tile_size + tile_size / 2, j * tile_size + tile_size / 2)


def chebyshev(a: CellId, b: CellId) -> int:
    """King-move distance between two cells."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def in_range(cell: CellId, position: CellId, radius: int) -> bool:
    return chebyshev(cell, position) <= radius


def window_for(bounds: GeoBounds, tile_size: float, margin: int = 0) -> Window:
    """Inclusive cell window covering *bounds*, grown by *margin* cells."""
    if margin < 0:
        raise ValueError(f"margin must be >= 0, got {margin}")
    south, west = cell_of(bounds.south, bounds.west, tile_size)
    north, east = cell_of(bounds.north, bounds.east, tile_size)
    return Window(
        north=north + margin,
        south=south - margin,
        east=east + margin,
        west=west - margin,
    )


def window_around(position: CellId, radius: int) -> Window:
    """Square window of every cell within *radius* of *position*."""
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    i, j = position
    return Window(north=i + radius, south=i - radius, east=j + radius, west=j - radius)
