"""Deterministic token generation for grid cells."""
from __future__ import annotations

from bitgrid.luck import LuckFn, luck as default_luck

# (lower bound, token) pairs, checked highest first.
TOKEN_THRESHOLDS: tuple[tuple[float, int], ...] = (
    (0.97, 4),
    (0.90, 2),
    (0.70, 1),
)


def cell_seed(i: int, j: int) -> str:
    """Canonical seed string for a cell, e.g. ``cell(-3,17)``."""
    return f"cell({i},{j})"


def token_for_roll(r: float) -> int | None:
    """Translate a roll in [0, 1) into a token value, or None for empty."""
    if not 0.0 <= r < 1.0:
        raise ValueError(f"roll must be in [0, 1), got {r}")
    for lower, token in TOKEN_THRESHOLDS:
        if r >= lower:
            return token
    return None


def generate_token(i: int, j: int, luck: LuckFn = default_luck) -> int | None:
    """Base token value of cell ``(i, j)``. Pure: same cell, same result."""
    return token_for_roll(luck(cell_seed(i, j)))
