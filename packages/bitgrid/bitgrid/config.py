"""Session configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from bitgrid.store import PERSISTENT, POLICIES

# Lat/lng the original map opened on.
DEFAULT_ORIGIN = (36.997936938057016, -122.05703507501151)


@dataclass(frozen=True)
class SessionConfig:
    """Immutable settings fixed for the lifetime of a game session.

    Attributes:
        tile_size: Edge length of one cell in map units (degrees).
        interaction_radius: Max Chebyshev distance for clickable cells.
        victory_value: Crafting a token of at least this value wins.
        policy: Cell store policy, ``"persistent"`` or ``"memoryless"``.
        window_margin: Extra cells added on every side of a geographic view.
        view_radius: Half-width, in cells, of the window kept around the
            player after a move.
        origin: Lat/lng of the player's starting point.
    """

    tile_size: float = 0.0001
    interaction_radius: int = 3
    victory_value: int = 8
    policy: str = PERSISTENT
    window_margin: int = 0
    view_radius: int = 8
    origin: tuple[float, float] = DEFAULT_ORIGIN

    def __post_init__(self) -> None:
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be > 0, got {self.tile_size}")
        if self.interaction_radius < 0:
            raise ValueError(
                f"interaction_radius must be >= 0, got {self.interaction_radius}"
            )
        if self.victory_value < 1:
            raise ValueError(f"victory_value must be >= 1, got {self.victory_value}")
        if self.policy not in POLICIES:
            raise ValueError(f"policy must be one of {POLICIES}, got {self.policy!r}")
        if self.window_margin < 0:
            raise ValueError(f"window_margin must be >= 0, got {self.window_margin}")
        if self.view_radius < 0:
            raise ValueError(f"view_radius must be >= 0, got {self.view_radius}")
