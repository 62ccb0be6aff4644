"""bitgrid - Grid-state and game-rule engine for a token-crafting map game."""
from __future__ import annotations

from bitgrid.config import SessionConfig
from bitgrid.geometry import (
    cell_bounds,
    cell_center,
    cell_of,
    chebyshev,
    in_range,
    window_around,
    window_for,
)
from bitgrid.luck import luck
from bitgrid.player import DIRECTIONS, Player
from bitgrid.render import NullRenderer, Renderer
from bitgrid.rules import Action, apply_action, resolve_click
from bitgrid.session import GameSession
from bitgrid.signals import INVENTORY_CHANGED, VICTORY, SignalBus
from bitgrid.store import MEMORYLESS, PERSISTENT, CellStore
from bitgrid.tokens import cell_seed, generate_token, token_for_roll
from bitgrid.types import Cell, CellId, GeoBounds, Window, WindowDelta
from bitgrid.window import VisibilityWindow

__all__ = [
    "Action",
    "Cell",
    "CellId",
    "CellStore",
    "DIRECTIONS",
    "GameSession",
    "GeoBounds",
    "INVENTORY_CHANGED",
    "MEMORYLESS",
    "NullRenderer",
    "PERSISTENT",
    "Player",
    "Renderer",
    "SessionConfig",
    "SignalBus",
    "VICTORY",
    "VisibilityWindow",
    "Window",
    "WindowDelta",
    "apply_action",
    "cell_bounds",
    "cell_center",
    "cell_of",
    "cell_seed",
    "chebyshev",
    "generate_token",
    "in_range",
    "luck",
    "resolve_click",
    "token_for_roll",
    "window_around",
    "window_for",
]
