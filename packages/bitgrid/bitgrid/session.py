"""GameSession - owns all state for one game and dispatches player events."""
from __future__ import annotations

import logging

from bitgrid.config import SessionConfig
from bitgrid.geometry import cell_of, in_range, window_around, window_for
from bitgrid.luck import LuckFn, luck as default_luck
from bitgrid.player import DIRECTIONS, Player
from bitgrid.render import NullRenderer, Renderer
from bitgrid.rules import Action, apply_action, is_victory, resolve_click
from bitgrid.signals import SignalBus
from bitgrid.store import CellStore
from bitgrid.tokens import generate_token
from bitgrid.types import CellId, GeoBounds, Window, WindowDelta
from bitgrid.window import VisibilityWindow

logger = logging.getLogger(__name__)


class GameSession:
    """One player's game: cell store, visible window, player, and observers.

    Every public operation runs to completion before returning. Signals
    raised by a click reach ``bus`` subscribers only after the click has
    been fully applied. Nothing is shared between sessions.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        renderer: Renderer | None = None,
        luck: LuckFn = default_luck,
        start: CellId | None = None,
    ) -> None:
        self._config = config if config is not None else SessionConfig()
        self._renderer: Renderer = renderer if renderer is not None else NullRenderer()
        self._luck = luck
        self._store = CellStore(self._generate, self._config.policy)
        self._window = VisibilityWindow(self._store, self._renderer)
        if start is None:
            start = cell_of(*self._config.origin, self._config.tile_size)
        self._player = Player(position=start)
        self._bus = SignalBus()
        self._won = False

    # --- Properties ---

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def store(self) -> CellStore:
        return self._store

    @property
    def position(self) -> CellId:
        return self._player.position

    @property
    def held(self) -> int | None:
        return self._player.held

    @property
    def won(self) -> bool:
        """True once any craft has reached the victory value."""
        return self._won

    @property
    def visible(self) -> frozenset[CellId]:
        return self._window.visible

    # --- Queries ---

    def value_at(self, cell: CellId) -> int | None:
        """Token on a visible cell, or None if empty or not visible."""
        if cell not in self._window:
            return None
        record = self._store.get(cell)
        return record.value if record is not None else None

    def in_range(self, cell: CellId) -> bool:
        return in_range(cell, self._player.position, self._config.interaction_radius)

    # --- View ---

    def start(self) -> WindowDelta:
        """Centre the view on the player and draw the initial window."""
        self._renderer.recenter_view(self._player.position)
        return self.set_window(window_around(self._player.position, self._config.view_radius))

    def set_window(self, window: Window) -> WindowDelta:
        return self._window.update(window)

    def view_changed(self, bounds: GeoBounds) -> WindowDelta:
        """Recompute the window from a geographic view rectangle."""
        window = window_for(bounds, self._config.tile_size, self._config.window_margin)
        return self.set_window(window)

    # --- Movement ---

    def move(self, di: int, dj: int) -> WindowDelta:
        """Step the player and pan the current view to follow.

        The last window keeps its size and is recentred on the new
        position. Before any window is set, a square of ``view_radius``
        is used.
        """
        position = self._player.step(di, dj)
        logger.debug("player moved to %s", position)
        self._renderer.recenter_view(position)
        last = self._window.window
        if last is None or last.empty:
            window = window_around(position, self._config.view_radius)
        else:
            window = last.centered_on(position)
        return self.set_window(window)

    def move_direction(self, name: str) -> WindowDelta:
        """Move one step ``"north"``, ``"south"``, ``"east"`` or ``"west"``."""
        di, dj = DIRECTIONS[name]
        return self.move(di, dj)

    # --- Interaction ---

    def click(self, cell: CellId) -> Action:
        """Handle a click on *cell*. Returns the action taken."""
        if cell not in self._window:
            logger.debug("ignored click on untracked cell %s", cell)
            return Action.NONE
        if not self.in_range(cell):
            logger.debug(
                "ignored click on %s: out of range of %s", cell, self._player.position
            )
            return Action.NONE
        record = self._store.get(cell)
        if record is None:
            return Action.NONE

        action = resolve_click(record.value, self._player.held)
        if action is Action.NONE:
            logger.debug(
                "no action on %s (cell=%s, held=%s)", cell, record.value, self._player.held
            )
            return action

        crafted = apply_action(action, record, self._player)
        self._window.relabel(cell)
        logger.info("%s at %s, holding %s", action.value, cell, self._player.held)
        self._bus.inventory_changed(self._player.held)

        if action is Action.CRAFT and is_victory(crafted, self._config.victory_value):
            self._won = True
            logger.info("victory with %s at %s", crafted, cell)
            self._bus.victory(crafted)

        self._bus.flush()
        return action

    def _generate(self, i: int, j: int) -> int | None:
        return generate_token(i, j, self._luck)
