"""VisibilityWindow - materialize cells entering the view, evict those leaving it."""
from __future__ import annotations

import logging

from bitgrid.render import Renderer
from bitgrid.store import CellStore
from bitgrid.types import CellId, Window, WindowDelta

logger = logging.getLogger(__name__)


class VisibilityWindow:
    """Tracks the set of visible cells and keeps the renderer in step.

    ``update()`` runs to completion before returning. Calling it again with
    the same window makes no store or renderer calls.
    """

    def __init__(self, store: CellStore, renderer: Renderer) -> None:
        self._store = store
        self._renderer = renderer
        self._visible: set[CellId] = set()
        self._window: Window | None = None

    @property
    def visible(self) -> frozenset[CellId]:
        return frozenset(self._visible)

    @property
    def window(self) -> Window | None:
        """The window passed to the most recent ``update()``."""
        return self._window

    def __contains__(self, cell: object) -> bool:
        return cell in self._visible

    def update(self, window: Window) -> WindowDelta:
        self._window = window
        added = [c for c in window.cells() if c not in self._visible]
        removed = sorted(c for c in self._visible if c not in window)

        for cell in added:
            self._materialize(cell)
        for cell in removed:
            self._evict(cell)

        if added or removed:
            logger.debug(
                "window %s: +%d -%d cells (%d visible)",
                window, len(added), len(removed), len(self._visible),
            )
        return WindowDelta(tuple(added), tuple(removed))

    def relabel(self, cell: CellId) -> None:
        """Bring the label of a visible cell in line with its current value."""
        record = self._store.get(cell)
        if record is None or cell not in self._visible:
            return
        if record.labelled:
            self._renderer.remove_label(cell)
            record.labelled = False
        if record.value is not None:
            self._renderer.create_label(cell, record.value)
            record.labelled = True

    def _materialize(self, cell: CellId) -> None:
        record = self._store.fetch(cell)
        self._visible.add(cell)
        logger.debug("materialize %s (value=%s)", cell, record.value)
        if not record.outlined:
            self._renderer.create_region_outline(cell)
            record.outlined = True
        if record.value is not None and not record.labelled:
            self._renderer.create_label(cell, record.value)
            record.labelled = True

    def _evict(self, cell: CellId) -> None:
        self._visible.discard(cell)
        logger.debug("evict %s (%s)", cell, self._store.policy)
        record = self._store.get(cell)
        if record is not None:
            if record.outlined:
                self._renderer.remove_region_outline(cell)
            if record.labelled:
                self._renderer.remove_label(cell)
        self._store.evict(cell)
