"""Observer signals for a game session: inventory changes and victories."""
from __future__ import annotations

from typing import Any, Callable

INVENTORY_CHANGED = "inventory_changed"
VICTORY = "victory"
SIGNALS = (INVENTORY_CHANGED, VICTORY)

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Holds a session's signals until its current operation has finished.

    The session records signals while it mutates state and calls
    ``flush()`` once at the end, so observers never see a half-applied
    pickup or craft. Handlers are called as ``handler(signal_name, data)``.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {name: [] for name in SIGNALS}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        if signal_name not in self._subscribers:
            raise ValueError(
                f"Unknown signal {signal_name!r}, expected one of {SIGNALS}"
            )
        self._subscribers[signal_name].append(handler)

    # --- Recording ---

    def inventory_changed(self, held: int | None) -> None:
        """Record that the held slot now contains *held*."""
        self._queue.append((INVENTORY_CHANGED, {"held": held}))

    def victory(self, value: int) -> None:
        """Record a craft that reached the victory value."""
        self._queue.append((VICTORY, {"value": value}))

    # --- Delivery ---

    def flush(self) -> int:
        """Deliver recorded signals in order. Returns how many were delivered."""
        batch = self._queue
        self._queue = []
        for signal_name, data in batch:
            for handler in list(self._subscribers[signal_name]):
                handler(signal_name, data)
        return len(batch)
