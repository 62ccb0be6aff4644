"""Tests for the session SignalBus."""
from __future__ import annotations

import pytest

from bitgrid import INVENTORY_CHANGED, VICTORY, SignalBus


def recorder(bus: SignalBus) -> list[tuple[str, dict]]:
    seen: list[tuple[str, dict]] = []
    for name in (INVENTORY_CHANGED, VICTORY):
        bus.subscribe(name, lambda signal, data: seen.append((signal, data)))
    return seen


class TestRecording:
    def test_nothing_delivered_before_flush(self) -> None:
        bus = SignalBus()
        seen = recorder(bus)
        bus.inventory_changed(4)
        bus.victory(8)
        assert seen == []

    def test_flush_delivers_in_order(self) -> None:
        bus = SignalBus()
        seen = recorder(bus)
        bus.inventory_changed(None)
        bus.victory(8)
        assert bus.flush() == 2
        assert seen == [
            (INVENTORY_CHANGED, {"held": None}),
            (VICTORY, {"value": 8}),
        ]

    def test_flush_empties_queue(self) -> None:
        bus = SignalBus()
        seen = recorder(bus)
        bus.inventory_changed(1)
        bus.flush()
        assert bus.flush() == 0
        assert len(seen) == 1

    def test_no_subscribers(self) -> None:
        bus = SignalBus()
        bus.victory(16)
        assert bus.flush() == 1


class TestSubscribe:
    def test_unknown_signal_raises(self) -> None:
        bus = SignalBus()
        with pytest.raises(ValueError, match="Unknown signal 'victroy'"):
            bus.subscribe("victroy", lambda signal, data: None)

    def test_handlers_only_see_their_signal(self) -> None:
        bus = SignalBus()
        wins: list[dict] = []
        bus.subscribe(VICTORY, lambda signal, data: wins.append(data))
        bus.inventory_changed(2)
        bus.victory(8)
        bus.flush()
        assert wins == [{"value": 8}]

    def test_signal_recorded_by_handler_waits(self) -> None:
        bus = SignalBus()
        wins: list[dict] = []

        def on_inventory(signal: str, data: dict) -> None:
            bus.victory(data["held"])

        bus.subscribe(INVENTORY_CHANGED, on_inventory)
        bus.subscribe(VICTORY, lambda signal, data: wins.append(data))
        bus.inventory_changed(8)
        bus.flush()
        assert wins == []
        bus.flush()
        assert wins == [{"value": 8}]
