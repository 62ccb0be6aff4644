"""Shared fixtures: a renderer that records calls and a table-driven luck."""
from __future__ import annotations

from typing import Callable

import pytest

from bitgrid import CellId, SessionConfig
from bitgrid.tokens import cell_seed

# Rolls that land inside each token band.
ROLLS: dict[int | None, float] = {None: 0.1, 1: 0.75, 2: 0.95, 4: 0.99}


class RecordingRenderer:
    """Renderer that appends every notification to ``calls``."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.outlines: set[CellId] = set()
        self.labels: dict[CellId, int] = {}

    def create_region_outline(self, cell: CellId) -> None:
        self.calls.append(("create_region_outline", cell))
        self.outlines.add(cell)

    def remove_region_outline(self, cell: CellId) -> None:
        self.calls.append(("remove_region_outline", cell))
        self.outlines.discard(cell)

    def create_label(self, cell: CellId, value: int) -> None:
        self.calls.append(("create_label", cell, value))
        self.labels[cell] = value

    def remove_label(self, cell: CellId) -> None:
        self.calls.append(("remove_label", cell))
        self.labels.pop(cell, None)

    def recenter_view(self, position: CellId) -> None:
        self.calls.append(("recenter_view", position))


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def table_luck() -> Callable[[dict[CellId, int | None]], Callable[[str], float]]:
    """Build a luck function giving chosen cells chosen tokens; others empty."""

    def build(tokens: dict[CellId, int | None]) -> Callable[[str], float]:
        rolls = {cell_seed(i, j): ROLLS[value] for (i, j), value in tokens.items()}

        def luck(seed: str) -> float:
            return rolls.get(seed, ROLLS[None])

        return luck

    return build


@pytest.fixture
def config() -> SessionConfig:
    return SessionConfig(tile_size=1.0, view_radius=4)
