"""Rendering collaborator protocol.

The engine only ever writes to a renderer; it never reads anything back.
"""
from __future__ import annotations

from typing import Protocol

from bitgrid.types import CellId


class Renderer(Protocol):
    def create_region_outline(self, cell: CellId) -> None: ...
    def remove_region_outline(self, cell: CellId) -> None: ...
    def create_label(self, cell: CellId, value: int) -> None: ...
    def remove_label(self, cell: CellId) -> None: ...
    def recenter_view(self, position: CellId) -> None: ...


class NullRenderer:
    """Renderer that discards every notification."""

    def create_region_outline(self, cell: CellId) -> None:
        pass

    def remove_region_outline(self, cell: CellId) -> None:
        pass

    def create_label(self, cell: CellId, value: int) -> None:
        pass

    def remove_label(self, cell: CellId) -> None:
        pass

    def recenter_view(self, position: CellId) -> None:
        pass
