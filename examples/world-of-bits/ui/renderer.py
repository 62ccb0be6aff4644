"""Pygame renderer - keeps its own outline/label table and draws it."""
from __future__ import annotations

import pygame

from bitgrid import CellId, GameSession

from ui.camera import Camera
from ui.constants import COLOR_IN_RANGE, COLOR_LABEL, COLOR_OUTLINE, COLOR_PLAYER


class PygameRenderer:
    """Receives engine notifications; never talks back to the engine."""

    def __init__(self, camera: Camera) -> None:
        self._camera = camera
        self._outlines: set[CellId] = set()
        self._labels: dict[CellId, int] = {}
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 16, bold=True)
        return self._font

    # --- bitgrid.Renderer ---

    def create_region_outline(self, cell: CellId) -> None:
        self._outlines.add(cell)

    def remove_region_outline(self, cell: CellId) -> None:
        self._outlines.discard(cell)

    def create_label(self, cell: CellId, value: int) -> None:
        self._labels[cell] = value

    def remove_label(self, cell: CellId) -> None:
        self._labels.pop(cell, None)

    def recenter_view(self, position: CellId) -> None:
        self._camera.focus = position

    # --- Drawing ---

    def draw(self, surface: pygame.Surface, session: GameSession) -> None:
        font = self._get_font()
        for cell in self._outlines:
            rect = self._camera.rect_of(cell)
            if session.in_range(cell):
                pygame.draw.rect(surface, COLOR_IN_RANGE, rect)
            pygame.draw.rect(surface, COLOR_OUTLINE, rect, 1)

        for cell, value in self._labels.items():
            rect = self._camera.rect_of(cell)
            text = font.render(str(value), True, COLOR_LABEL)
            surface.blit(text, text.get_rect(center=rect.center))

        player = self._camera.rect_of(session.position)
        pygame.draw.circle(surface, COLOR_PLAYER, player.center, player.width // 3)
