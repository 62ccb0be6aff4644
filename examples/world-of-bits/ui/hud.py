"""HUD - inventory line and victory banner, driven by session signals."""
from __future__ import annotations

from typing import Any

import pygame

from bitgrid import INVENTORY_CHANGED, VICTORY, SignalBus

from ui.constants import (
    COLOR_BANNER,
    COLOR_BANNER_TEXT,
    COLOR_STATUS_BG,
    COLOR_TEXT,
    MAP_H,
    SCREEN_W,
    STATUS_H,
)


class Hud:
    def __init__(self, bus: SignalBus) -> None:
        self.held: int | None = None
        self.victory: int | None = None
        self._font: pygame.font.Font | None = None
        bus.subscribe(INVENTORY_CHANGED, self._on_inventory)
        bus.subscribe(VICTORY, self._on_victory)

    def _on_inventory(self, signal: str, data: dict[str, Any]) -> None:
        self.held = data.get("held")

    def _on_victory(self, signal: str, data: dict[str, Any]) -> None:
        self.victory = data.get("value")

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 16, bold=True)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        font = self._get_font()
        bar = pygame.Rect(0, MAP_H, SCREEN_W, STATUS_H)
        pygame.draw.rect(surface, COLOR_STATUS_BG, bar)
        label = "Holding: none" if self.held is None else f"Holding: {self.held}"
        surface.blit(font.render(label, True, COLOR_TEXT), (10, MAP_H + 8))
        hint = "Arrows move  WASD pan  C recenter  Click collect/craft"
        surface.blit(font.render(hint, True, COLOR_TEXT), (10, MAP_H + 30))

        if self.victory is not None:
            text = font.render(f"Victory! Crafted {self.victory}", True, COLOR_BANNER_TEXT)
            box = text.get_rect(center=(SCREEN_W // 2, 28)).inflate(32, 16)
            pygame.draw.rect(surface, COLOR_BANNER, box)
            surface.blit(text, text.get_rect(center=box.center))
