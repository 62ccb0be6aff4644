"""Layout, color, and rendering constants."""
from __future__ import annotations

# Layout
CELL_PX = 36
COLS = 21
ROWS = 17
MAP_W = CELL_PX * COLS
MAP_H = CELL_PX * ROWS
STATUS_H = 56
SCREEN_W = MAP_W
SCREEN_H = MAP_H + STATUS_H
FPS = 60

# Colors
COLOR_BG = (24, 34, 28)
COLOR_OUTLINE = (110, 110, 110)
COLOR_IN_RANGE = (60, 90, 60)
COLOR_LABEL = (230, 60, 60)
COLOR_PLAYER = (70, 140, 240)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (220, 220, 220)
COLOR_BANNER = (230, 190, 40)
COLOR_BANNER_TEXT = (20, 20, 20)
