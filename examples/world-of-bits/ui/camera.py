"""Camera - maps screen pixels to grid cells and back."""
from __future__ import annotations

import pygame

from bitgrid import CellId, Window


class Camera:
    """A fixed-size view centred on one cell.

    Rows (``i``) grow northward, so they run up the screen; columns (``j``)
    grow eastward, left to right.
    """

    def __init__(self, cols: int, rows: int, cell_px: int) -> None:
        self._cols = cols
        self._rows = rows
        self._cell_px = cell_px
        self.focus: CellId = (0, 0)

    def window(self) -> Window:
        """Cells touched by the screen, as the viewport provider reports them."""
        fi, fj = self.focus
        half_rows, half_cols = self._rows // 2, self._cols // 2
        return Window(
            north=fi + half_rows,
            south=fi - (self._rows - 1 - half_rows),
            east=fj + (self._cols - 1 - half_cols),
            west=fj - half_cols,
        )

    def pan(self, di: int, dj: int) -> None:
        fi, fj = self.focus
        self.focus = (fi + di, fj + dj)

    def cell_at(self, px: int, py: int) -> CellId:
        w = self.window()
        return (w.north - py // self._cell_px, w.west + px // self._cell_px)

    def rect_of(self, cell: CellId) -> pygame.Rect:
        w = self.window()
        i, j = cell
        x = (j - w.west) * self._cell_px
        y = (w.north - i) * self._cell_px
        return pygame.Rect(x, y, self._cell_px, self._cell_px)
