"""CellStore - authoritative cell values with a selectable eviction policy."""
from __future__ import annotations

import logging
from typing import Callable

from bitgrid.types import Cell, CellId

logger = logging.getLogger(__name__)

PERSISTENT = "persistent"
MEMORYLESS = "memoryless"
POLICIES = (PERSISTENT, MEMORYLESS)

Generator = Callable[[int, int], "int | None"]


class CellStore:
    """Maps cell identifiers to Cell records.

    Entries are created lazily from *generator* the first time a cell is
    fetched. What happens on eviction depends on *policy*:

    - ``"persistent"``: the entry and its value are kept; only the
      presentation flags are cleared.
    - ``"memoryless"``: the entry is deleted, so the next fetch regenerates
      the base value and any crafting on that cell is lost.
    """

    def __init__(self, generator: Generator, policy: str = PERSISTENT) -> None:
        if policy not in POLICIES:
            raise ValueError(
                f"Unknown store policy {policy!r}, expected one of {POLICIES}"
            )
        self._generator = generator
        self._policy = policy
        self._cells: dict[CellId, Cell] = {}

    # --- Properties ---

    @property
    def policy(self) -> str:
        return self._policy

    # --- Queries ---

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def get(self, cell: CellId) -> Cell | None:
        """Return the stored record, or None without generating one."""
        return self._cells.get(cell)

    # --- Lifecycle ---

    def fetch(self, cell: CellId) -> Cell:
        """Return the record for *cell*, generating it on first use."""
        record = self._cells.get(cell)
        if record is None:
            record = Cell(value=self._generator(*cell))
            self._cells[cell] = record
            logger.debug("generated %s -> %s", cell, record.value)
        return record

    def evict(self, cell: CellId) -> None:
        """Drop presentation state for *cell* and apply the policy."""
        if self._policy == MEMORYLESS:
            self._cells.pop(cell, None)
            return
        record = self._cells.get(cell)
        if record is not None:
            record.outlined = False
            record.labelled = False
