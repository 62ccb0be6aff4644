"""Portable deterministic hash from a seed string to [0, 1)."""
from __future__ import annotations

import hashlib
from typing import Callable

LuckFn = Callable[[str], float]

_SCALE = float(1 << 64)


def luck(seed: str) -> float:
    """Map *seed* to a float in [0, 1).

    The first eight bytes of the SHA-256 digest of the UTF-8 seed are read
    big-endian, so the result is identical across processes and platforms.
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    r = int.from_bytes(digest[:8], "big") / _SCALE
    # 2**64 - 1 rounds up to 1.0 as a double.
    return r if r < 1.0 else 0.0
