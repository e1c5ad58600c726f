"""Helpers for sample data: human-readable sizes and random fill."""

from __future__ import annotations

import random

_KIB = 1024
_MIB = 1048576
_GIB = 1073741824


def to_storage_size(size: int) -> str:
    """Format a byte count with two decimals and a B/KB/MB/GB unit."""
    value = float(size)
    if 0 <= value < _KIB:
        return f"{value:.2f}B"
    if _KIB <= value < _MIB:
        return f"{value / _KIB:.2f}KB"
    if _MIB <= value < _GIB:
        return f"{value / _MIB:.2f}MB"
    return f"{value / _GIB:.2f}GB"


def fill_random(buffer: bytearray, rng: random.Random) -> None:
    """Fill ``buffer`` in place, seven bytes from each 63-bit draw of ``rng``."""
    length = len(buffer)
    for start in range(0, length, 7):
        end = min(start + 7, length)
        chunk = rng.getrandbits(63).to_bytes(8, "little")
        buffer[start:end] = chunk[: end - start]