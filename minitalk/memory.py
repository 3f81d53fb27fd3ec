"""Byte-buffer operations: fill, search, compare and copy."""

from __future__ import annotations

import operator
from typing import Optional

_SIZE_MAX = (1 << 64) - 1


def _span(n: int, *lengths: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    if any(n > length for length in lengths):
        raise IndexError(f"byte count {n} runs past the end of the buffer")
    return n


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` taken as a byte."""
    n = _span(n, len(buffer))
    buffer[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError("requested size overflows")
    return bytearray(total)


def memchr(data: bytes, value: int, limit: int) -> Optional[int]:
    """Return the index of ``value`` (as a byte) in the first ``limit`` bytes, or None."""
    limit = _span(limit, len(data))
    index = bytes(data).find(bytes([operator.index(value) & 0xFF]), 0, limit)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, limit: int) -> int:
    """Compare the first ``limit`` bytes; return the difference of the first mismatch."""
    limit = _span(limit, len(first), len(second))
    for a, b in zip(first[:limit], second[:limit]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes of ``src`` to the start of ``dest`` and return ``dest``."""
    n = _span(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest_index: int, src_index: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer``; overlapping ranges are handled."""
    dest_index = operator.index(dest_index)
    src_index = operator.index(src_index)
    if dest_index < 0 or src_index < 0:
        raise ValueError("offsets must not be negative")
    n = _span(n, len(buffer) - dest_index, len(buffer) - src_index)
    buffer[dest_index:dest_index + n] = buffer[src_index:src_index + n]
    return buffer