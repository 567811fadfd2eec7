"""Byte-buffer operations over ``bytes`` and ``bytearray`` objects.

Functions that write modify a ``bytearray`` in place and return it. A
missing buffer (``None``) is tolerated the same way throughout: nothing
is written and nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(buf: Buffer, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def bzero(buf: Optional[bytearray], n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    if buf is None:
        return
    memset(buf, 0, n)


def memset(buf: Optional[bytearray], c: int, n: int) -> Optional[bytearray]:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` truncated to a byte."""
    if buf is None:
        return None
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def memcpy(
    dst: Optional[bytearray], src: Optional[Buffer], n: int
) -> Optional[bytearray]:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    if dst is None:
        return None
    if src is None:
        return dst
    _check_span(dst, n, "destination")
    _check_span(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: Optional[bytearray], dst: int, src: int, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if buf is None:
        return None
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(buf, max(dst, src) + n)
    if n and dst != src:
        buf[dst : dst + n] = buf[src : src + n]
    return buf


def memchr(s: Optional[Buffer], c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    if s is None:
        return None
    if n < 0:
        raise ValueError("byte count must not be negative")
    index = bytes(s[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(s1: Optional[Buffer], s2: Optional[Buffer], n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    if s1 is None or s2 is None or n == 0:
        return 0
    _check_span(s1, n, "first buffer")
    _check_span(s2, n, "second buffer")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(total)