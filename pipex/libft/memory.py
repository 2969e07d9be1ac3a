"""Byte-buffer helpers over ``bytes`` and ``bytearray``."""

from __future__ import annotations

from collections.abc import Sequence


def _check_span(length: int, start: int, n: int) -> None:
    if n < 0 or start < 0:
        raise ValueError("offsets and sizes must not be negative")
    if start + n > length:
        raise ValueError(
            f"span of {n} bytes at offset {start} exceeds buffer of {length} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span(len(buf), 0, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within the first ``n``
    bytes of ``data``, or None if there is none."""
    _check_span(len(data), 0, n)
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(len(a), 0, n)
    _check_span(len(b), 0, n)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span(len(src), 0, n)
    _check_span(len(dst), 0, n)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied first.
    """
    _check_span(len(buf), src, n)
    _check_span(len(buf), dst, n)
    if dst != src:
        buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the byte ``c``."""
    _check_span(len(buf), 0, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf