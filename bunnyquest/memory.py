"""Byte-buffer helpers: zeroing, allocation, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: Buffer) -> None:
    """Reject a negative count or one that runs past any of ``buffers``."""
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero, in place."""
    _check_count(count, buffer)
    buffer[:count] = bytes(count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` in the first ``count`` bytes.

    Only the low eight bits of ``value`` are compared. No match gives ``None``.
    """
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(first: Buffer, second: Buffer, count: int) -> int:
    """Compare ``count`` bytes; the difference of the first differing pair, or 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Optional[bytearray], src: Optional[Buffer], count: int):
    """Copy ``count`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When either buffer is ``None`` nothing is copied and ``src`` is returned.
    """
    if dest is None or src is None:
        return src
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Move ``count`` bytes from offset ``src`` to offset ``dest`` inside ``buffer``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, buffer[dest:], buffer[src:])
    buffer[dest : dest + count] = bytes(buffer[src : src + count])
    return buffer


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes with the low eight bits of ``value``."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def realloc(data: Buffer, count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count * size`` bytes holding ``data``.

    ``data`` is truncated when it is longer than the new buffer.
    """
    result = calloc(count, size)
    kept = min(len(result), len(data))
    result[:kept] = data[:kept]
    return result