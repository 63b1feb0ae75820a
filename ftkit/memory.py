"""Byte-buffer operations on bytearray, bytes and memoryview objects."""

from __future__ import annotations

from collections.abc import Sequence

Buffer = bytearray | memoryview
ReadableBuffer = bytes | bytearray | memoryview


def _check_length(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: Buffer, src: ReadableBuffer, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including byte ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``c``, or None if ``c`` was not among the first ``n`` bytes.
    """
    _check_length(n, dst, src)
    stop = bytes(src[:n]).find(c & 0xFF)
    count = n if stop < 0 else stop + 1
    dst[:count] = bytes(src[:count])
    return None if stop < 0 else count


def memmove(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dst``; overlapping views are safe."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data: ReadableBuffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing pair of bytes, or 0.
    """
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)