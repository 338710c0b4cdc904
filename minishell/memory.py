"""Byte-buffer primitives: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

MutableBuffer = Union[bytearray, memoryview]
Buffer = Union[bytes, bytearray, memoryview]

_UINT_MAX = 2**32 - 1


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(
                f"length {length} exceeds buffer of {len(buf)} bytes"
            )


def memset(buf: MutableBuffer, value: int, length: int) -> MutableBuffer:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (low 8 bits)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: MutableBuffer, length: int) -> MutableBuffer:
    """Zero the first ``length`` bytes of ``buf``."""
    return memset(buf, 0, length)


def memcpy(dst: MutableBuffer, src: Buffer, length: int) -> MutableBuffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(length, dst, src)
    if length:
        dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: MutableBuffer, src: Buffer, length: int) -> MutableBuffer:
    """Copy ``length`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check_length(length, dst, src)
    if length:
        # Snapshot the source first so overlapping views copy correctly.
        snapshot = bytes(src[:length])
        dst[:length] = snapshot
    return dst


def memchr(data: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    target = value & 0xFF
    for index, byte in enumerate(bytes(data[:length])):
        if byte == target:
            return index
    return None


def memcmp(a: Buffer, b: Buffer, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair."""
    _check_length(length, a, b)
    for left, right in zip(bytes(a[:length]), bytes(b[:length])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would overflow an unsigned 32-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count and _UINT_MAX // count < size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)