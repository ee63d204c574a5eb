"""
Bitcoin CompactSize ("varint") length encoding.
"""

from __future__ import annotations

import struct

_MAX_VARINT = 0xFFFFFFFFFFFFFFFF


def varint_encode(n: int) -> bytes:
    """
    Encode a non-negative integer as a Bitcoin varint.

    Values below 0xfd take one byte; larger values are a marker byte
    (0xfd, 0xfe, 0xff) followed by a little-endian uint16, uint32 or uint64.

    Args:
        n: Integer in [0, 2**64).

    Returns:
        1, 3, 5 or 9 bytes.
    """
    if n < 0 or n > _MAX_VARINT:
        raise ValueError(f"varint out of range: {n}")
    if n < 0xFD:
        return bytes([n])
    if n <= 0xFFFF:
        return b"\xfd" + struct.pack("<H", n)
    if n <= 0xFFFFFFFF:
        return b"\xfe" + struct.pack("<I", n)
    return b"\xff" + struct.pack("<Q", n)


def varint_decode(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a varint from data[offset:].

    Returns:
        (value, size) where size is the number of bytes consumed.
    """
    if offset >= len(data):
        raise ValueError("varint: no data")
    first = data[offset]
    if first < 0xFD:
        return first, 1
    fmt, size = {0xFD: ("<H", 2), 0xFE: ("<I", 4), 0xFF: ("<Q", 8)}[first]
    end = offset + 1 + size
    if end > len(data):
        raise ValueError("varint: truncated")
    (value,) = struct.unpack(fmt, data[offset + 1 : end])
    return value, 1 + size


__all__: tuple[str, ...] = ("varint_decode", "varint_encode")
