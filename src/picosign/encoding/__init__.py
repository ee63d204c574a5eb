"""Byte encodings: varint (CompactSize) and Base58Check."""

from .base58 import b58check_decode, b58check_encode
from .varint import varint_decode, varint_encode

__all__: tuple[str, ...] = (
    "b58check_decode",
    "b58check_encode",
    "varint_decode",
    "varint_encode",
)
