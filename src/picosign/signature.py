"""
Recoverable ECDSA signature and its 65-byte compact encoding.

Compact layout: header || r (32 bytes, big endian) || s (32 bytes, big endian),
where header = 27 + recid + (4 if the signer's public key is compressed).
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from .errors import InvalidSignatureEncoding

COMPACT_SIZE = 65
_HEADER_BASE = 27
_COMPRESSED_FLAG = 4


@dataclass(frozen=True)
class Signature:
    r: int
    s: int
    recid: int
    compressed: bool = True

    @classmethod
    def from_compact(cls, data: bytes) -> Signature:
        """
        Parse a 65-byte compact signature.

        Raises:
            InvalidSignatureEncoding: on a wrong length or a header outside 27..34.
        """
        if len(data) != COMPACT_SIZE:
            raise InvalidSignatureEncoding(
                f"compact signature must be {COMPACT_SIZE} bytes, got {len(data)}"
            )
        i = data[0] - _HEADER_BASE
        if not 0 <= i < 8:
            raise InvalidSignatureEncoding(f"invalid recovery header: {data[0]}")
        compressed = i >= _COMPRESSED_FLAG
        if compressed:
            i -= _COMPRESSED_FLAG
        r = int.from_bytes(data[1:33], "big")
        s = int.from_bytes(data[33:65], "big")
        return cls(r, s, i, compressed)

    @classmethod
    def from_base64(cls, text: str | bytes) -> Signature:
        try:
            data = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidSignatureEncoding(f"signature is not valid base64: {exc}") from exc
        return cls.from_compact(data)

    def header(self) -> int:
        return _HEADER_BASE + self.recid + (_COMPRESSED_FLAG if self.compressed else 0)

    def to_compact(self) -> bytes:
        return (
            bytes([self.header()])
            + self.r.to_bytes(32, "big")
            + self.s.to_bytes(32, "big")
        )

    def to_base64(self) -> str:
        return base64.b64encode(self.to_compact()).decode("ascii")


__all__: tuple[str, ...] = ("COMPACT_SIZE", "Signature")
