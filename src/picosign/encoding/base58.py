"""
Base58Check: version-prefixed payload + 4-byte double SHA-256 checksum, base58 text.
"""

from __future__ import annotations

from base58check import b58decode, b58encode

from ..hashes import sha256d


def b58check_encode(payload: bytes) -> str:
    """Append the checksum to payload and base58-encode it."""
    checksum = sha256d(payload)[:4]
    return b58encode(payload + checksum).decode("ascii")


def b58check_decode(text: str) -> bytes:
    """
    Decode base58 text and verify its checksum.

    Args:
        text: Base58Check string.

    Returns:
        Payload without the 4-byte checksum.

    Raises:
        ValueError: on characters outside the base58 alphabet, short input
            or checksum mismatch.
    """
    try:
        raw = b58decode(text.encode("ascii"))
    except UnicodeEncodeError as exc:
        raise ValueError("non-ascii character in base58 string") from exc
    if len(raw) < 5:
        raise ValueError("base58check data too short")
    payload, checksum = raw[:-4], raw[-4:]
    if sha256d(payload)[:4] != checksum:
        raise ValueError("base58check checksum mismatch")
    return payload


__all__: tuple[str, ...] = ("b58check_decode", "b58check_encode")
