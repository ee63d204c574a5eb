"""
SHA-256 based digests used by Bitcoin: sha256, double SHA-256, HASH160.
"""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160


def sha256(data: bytes) -> bytes:
    """Single SHA-256; 32-byte digest."""
    return hashlib.sha256(data).digest()


def sha256d(data: bytes) -> bytes:
    """
    Double SHA-256, i.e. SHA-256(SHA-256(data)).

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def hash160(data: bytes) -> bytes:
    """
    RIPEMD-160(SHA-256(data)), the 20-byte hash behind P2PKH addresses.

    RIPEMD-160 comes from pycryptodome since OpenSSL 3 builds of hashlib
    may not provide it.
    """
    return RIPEMD160.new(hashlib.sha256(data).digest()).digest()


__all__: tuple[str, ...] = ("hash160", "sha256", "sha256d")
