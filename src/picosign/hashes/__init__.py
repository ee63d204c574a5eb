"""Hash functions: SHA-256, double SHA-256, HASH160."""

from .digests import hash160, sha256, sha256d

__all__: tuple[str, ...] = ("hash160", "sha256", "sha256d")
