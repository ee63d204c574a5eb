"""Exception types raised by picosign."""

from __future__ import annotations


class PicosignError(Exception):
    """Base class for all picosign errors."""


class InvalidArgument(PicosignError, ValueError):
    """An argument has the wrong type or is missing."""


class InvalidAddress(PicosignError, ValueError):
    """An address string could not be parsed."""


class InvalidSignatureEncoding(PicosignError, ValueError):
    """A compact signature (or its base64 text) is structurally malformed."""


class InvalidPrivateKey(PicosignError, ValueError):
    """A private key scalar or its WIF encoding is invalid."""


class InvalidPublicKey(PicosignError, ValueError):
    """A public key encoding is invalid or the point is not on the curve."""


__all__: tuple[str, ...] = (
    "InvalidAddress",
    "InvalidArgument",
    "InvalidPrivateKey",
    "InvalidPublicKey",
    "InvalidSignatureEncoding",
    "PicosignError",
)
