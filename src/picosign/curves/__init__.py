"""Elliptic-curve crypto: secp256k1 (Bitcoin)."""

from .secp256k1 import (CURVE_ORDER, decode_pubkey, encode_pubkey,
                        privkey_to_pubkey, recover_pubkey, sign_recoverable,
                        verify_signature)

__all__: tuple[str, ...] = (
    "CURVE_ORDER",
    "decode_pubkey",
    "encode_pubkey",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    "verify_signature",
)
