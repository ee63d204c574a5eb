"""Signing schemas: Bitcoin signed messages."""

from .message import (ERROR_ADDRESS_MISMATCH, ERROR_INVALID_SIGNATURE,
                      MAGIC_BYTES, Message, VerificationResult, sign_message,
                      signed_message_hash, verify_message)

__all__: tuple[str, ...] = (
    "ERROR_ADDRESS_MISMATCH",
    "ERROR_INVALID_SIGNATURE",
    "MAGIC_BYTES",
    "Message",
    "VerificationResult",
    "sign_message",
    "signed_message_hash",
    "verify_message",
)
