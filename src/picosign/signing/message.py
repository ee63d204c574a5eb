"""
Bitcoin signed messages: prove control of the key behind an address over a text.

The signed digest is the "magic hash":

    sha256d(varint(24) || b"Bitcoin Signed Message:\\n" || varint(len(m)) || m)

where m is the UTF-8 encoding of the text. The prefix keeps a message signature
from ever being valid as a signature over transaction data.

Signatures are 65-byte compact recoverable signatures in base64. Verification
recovers the signer's public key, compares the address it implies with the
claimed address, and only then runs a full ECDSA verification.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..address import Address
from ..curves import recover_pubkey, sign_recoverable, verify_signature
from ..encoding import varint_encode
from ..errors import InvalidArgument
from ..hashes import sha256d
from ..keys import PrivateKey, PublicKey
from ..signature import Signature

logger = logging.getLogger(__name__)

MAGIC_BYTES = b"Bitcoin Signed Message:\n"

ERROR_ADDRESS_MISMATCH = "The signature did not match the message digest"
ERROR_INVALID_SIGNATURE = "The signature was invalid"


def signed_message_hash(text: str) -> bytes:
    """
    Magic hash of a text message.

    Args:
        text: Message text; encoded as UTF-8.

    Returns:
        32-byte double SHA-256 digest of the length-prefixed, magic-prefixed message.
    """
    data = text.encode("utf-8")
    return sha256d(
        varint_encode(len(MAGIC_BYTES)) + MAGIC_BYTES + varint_encode(len(data)) + data
    )


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a verification; truthy iff the signature is valid."""

    valid: bool
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


class Message:
    """
    A text message that can be signed and verified.

    `last_error` holds the reason of the latest failed `verify` call and is
    reset to None when a call starts. It is advisory diagnostic data: keep to
    one in-flight `verify` per instance, or use `verify_detailed`, which
    returns the reason and leaves the instance untouched.
    """

    def __init__(self, message: str) -> None:
        if not isinstance(message, str):
            raise InvalidArgument("First argument should be a string")
        self.message = message
        self.last_error: Optional[str] = None

    @classmethod
    def from_string(cls, text: str) -> Message:
        return cls(text)

    @classmethod
    def from_json(cls, data: str | bytes | Mapping[str, Any]) -> Message:
        """
        Build a message from JSON text or an already parsed mapping with a "message" key.

        Raises:
            InvalidArgument: if data is neither, or has no string "message".
        """
        if isinstance(data, (str, bytes, bytearray)):
            try:
                data = json.loads(data)
            except ValueError as exc:
                raise InvalidArgument(f"invalid JSON: {exc}") from exc
        if not isinstance(data, Mapping) or "message" not in data:
            raise InvalidArgument('expected an object with a "message" field')
        return cls(data["message"])

    def magic_hash(self) -> bytes:
        return signed_message_hash(self.message)

    def _sign(self, private_key: PrivateKey) -> Signature:
        if not isinstance(private_key, PrivateKey):
            raise InvalidArgument("First argument should be an instance of PrivateKey")
        digest = self.magic_hash()
        r, s, recid = sign_recoverable(private_key.secret, digest)
        return Signature(r, s, recid, private_key.compressed)

    def sign(self, private_key: PrivateKey) -> str:
        """
        Sign the message.

        Args:
            private_key: Signing key; its `compressed` flag selects the address
                form the signature will verify against.

        Returns:
            Base64 compact signature.
        """
        return self._sign(private_key).to_base64()

    def verify_detailed(
        self, address: Address | str, signature: str | bytes
    ) -> VerificationResult:
        """
        Check a base64 compact signature against an address.

        Raises:
            InvalidArgument: if address or signature is missing or mistyped.
            InvalidAddress: if a string address cannot be parsed.
            InvalidSignatureEncoding: if the signature is not a compact signature.

        Returns:
            VerificationResult; a mismatch is reported there, never raised.
        """
        if not address or not isinstance(address, (Address, str)):
            raise InvalidArgument("First argument should be an address or address string")
        if not signature or not isinstance(signature, (str, bytes)):
            raise InvalidArgument("Second argument should be a base64 signature string")

        if isinstance(address, str):
            address = Address.from_string(address)
        sig = Signature.from_base64(signature)
        digest = self.magic_hash()

        try:
            pubkey = recover_pubkey(digest, sig.r, sig.s, sig.recid, sig.compressed)
        except ValueError as exc:
            logger.debug("public key recovery failed: %s", exc)
            return VerificationResult(False, ERROR_INVALID_SIGNATURE)

        signature_address = PublicKey(pubkey).to_address(address.network)
        if str(signature_address) != str(address):
            logger.debug(
                "recovered address %s does not match %s", signature_address, address
            )
            return VerificationResult(False, ERROR_ADDRESS_MISMATCH)

        if not verify_signature(digest, sig.r, sig.s, pubkey):
            logger.debug("ECDSA verification failed for %s", address)
            return VerificationResult(False, ERROR_INVALID_SIGNATURE)
        return VerificationResult(True)

    def verify(self, address: Address | str, signature: str | bytes) -> bool:
        """
        True iff signature was made over this message by the key behind address.

        On failure the reason is stored in `last_error`.
        """
        self.last_error = None
        result = self.verify_detailed(address, signature)
        self.last_error = result.error
        return result.valid

    def to_object(self) -> dict[str, str]:
        return {"message": self.message}

    def to_json(self) -> str:
        return json.dumps(self.to_object())

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"<Message: {self.message}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)


def sign_message(private_key: PrivateKey, text: str) -> str:
    """Base64 compact signature of text under private_key."""
    return Message(text).sign(private_key)


def verify_message(address: Address | str, text: str, signature: str | bytes) -> bool:
    """True iff signature over text verifies against address."""
    return Message(text).verify(address, signature)


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
