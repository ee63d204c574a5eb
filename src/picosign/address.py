"""
Base58Check Bitcoin addresses (P2PKH and P2SH).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .encoding import b58check_decode, b58check_encode
from .errors import InvalidAddress, InvalidArgument
from .hashes import hash160
from .networks import Network, get_network, network_for_version

if TYPE_CHECKING:
    from .keys import PublicKey

PAY_TO_PUBLIC_KEY_HASH = "pubkeyhash"
PAY_TO_SCRIPT_HASH = "scripthash"


class Address:
    """
    A version byte plus a 20-byte hash, rendered as Base58Check.

    Addresses compare equal when their string forms are equal.
    """

    __slots__ = ("hash160", "network", "type")

    def __init__(
        self,
        hash_bytes: bytes,
        network: Network | str | None = None,
        type: str = PAY_TO_PUBLIC_KEY_HASH,
    ) -> None:
        if not isinstance(hash_bytes, bytes) or len(hash_bytes) != 20:
            raise InvalidArgument("address hash must be 20 bytes")
        if type not in (PAY_TO_PUBLIC_KEY_HASH, PAY_TO_SCRIPT_HASH):
            raise InvalidArgument(f"unknown address type: {type!r}")
        self.hash160 = hash_bytes
        self.network = get_network(network)
        self.type = type

    @classmethod
    def from_string(cls, text: str) -> Address:
        """
        Parse a Base58Check address; the network and type come from its version byte.

        Raises:
            InvalidAddress: on bad characters, checksum, length or version byte.
        """
        if not isinstance(text, str):
            raise InvalidAddress(f"address must be a string, got {type(text).__name__}")
        try:
            payload = b58check_decode(text)
        except ValueError as exc:
            raise InvalidAddress(f"invalid address {text!r}: {exc}") from exc
        if len(payload) != 21:
            raise InvalidAddress(f"invalid address {text!r}: wrong payload length")
        version, hash_bytes = payload[0], payload[1:]
        for kind in (PAY_TO_PUBLIC_KEY_HASH, PAY_TO_SCRIPT_HASH):
            try:
                network = network_for_version(version, kind)
            except ValueError:
                continue
            return cls(hash_bytes, network, kind)
        raise InvalidAddress(f"invalid address {text!r}: unknown version byte {version:#04x}")

    @classmethod
    def from_public_key(
        cls, public_key: PublicKey, network: Network | str | None = None
    ) -> Address:
        """P2PKH address of a public key, hashing the key in its own (compressed or not) encoding."""
        return cls(hash160(public_key.to_bytes()), network, PAY_TO_PUBLIC_KEY_HASH)

    def version(self) -> int:
        return getattr(self.network, self.type)

    def to_string(self) -> str:
        return b58check_encode(bytes([self.version()]) + self.hash160)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<Address: {self.to_string()}, type: {self.type}, network: {self.network}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())


__all__: tuple[str, ...] = (
    "Address",
    "PAY_TO_PUBLIC_KEY_HASH",
    "PAY_TO_SCRIPT_HASH",
)
