"""
secp256k1 key types: PrivateKey (raw bytes, hex or WIF) and PublicKey (SEC bytes).
"""

from __future__ import annotations

from .address import Address
from .curves import (CURVE_ORDER, decode_pubkey, encode_pubkey,
                     privkey_to_pubkey)
from .encoding import b58check_decode, b58check_encode
from .errors import InvalidPrivateKey, InvalidPublicKey
from .networks import Network, get_network, network_for_version


class PublicKey:
    """A point on secp256k1 and the SEC encoding (compressed or not) it is serialized with."""

    __slots__ = ("point", "compressed")

    def __init__(self, data: bytes) -> None:
        try:
            self.point = decode_pubkey(data)
        except ValueError as exc:
            raise InvalidPublicKey(str(exc)) from exc
        self.compressed = len(data) == 33

    @classmethod
    def from_hex(cls, text: str) -> PublicKey:
        try:
            data = bytes.fromhex(text)
        except ValueError as exc:
            raise InvalidPublicKey("public key is not valid hex") from exc
        return cls(data)

    def to_bytes(self) -> bytes:
        return encode_pubkey(self.point[0], self.point[1], self.compressed)

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def to_address(self, network: Network | str | None = None) -> Address:
        return Address.from_public_key(self, network)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"<PublicKey: {self.to_hex()}>"


class PrivateKey:
    """
    A secp256k1 scalar together with the network and the public key
    encoding (compressed or not) used for the addresses it controls.

    This type only wraps existing key material; it never generates keys.
    """

    __slots__ = ("secret", "network", "compressed")

    def __init__(
        self,
        secret: bytes,
        network: Network | str | None = None,
        compressed: bool = True,
    ) -> None:
        if not isinstance(secret, bytes) or len(secret) != 32:
            raise InvalidPrivateKey("private key must be 32 bytes")
        if not 0 < int.from_bytes(secret, "big") < CURVE_ORDER:
            raise InvalidPrivateKey("private key out of range")
        self.secret = secret
        self.network = get_network(network)
        self.compressed = compressed

    @classmethod
    def from_hex(
        cls, text: str, network: Network | str | None = None, compressed: bool = True
    ) -> PrivateKey:
        try:
            secret = bytes.fromhex(text)
        except ValueError as exc:
            raise InvalidPrivateKey("private key is not valid hex") from exc
        return cls(secret, network, compressed)

    @classmethod
    def from_wif(cls, wif: str) -> PrivateKey:
        """
        Parse Wallet Import Format: version byte || 32-byte secret || [0x01] || checksum.

        The trailing 0x01 marks a key whose addresses use the compressed public key.
        """
        try:
            payload = b58check_decode(wif)
        except ValueError as exc:
            raise InvalidPrivateKey(f"invalid WIF: {exc}") from exc
        if len(payload) == 34 and payload[-1] == 0x01:
            compressed = True
        elif len(payload) == 33:
            compressed = False
        else:
            raise InvalidPrivateKey("invalid WIF: wrong payload length")
        try:
            network = network_for_version(payload[0], "privatekey")
        except ValueError as exc:
            raise InvalidPrivateKey(f"invalid WIF: {exc}") from exc
        return cls(payload[1:33], network, compressed)

    def to_wif(self) -> str:
        payload = bytes([self.network.privatekey]) + self.secret
        if self.compressed:
            payload += b"\x01"
        return b58check_encode(payload)

    def to_public_key(self) -> PublicKey:
        return PublicKey(privkey_to_pubkey(self.secret, self.compressed))

    def to_address(self, network: Network | str | None = None) -> Address:
        return self.to_public_key().to_address(network if network is not None else self.network)

    def __repr__(self) -> str:
        return f"<PrivateKey: network: {self.network}, compressed: {self.compressed}>"


__all__: tuple[str, ...] = ("PrivateKey", "PublicKey")
