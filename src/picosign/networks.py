"""
Network parameters: version bytes for addresses and WIF private keys.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgument


@dataclass(frozen=True)
class Network:
    """Version bytes identifying a Bitcoin network."""

    name: str
    pubkeyhash: int
    scripthash: int
    privatekey: int
    aliases: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.name


LIVENET = Network(
    name="livenet",
    pubkeyhash=0x00,
    scripthash=0x05,
    privatekey=0x80,
    aliases=("mainnet",),
)
TESTNET = Network(
    name="testnet",
    pubkeyhash=0x6F,
    scripthash=0xC4,
    privatekey=0xEF,
    aliases=("regtest",),
)

NETWORKS: tuple[Network, ...] = (LIVENET, TESTNET)

_default_network = LIVENET


def get_network(network: Network | str | None = None) -> Network:
    """
    Resolve a network by name or alias; None gives the default network.

    Raises:
        InvalidArgument: for unknown names.
    """
    if network is None:
        return _default_network
    if isinstance(network, Network):
        return network
    if isinstance(network, str):
        for candidate in NETWORKS:
            if network == candidate.name or network in candidate.aliases:
                return candidate
    raise InvalidArgument(f"unknown network: {network!r}")


def network_for_version(version: int, kind: str) -> Network:
    """Network whose `kind` version byte ("pubkeyhash", "scripthash", "privatekey") equals version."""
    for candidate in NETWORKS:
        if getattr(candidate, kind) == version:
            return candidate
    raise ValueError(f"unknown {kind} version byte: {version:#04x}")


def get_default_network() -> Network:
    return _default_network


def set_default_network(network: Network | str) -> None:
    """Network used for keys and addresses built without an explicit one."""
    global _default_network
    _default_network = get_network(network)


__all__: tuple[str, ...] = (
    "LIVENET",
    "NETWORKS",
    "Network",
    "TESTNET",
    "get_default_network",
    "get_network",
    "network_for_version",
    "set_default_network",
)
