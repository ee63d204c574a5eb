"""
Bitcoin signed messages on secp256k1: magic hash, compact recoverable
signatures, address-based verification. Pure Python curve arithmetic.
"""

import logging

from .__about__ import __version__
from .address import Address
from .curves import (privkey_to_pubkey, recover_pubkey, sign_recoverable,
                     verify_signature)
from .errors import (InvalidAddress, InvalidArgument, InvalidPrivateKey,
                     InvalidPublicKey, InvalidSignatureEncoding, PicosignError)
from .hashes import hash160, sha256d
from .keys import PrivateKey, PublicKey
from .networks import (LIVENET, TESTNET, Network, get_default_network,
                       get_network, set_default_network)
from .signature import Signature
from .signing import (Message, VerificationResult, sign_message,
                      signed_message_hash, verify_message)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Errors
    "InvalidAddress",
    "InvalidArgument",
    "InvalidPrivateKey",
    "InvalidPublicKey",
    "InvalidSignatureEncoding",
    "PicosignError",
    # Hashes
    "hash160",
    "sha256d",
    # Curves: secp256k1
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    "verify_signature",
    # Networks
    "LIVENET",
    "TESTNET",
    "Network",
    "get_default_network",
    "get_network",
    "set_default_network",
    # Keys, addresses, signatures
    "Address",
    "PrivateKey",
    "PublicKey",
    "Signature",
    # Signing: Bitcoin signed messages
    "Message",
    "VerificationResult",
    "sign_message",
    "signed_message_hash",
    "verify_message",
)
