"""Type definitions for cosmokit."""

from ..types.common import (
    HexStr,
    Address,
    Mnemonic,
    Seed,
    PrivateKeyBytes,
    PublicKeyBytes,
    SignatureBytes,
    TxTree,
    JSONScalar,
)
from ..types.tx import SignMeta, StdSignature
from ..types.wallet import KeyPair, Wallet

__all__ = [
    # Common types
    "HexStr",
    "Address",
    "Mnemonic",
    "Seed",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "SignatureBytes",
    "TxTree",
    "JSONScalar",

    # Wallet types
    "KeyPair",
    "Wallet",

    # Transaction types
    "SignMeta",
    "StdSignature",
]
