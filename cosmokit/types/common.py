"""Common type definitions for cosmokit."""

from typing import Dict, List, NewType, Union

__all__ = [
    "HexStr",
    "Address",
    "Mnemonic",
    "Seed",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "SignatureBytes",
    "TxTree",
    "JSONScalar",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Address = NewType("Address", str)
"""Bech32 account address string."""

Mnemonic = NewType("Mnemonic", str)
"""Space separated BIP39 phrase."""

Seed = NewType("Seed", bytes)
"""64-byte BIP39 seed."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33-byte compressed public key."""

SignatureBytes = NewType("SignatureBytes", bytes)
"""64-byte compact r||s signature."""

# Transaction trees
JSONScalar = Union[None, bool, int, float, str]
"""Leaf value of a transaction tree."""

TxTree = Union[JSONScalar, List["TxTree"], Dict[str, "TxTree"]]
"""Deserialized amino JSON value. ``{"type", "value"}`` mappings are envelopes."""
