"""Cryptographic utilities for cosmokit."""

from ..crypto.keys import PrivateKey, PublicKey
from ..crypto.bip39 import (
    entropy_to_mnemonic,
    generate_mnemonic,
    validate_mnemonic,
    is_valid_mnemonic,
    mnemonic_to_seed,
    mnemonic_to_seed_async,
)
from ..crypto.hd import HDNode, derive_keypair
from ..crypto.address import create_address, decode_address, is_valid_address
from ..crypto.signature import (
    sign_with_private_key,
    create_signature,
    verify_signature,
    sign,
)

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",

    # Mnemonic and seed
    "entropy_to_mnemonic",
    "generate_mnemonic",
    "validate_mnemonic",
    "is_valid_mnemonic",
    "mnemonic_to_seed",
    "mnemonic_to_seed_async",

    # HD derivation
    "HDNode",
    "derive_keypair",

    # Addresses
    "create_address",
    "decode_address",
    "is_valid_address",

    # Signatures
    "sign_with_private_key",
    "create_signature",
    "verify_signature",
    "sign",
]
