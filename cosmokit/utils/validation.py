"""Input validation utilities for cosmokit."""

import re
from typing import Union

from ..constants import SECP256K1_ORDER
from ..exceptions import InvalidPrivateKey, InvalidPublicKeyLength

__all__ = [
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
]

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


def _to_bytes(key: Union[str, bytes], error_cls: type) -> bytes:
    if isinstance(key, str):
        if key.startswith("0x"):
            key = key[2:]
        if not HEX_PATTERN.match(key):
            raise error_cls("Key must be hexadecimal")
        try:
            return bytes.fromhex(key)
        except ValueError as e:
            raise error_cls(f"Invalid hex key: {e}") from e
    return bytes(key)


def is_valid_private_key(key: Union[str, bytes]) -> bool:
    """
    Check if private key is a valid secp256k1 scalar.

    Args:
        key: Private key as hex string or bytes

    Returns:
        True if valid, False otherwise
    """
    try:
        validate_private_key(key)
        return True
    except InvalidPrivateKey:
        return False


def validate_private_key(key: Union[str, bytes]) -> bytes:
    """
    Validate private key and return as bytes.

    Args:
        key: Private key as hex string or bytes

    Returns:
        Private key as 32 bytes

    Raises:
        InvalidPrivateKey: If key is malformed, zero, or not below the curve order
    """
    key = _to_bytes(key, InvalidPrivateKey)

    if len(key) != 32:
        raise InvalidPrivateKey(f"Private key must be 32 bytes, got {len(key)}")

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise InvalidPrivateKey("Private key cannot be zero")
    if key_int >= SECP256K1_ORDER:
        raise InvalidPrivateKey("Private key exceeds curve order")

    return key


def is_valid_public_key(key: Union[str, bytes]) -> bool:
    """Check if public key is a 33-byte compressed point encoding."""
    try:
        validate_public_key(key)
        return True
    except InvalidPublicKeyLength:
        return False


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate compressed public key and return as bytes.

    Only the 33-byte compressed form is accepted; uncompressed keys hash
    to a different address and are rejected rather than converted.

    Args:
        key: Public key as hex string or bytes

    Returns:
        Public key bytes (33 bytes)

    Raises:
        InvalidPublicKeyLength: If key is not a compressed point encoding
    """
    key = _to_bytes(key, InvalidPublicKeyLength)

    if len(key) != 33:
        raise InvalidPublicKeyLength(f"Public key must be 33 bytes, got {len(key)}")
    if key[0] not in (0x02, 0x03):
        raise InvalidPublicKeyLength("Compressed public key must start with 0x02 or 0x03")

    return key
