"""Bech32 account addresses for cosmokit."""

import logging
from typing import Optional, Union

from ..constants import BECH32_PREFIX
from ..exceptions import AddressError, ValidationError
from ..types.common import Address
from ..utils.encoding import decode_bech32, encode_bech32, hash160
from ..utils.validation import validate_public_key

__all__ = ["create_address", "bech32ify", "decode_address", "is_valid_address"]

logger = logging.getLogger(__name__)

ADDRESS_HASH_LENGTH = 20


def bech32ify(data: bytes, prefix: str) -> str:
    """Encode raw bytes as bech32 under the given prefix."""
    return encode_bech32(prefix, data)


def create_address(public_key: Union[bytes, str], prefix: str = BECH32_PREFIX) -> Address:
    """
    Create an account address from a compressed public key.

    The payload is RIPEMD160(SHA256(public_key)). Uncompressed keys are
    rejected because they would hash to an unrelated address.

    Args:
        public_key: 33-byte compressed public key (bytes or hex)
        prefix: Bech32 human-readable part

    Returns:
        Bech32 address string

    Raises:
        InvalidPublicKeyLength: If the key is not 33-byte compressed
    """
    key = validate_public_key(public_key)
    return Address(bech32ify(hash160(key), prefix))


def decode_address(address: str, prefix: Optional[str] = None) -> bytes:
    """
    Decode an account address into its 20-byte key hash.

    Args:
        address: Bech32 address
        prefix: Expected human-readable part (any if None)

    Returns:
        20-byte public key hash

    Raises:
        AddressError: If the address is malformed or the prefix differs
    """
    try:
        hrp, data = decode_bech32(address)
    except ValidationError as e:
        raise AddressError(f"Invalid address {address!r}: {e.message}") from e

    if prefix is not None and hrp != prefix:
        raise AddressError(f"Address prefix {hrp!r} does not match {prefix!r}")
    if len(data) != ADDRESS_HASH_LENGTH:
        raise AddressError(f"Address payload must be {ADDRESS_HASH_LENGTH} bytes, got {len(data)}")

    return data


def is_valid_address(address: str, prefix: Optional[str] = BECH32_PREFIX) -> bool:
    """Check whether a string is a valid account address."""
    try:
        decode_address(address, prefix)
        return True
    except AddressError:
        return False
