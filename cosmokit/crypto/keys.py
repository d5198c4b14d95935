"""Key management for cosmokit."""

import logging
from typing import Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey
from coincurve.ecdsa import cdata_to_der, deserialize_compact

from ..constants import BECH32_PREFIX
from ..crypto.address import create_address
from ..exceptions import CryptoError, InvalidPrivateKey
from ..types.common import Address, PrivateKeyBytes, PublicKeyBytes, SignatureBytes
from ..utils.encoding import hash160
from ..utils.validation import validate_private_key, validate_public_key

__all__ = ["PrivateKey", "PublicKey"]

logger = logging.getLogger(__name__)


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Handles public key derivation and deterministic (RFC 6979) signing
    in the compact 64-byte format used by Tendermint.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            InvalidPrivateKey: If key is not a valid scalar
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        # Validate and normalize key
        self._secret = PrivateKeyBytes(validate_private_key(key))

        try:
            self._key = SecpPrivateKey(self._secret)
        except ValueError as e:
            raise InvalidPrivateKey(f"Invalid private key: {e}") from e

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    def hex(self) -> str:
        """Get private key as hex string."""
        return self._secret.hex()

    def public_key(self) -> "PublicKey":
        """Get the corresponding compressed public key."""
        return PublicKey(self._key.public_key.format(compressed=True))

    def sign(self, message_hash: bytes) -> SignatureBytes:
        """
        Sign 32-byte message hash.

        Args:
            message_hash: 32-byte hash to sign

        Returns:
            64-byte compact signature (r || s, low S)

        Raises:
            CryptoError: If signing fails
        """
        return SignatureBytes(self.sign_recoverable(message_hash)[:64])

    def sign_recoverable(self, message_hash: bytes) -> bytes:
        """
        Create recoverable signature.

        Args:
            message_hash: 32-byte hash to sign

        Returns:
            65-byte signature (r || s || recovery id)

        Raises:
            CryptoError: If signing fails
        """
        if len(message_hash) != 32:
            raise ValueError("Message hash must be 32 bytes")

        try:
            return self._key.sign_recoverable(message_hash, hasher=None)
        except Exception as e:
            raise CryptoError(f"Signing failed: {e}") from e

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars of hex for security
        hex_str = self.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey:
    """
    Compressed secp256k1 public key wrapper.

    Handles address generation and signature verification.
    """

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: 33-byte compressed key as bytes, hex string, or another PublicKey

        Raises:
            InvalidPublicKeyLength: If key is not a compressed encoding
            CryptoError: If the point is not on the curve
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            self._key = key._key
            return

        self._point = PublicKeyBytes(validate_public_key(key))

        try:
            self._key = SecpPublicKey(self._point)
        except ValueError as e:
            raise CryptoError(f"Invalid public key point: {e}") from e

    @property
    def point(self) -> PublicKeyBytes:
        """Get public key as bytes."""
        return self._point

    def hex(self) -> str:
        """Get public key as hex string."""
        return self._point.hex()

    def hash160(self) -> bytes:
        """Get HASH160 of public key."""
        return hash160(self._point)

    def address(self, prefix: str = BECH32_PREFIX) -> Address:
        """Get bech32 account address."""
        return create_address(self._point, prefix)

    def verify(self, signature: bytes, message_hash: bytes) -> bool:
        """
        Verify signature.

        Args:
            signature: 64-byte compact or DER-encoded signature
            message_hash: 32-byte message hash

        Returns:
            True if signature is valid
        """
        if len(message_hash) != 32:
            return False

        try:
            if len(signature) == 64:
                signature = cdata_to_der(deserialize_compact(signature))
            return self._key.verify(signature, message_hash, hasher=None)
        except ValueError:
            # Unparseable signature encoding
            return False

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self.point == other.point

    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.address()})"
