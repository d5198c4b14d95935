"""cosmokit exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "CosmokitError",
    "CryptoError",
    "InvalidEntropyLength",
    "InvalidMnemonic",
    "InvalidDerivation",
    "InvalidPublicKeyLength",
    "InvalidPrivateKey",
    "ValidationError",
    "AddressError",
    "SerializationError",
    "MalformedTxTree",
    "ProviderError",
    "NetworkError",
    "APIError",
    "TimeoutError",
]


class CosmokitError(Exception):
    """Base exception for all cosmokit errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class CryptoError(CosmokitError):
    """Raised when cryptographic operation fails."""
    pass


class InvalidEntropyLength(CryptoError):
    """Raised when entropy is not exactly 32 bytes."""

    def __init__(self, length: int, expected: int = 32) -> None:
        super().__init__(f"Entropy has incorrect length: expected {expected} bytes, got {length}")
        self.length = length
        self.expected = expected


class InvalidMnemonic(CryptoError):
    """Raised when a mnemonic fails wordlist or checksum validation."""
    pass


class InvalidDerivation(CryptoError):
    """Raised when HD derivation yields an unusable key."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class InvalidPublicKeyLength(CryptoError):
    """Raised when a public key is not a 33-byte compressed point."""
    pass


class InvalidPrivateKey(CryptoError):
    """Raised when a private key is not a valid secp256k1 scalar."""
    pass


class ValidationError(CosmokitError):
    """Raised when validation fails."""
    pass


class AddressError(ValidationError):
    """Raised when address operation fails."""
    pass


class SerializationError(CosmokitError):
    """Raised when serialization/deserialization fails."""
    pass


class MalformedTxTree(SerializationError):
    """Raised when a transaction tree cannot be canonicalized."""
    pass


class ProviderError(CosmokitError):
    """Raised when provider encounters an error."""
    pass


class NetworkError(ProviderError):
    """Raised when network communication fails."""
    pass


class APIError(ProviderError):
    """Raised when API returns an error response."""
    pass


class TimeoutError(NetworkError):
    """Raised when operation times out."""
    pass
