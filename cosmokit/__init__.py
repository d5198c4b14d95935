"""
cosmokit

Local key derivation and amino JSON transaction signing for Cosmos SDK
chains, with a small async client for the REST (LCD) server.
"""

from typing import Optional

from .client import Cosmos
from .constants import ChainConfig, DEFAULT_CONFIG
from .exceptions import (
    CosmokitError,
    CryptoError,
    InvalidEntropyLength,
    InvalidMnemonic,
    InvalidDerivation,
    InvalidPublicKeyLength,
    InvalidPrivateKey,
    MalformedTxTree,
    ProviderError,
)
from .providers import HTTPProvider
from .crypto import PrivateKey, PublicKey, create_address, sign
from .tx import (
    prepare_sign_bytes,
    create_sign_message,
    create_signed_tx,
    create_broadcast_body,
)
from .types import SignMeta, StdSignature, Wallet
from .wallet import (
    generate_seed,
    generate_wallet,
    generate_wallet_async,
    wallet_from_mnemonic,
    wallet_from_mnemonic_async,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "Cosmos",
    "connect",

    # Configuration
    "ChainConfig",
    "DEFAULT_CONFIG",

    # Providers
    "HTTPProvider",

    # Exceptions
    "CosmokitError",
    "CryptoError",
    "InvalidEntropyLength",
    "InvalidMnemonic",
    "InvalidDerivation",
    "InvalidPublicKeyLength",
    "InvalidPrivateKey",
    "MalformedTxTree",
    "ProviderError",

    # Crypto
    "PrivateKey",
    "PublicKey",
    "create_address",
    "sign",

    # Wallets
    "Wallet",
    "generate_seed",
    "generate_wallet",
    "generate_wallet_async",
    "wallet_from_mnemonic",
    "wallet_from_mnemonic_async",

    # Transactions
    "SignMeta",
    "StdSignature",
    "prepare_sign_bytes",
    "create_sign_message",
    "create_signed_tx",
    "create_broadcast_body",
]


def connect(
    endpoint: Optional[str] = None,
    config: ChainConfig = DEFAULT_CONFIG,
    **kwargs
) -> Cosmos:
    """
    Create a client for a Cosmos REST server.

    Args:
        endpoint: REST base URL (default: config.endpoint)
        config: Chain settings
        **kwargs: Additional HTTPProvider arguments

    Returns:
        Cosmos client instance

    Example:
        >>> async with cosmokit.connect("http://localhost:1317") as client:
        ...     tx = await client.tx.fetch_unsigned("/bank/accounts/.../transfers")
    """
    provider = HTTPProvider(endpoint=endpoint or config.endpoint, **kwargs)
    return Cosmos(provider=provider, config=config)
