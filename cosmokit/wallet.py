"""Wallet derivation pipeline: mnemonic to keys and address."""

import logging
from typing import Optional

from .constants import ChainConfig, DEFAULT_CONFIG
from .crypto.address import create_address
from .crypto.bip39 import EntropySource, generate_mnemonic, mnemonic_to_seed, mnemonic_to_seed_async
from .crypto.hd import HDNode, derive_keypair
from .types.common import Mnemonic, Seed
from .types.wallet import Wallet

__all__ = [
    "generate_seed",
    "derive_master_key",
    "wallet_from_seed",
    "wallet_from_mnemonic",
    "wallet_from_mnemonic_async",
    "generate_wallet",
    "generate_wallet_async",
]

logger = logging.getLogger(__name__)


def generate_seed(random_bytes_func: Optional[EntropySource] = None) -> Mnemonic:
    """
    Generate a fresh 24-word mnemonic.

    Args:
        random_bytes_func: Entropy source; inject fixed bytes for reproducible wallets

    Raises:
        InvalidEntropyLength: If the source does not return 32 bytes
    """
    return generate_mnemonic(random_bytes_func)


def derive_master_key(mnemonic: str, passphrase: str = "") -> HDNode:
    """Validate a mnemonic and build the BIP32 master node."""
    return HDNode.from_seed(mnemonic_to_seed(mnemonic, passphrase))


def wallet_from_seed(seed: Seed, config: ChainConfig = DEFAULT_CONFIG) -> Wallet:
    """Derive the wallet for ``config.hd_path`` from a BIP39 seed."""
    master = HDNode.from_seed(seed)
    keypair = derive_keypair(master, config.hd_path)
    address = create_address(keypair.public_key, config.prefix)

    logger.debug(f"Derived wallet {address} at {config.hd_path}")
    return Wallet(
        private_key=keypair.private_key,
        public_key=keypair.public_key,
        address=address,
    )


def wallet_from_mnemonic(
    mnemonic: str,
    config: ChainConfig = DEFAULT_CONFIG,
    passphrase: str = ""
) -> Wallet:
    """
    Derive a wallet from a mnemonic phrase.

    Args:
        mnemonic: BIP39 phrase
        config: Derivation path and address prefix
        passphrase: Optional BIP39 passphrase

    Returns:
        Wallet with private key, public key and address

    Raises:
        InvalidMnemonic: If the phrase fails validation
        InvalidDerivation: If a derived key is degenerate
    """
    return wallet_from_seed(mnemonic_to_seed(mnemonic, passphrase), config)


async def wallet_from_mnemonic_async(
    mnemonic: str,
    config: ChainConfig = DEFAULT_CONFIG,
    passphrase: str = ""
) -> Wallet:
    """Same as wallet_from_mnemonic, with seed stretching off the event loop."""
    seed = await mnemonic_to_seed_async(mnemonic, passphrase)
    return wallet_from_seed(seed, config)


def generate_wallet(
    random_bytes_func: Optional[EntropySource] = None,
    config: ChainConfig = DEFAULT_CONFIG
) -> Wallet:
    """Generate a mnemonic and derive its wallet."""
    return wallet_from_mnemonic(generate_seed(random_bytes_func), config)


async def generate_wallet_async(
    random_bytes_func: Optional[EntropySource] = None,
    config: ChainConfig = DEFAULT_CONFIG
) -> Wallet:
    """Async variant of generate_wallet."""
    return await wallet_from_mnemonic_async(generate_seed(random_bytes_func), config)
