"""Constants and chain configuration for cosmokit."""

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "DEFAULT_HD_PATH",
    "BECH32_PREFIX",
    "PUBKEY_TYPE",
    "BROADCAST_MODE",
    "ENTROPY_LENGTH",
    "SEED_ITERATIONS",
    "SECP256K1_ORDER",
    "HARDENED_OFFSET",
    "MAX_TREE_DEPTH",
    "DEFAULT_ENDPOINT",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "BROADCAST_PATH",
    "ChainConfig",
    "DEFAULT_CONFIG",
]

# Key derivation
DEFAULT_HD_PATH = "m/44'/118'/0'/0/0"
ENTROPY_LENGTH = 32
SEED_ITERATIONS = 2048
HARDENED_OFFSET = 0x80000000

# secp256k1 curve order
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# Addresses and signatures
BECH32_PREFIX = "cosmos"
PUBKEY_TYPE = "tendermint/PubKeySecp256k1"

# Sign doc canonicalization
MAX_TREE_DEPTH = 128

# REST (LCD) endpoint
DEFAULT_ENDPOINT = "http://localhost:1317"
DEFAULT_TIMEOUT = 30
USER_AGENT = "cosmokit/0.1.0"
BROADCAST_PATH = "/txs"
BROADCAST_MODE = "block"


@dataclass(frozen=True)
class ChainConfig:
    """Per-chain settings passed explicitly into derivation and assembly."""

    hd_path: str = DEFAULT_HD_PATH
    prefix: str = BECH32_PREFIX
    broadcast_mode: str = BROADCAST_MODE
    endpoint: str = DEFAULT_ENDPOINT
    chain_id: Optional[str] = None


DEFAULT_CONFIG = ChainConfig()
