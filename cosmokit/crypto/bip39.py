"""BIP39 mnemonic implementation for cosmokit."""

import asyncio
import hashlib
import logging
import secrets
import unicodedata
from typing import Callable, Optional

from mnemonic import Mnemonic as _Bip39

from ..constants import ENTROPY_LENGTH, SEED_ITERATIONS
from ..exceptions import InvalidEntropyLength, InvalidMnemonic
from ..types.common import Mnemonic, Seed

__all__ = [
    "EntropySource",
    "entropy_to_mnemonic",
    "generate_mnemonic",
    "validate_mnemonic",
    "is_valid_mnemonic",
    "mnemonic_to_seed",
    "mnemonic_to_seed_async",
]

logger = logging.getLogger(__name__)

EntropySource = Callable[[int], bytes]
"""Callable returning the requested number of random bytes."""

_WORD_COUNTS = (12, 15, 18, 21, 24)
_codec = _Bip39("english")


def entropy_to_mnemonic(entropy: bytes) -> Mnemonic:
    """
    Encode 32 bytes of entropy as a 24-word English mnemonic.

    Args:
        entropy: Exactly 32 bytes

    Returns:
        Checksummed mnemonic phrase

    Raises:
        InvalidEntropyLength: If entropy is not 32 bytes
    """
    if len(entropy) != ENTROPY_LENGTH:
        raise InvalidEntropyLength(len(entropy), ENTROPY_LENGTH)
    return Mnemonic(_codec.to_mnemonic(bytes(entropy)))


def generate_mnemonic(entropy_source: Optional[EntropySource] = None) -> Mnemonic:
    """
    Generate a new mnemonic from an entropy source.

    Args:
        entropy_source: Callable returning n random bytes (default: secrets.token_bytes)

    Returns:
        24-word mnemonic phrase

    Raises:
        InvalidEntropyLength: If the source returns the wrong number of bytes
    """
    if entropy_source is None:
        entropy_source = secrets.token_bytes
    return entropy_to_mnemonic(entropy_source(ENTROPY_LENGTH))


def validate_mnemonic(mnemonic: str) -> Mnemonic:
    """
    Validate mnemonic words and checksum.

    Args:
        mnemonic: Phrase to check; extra whitespace is collapsed

    Returns:
        Normalized phrase

    Raises:
        InvalidMnemonic: If a word is unknown, the length is wrong, or the checksum fails
    """
    words = unicodedata.normalize("NFKD", mnemonic).split()

    if len(words) not in _WORD_COUNTS:
        raise InvalidMnemonic(f"Mnemonic must have 12, 15, 18, 21 or 24 words, got {len(words)}")

    for word in words:
        if word not in _codec.wordlist:
            raise InvalidMnemonic(f"Unknown mnemonic word: {word!r}")

    phrase = " ".join(words)
    if not _codec.check(phrase):
        raise InvalidMnemonic("Invalid mnemonic checksum")

    return Mnemonic(phrase)


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Check mnemonic validity without raising."""
    try:
        validate_mnemonic(mnemonic)
        return True
    except InvalidMnemonic:
        return False


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> Seed:
    """Convert mnemonic to seed using PBKDF2."""
    mnemonic = validate_mnemonic(mnemonic)
    mnemonic_bytes = mnemonic.encode('utf-8')
    passphrase_bytes = unicodedata.normalize("NFKD", "mnemonic" + passphrase).encode('utf-8')

    return Seed(hashlib.pbkdf2_hmac(
        'sha512',
        mnemonic_bytes,
        passphrase_bytes,
        SEED_ITERATIONS,
        dklen=64
    ))


async def mnemonic_to_seed_async(mnemonic: str, passphrase: str = "") -> Seed:
    """Run mnemonic_to_seed in the default executor."""
    loop = asyncio.get_running_loop()
    logger.debug("Stretching mnemonic seed in executor")
    return await loop.run_in_executor(None, mnemonic_to_seed, mnemonic, passphrase)
