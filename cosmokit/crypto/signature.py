"""Signature utilities for cosmokit."""

import logging
from typing import Mapping, Union

from ..constants import PUBKEY_TYPE
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import CryptoError
from ..types.common import SignatureBytes
from ..types.tx import SignMeta, StdSignature
from ..types.wallet import Wallet
from ..utils.encoding import sha256

__all__ = [
    "sign_with_private_key",
    "create_signature",
    "verify_signature",
    "sign",
]

logger = logging.getLogger(__name__)


def _message_bytes(message: Union[str, bytes]) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def sign_with_private_key(
    sign_message: Union[str, bytes],
    private_key: Union[bytes, str, PrivateKey]
) -> SignatureBytes:
    """
    Sign canonical sign bytes.

    Args:
        sign_message: Canonical sign message (str is UTF-8 encoded)
        private_key: 32-byte private key, hex string, or PrivateKey

    Returns:
        64-byte compact signature over SHA256(sign_message)

    Raises:
        InvalidPrivateKey: If the key is not a valid scalar
    """
    key = PrivateKey(private_key)
    sign_hash = sha256(_message_bytes(sign_message))
    return key.sign(sign_hash)


def create_signature(
    signature: bytes,
    public_key: Union[bytes, str, PublicKey],
    key_type: str = PUBKEY_TYPE
) -> StdSignature:
    """Wrap a raw signature and its public key into a signature envelope."""
    if len(signature) != 64:
        raise CryptoError(f"Signature must be 64 bytes, got {len(signature)}")
    return StdSignature(
        signature=SignatureBytes(bytes(signature)),
        public_key=PublicKey(public_key).point,
        key_type=key_type,
    )


def verify_signature(
    sign_message: Union[str, bytes],
    signature: bytes,
    public_key: Union[bytes, str, PublicKey]
) -> bool:
    """Verify a compact signature over SHA256(sign_message)."""
    return PublicKey(public_key).verify(signature, sha256(_message_bytes(sign_message)))


def sign(tx: Mapping, wallet: Wallet, meta: SignMeta) -> StdSignature:
    """
    Sign a transaction with a local wallet.

    Args:
        tx: Unsigned transaction body (the ``value`` of an ``auth/StdTx``)
        wallet: Wallet holding the signing key
        meta: Sequence, account number and chain id

    Returns:
        Signature envelope to attach to the transaction
    """
    from ..tx.sign_doc import create_sign_message

    sign_message = create_sign_message(tx, meta)
    signature = sign_with_private_key(sign_message, wallet.private_key)
    logger.debug(f"Signed tx for {wallet.address} on chain {meta.chain_id}")
    return create_signature(signature, wallet.public_key)
