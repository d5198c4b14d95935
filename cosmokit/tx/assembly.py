"""Signed transaction and broadcast body assembly for cosmokit."""

import json
import logging
from collections.abc import Mapping
from typing import Union

from ..constants import BROADCAST_MODE
from ..exceptions import MalformedTxTree
from ..types.tx import StdSignature

__all__ = ["create_signed_tx", "create_broadcast_body"]

logger = logging.getLogger(__name__)


def create_signed_tx(tx: Mapping, signature: Union[StdSignature, Mapping]) -> dict:
    """
    Attach a signature to a transaction.

    Args:
        tx: Unsigned transaction body
        signature: Signature envelope

    Returns:
        Copy of ``tx`` whose ``signatures`` list holds only this signature
    """
    if not isinstance(tx, Mapping):
        raise MalformedTxTree(f"Transaction must be a mapping, got {type(tx).__name__}")

    if isinstance(signature, StdSignature):
        signature = signature.to_dict()

    return {**tx, "signatures": [dict(signature)]}


def create_broadcast_body(signed_tx: Mapping, mode: str = BROADCAST_MODE) -> str:
    """
    Serialize the body for ``POST /txs``.

    Args:
        signed_tx: Transaction with signatures attached
        mode: Broadcast mode the node should wait for

    Returns:
        JSON string ``{"tx": ..., "return": mode}``
    """
    try:
        body = json.dumps({"tx": signed_tx, "return": mode}, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise MalformedTxTree(f"Cannot serialize signed transaction: {e}") from e

    logger.debug(f"Built broadcast body ({len(body)} chars, mode={mode})")
    return body
