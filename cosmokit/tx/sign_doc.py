"""
Canonical sign bytes for amino JSON transactions.

The chain recomputes these bytes on its side and checks the signature
against them, so the output must match byte for byte: keys sorted per
level, null fields dropped, ``{"type", "value"}`` envelopes unwrapped,
and compact JSON with no re-ordering by the serializer.
"""

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from ..constants import MAX_TREE_DEPTH
from ..exceptions import MalformedTxTree, ValidationError
from ..types.common import TxTree
from ..types.tx import SignMeta

__all__ = [
    "prepare_sign_bytes",
    "build_sign_doc",
    "create_sign_message",
    "create_sign_bytes",
    "canonical_json",
]

logger = logging.getLogger(__name__)

_ENVELOPE_KEYS = frozenset(("type", "value"))

# JavaScript prints integral numbers below this bound without a fraction
_MAX_EXACT_FLOAT = 1e21


def prepare_sign_bytes(tree: Any, _depth: int = 0) -> TxTree:
    """
    Sort, prune and unwrap a transaction tree for signing.

    Args:
        tree: Deserialized amino JSON value

    Returns:
        New tree with keys sorted, null fields removed and envelopes unwrapped

    Raises:
        MalformedTxTree: On values that are not JSON, non-string keys, or
            nesting deeper than MAX_TREE_DEPTH
    """
    if _depth > MAX_TREE_DEPTH:
        raise MalformedTxTree(f"Transaction tree nested deeper than {MAX_TREE_DEPTH} levels")

    if tree is None or isinstance(tree, (str, bool, int)):
        return tree

    if isinstance(tree, float):
        if math.isnan(tree) or math.isinf(tree):
            raise MalformedTxTree(f"Non-finite number in transaction tree: {tree}")
        if tree.is_integer() and abs(tree) < _MAX_EXACT_FLOAT:
            return int(tree)
        return tree

    if isinstance(tree, (list, tuple)):
        return [prepare_sign_bytes(item, _depth + 1) for item in tree]

    if isinstance(tree, Mapping):
        for key in tree:
            if not isinstance(key, str):
                raise MalformedTxTree(f"Non-string key in transaction tree: {key!r}")

        # Amino envelope, matched on the raw keys before null fields go
        if tree.keys() == _ENVELOPE_KEYS:
            return prepare_sign_bytes(tree["value"], _depth + 1)

        result = {}
        for key in sorted(tree):
            if tree[key] is None:
                continue
            value = prepare_sign_bytes(tree[key], _depth + 1)
            if value is not None:
                result[key] = value
        return result

    raise MalformedTxTree(f"Unsupported value in transaction tree: {type(tree).__name__}")


def build_sign_doc(tx: Mapping, meta: SignMeta) -> dict:
    """
    Build the canonical StdSignDoc for a transaction.

    Args:
        tx: Unsigned transaction body with ``fee``, ``msg`` and ``memo``
        meta: Sequence, account number and chain id

    Returns:
        Canonicalized sign doc

    Raises:
        MalformedTxTree: If ``fee`` or ``msg`` has an unexpected shape
        ValidationError: If ``meta`` carries no chain id
    """
    if meta.chain_id is None:
        raise ValidationError("Sign metadata is missing a chain id")

    if not isinstance(tx, Mapping):
        raise MalformedTxTree(f"Transaction must be a mapping, got {type(tx).__name__}")

    fee = tx.get("fee")
    if not isinstance(fee, Mapping):
        raise MalformedTxTree("Transaction is missing a fee object")

    msgs = tx.get("msg")
    if not isinstance(msgs, (list, tuple)):
        raise MalformedTxTree("Transaction is missing a msg list")

    sign_doc = prepare_sign_bytes({
        # The chain expects amount as an array even when empty
        "fee": {
            "amount": fee.get("amount") or [],
            "gas": fee.get("gas"),
        },
        "memo": tx.get("memo"),
        "msgs": msgs,
        "sequence": meta.sequence,
        "account_number": meta.account_number,
        "chain_id": meta.chain_id,
    })

    return sign_doc


def canonical_json(tree: TxTree) -> str:
    """Serialize without whitespace, preserving mapping order."""
    try:
        return json.dumps(tree, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise MalformedTxTree(f"Cannot serialize transaction tree: {e}") from e


def create_sign_message(tx: Mapping, meta: SignMeta) -> str:
    """Build the canonical sign message string for a transaction."""
    message = canonical_json(build_sign_doc(tx, meta))
    logger.debug(f"Built sign message of {len(message)} chars for chain {meta.chain_id}")
    return message


def create_sign_bytes(tx: Mapping, meta: SignMeta) -> bytes:
    """Build the UTF-8 sign bytes that get hashed and signed."""
    return create_sign_message(tx, meta).encode("utf-8")
