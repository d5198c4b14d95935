"""Transaction canonicalization and assembly for cosmokit."""

from ..tx.sign_doc import (
    prepare_sign_bytes,
    build_sign_doc,
    create_sign_message,
    create_sign_bytes,
    canonical_json,
)
from ..tx.assembly import create_signed_tx, create_broadcast_body

__all__ = [
    # Sign doc
    "prepare_sign_bytes",
    "build_sign_doc",
    "create_sign_message",
    "create_sign_bytes",
    "canonical_json",

    # Assembly
    "create_signed_tx",
    "create_broadcast_body",
]
