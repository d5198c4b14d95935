"""Transaction-related type definitions for cosmokit."""

import base64
from dataclasses import dataclass
from typing import Optional, Union

from ..constants import PUBKEY_TYPE
from ..types.common import PublicKeyBytes, SignatureBytes

__all__ = ["SignMeta", "StdSignature"]


@dataclass(frozen=True)
class SignMeta:
    """
    Account metadata that the chain expects inside the sign doc.

    Values are emitted verbatim, so pass strings when the chain encodes
    uint64 fields as JSON strings (amino JSON does). A missing chain id
    is filled from ChainConfig.chain_id by the transaction module.
    """
    sequence: Union[str, int]
    account_number: Union[str, int]
    chain_id: Optional[str] = None


@dataclass(frozen=True)
class StdSignature:
    """Signature plus the public key that produced it."""
    signature: SignatureBytes
    public_key: PublicKeyBytes
    key_type: str = PUBKEY_TYPE

    def to_dict(self) -> dict:
        """Build the JSON signature envelope with base64 values."""
        return {
            "signature": base64.b64encode(self.signature).decode("ascii"),
            "pub_key": {
                "type": self.key_type,
                "value": base64.b64encode(self.public_key).decode("ascii"),
            },
        }
