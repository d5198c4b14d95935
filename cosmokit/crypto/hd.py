"""Hierarchical Deterministic key derivation for cosmokit."""

import hmac
import hashlib
import logging
from typing import List, Optional

from ..constants import DEFAULT_HD_PATH, HARDENED_OFFSET, SECP256K1_ORDER
from ..crypto.keys import PrivateKey
from ..exceptions import InvalidDerivation
from ..types.common import PrivateKeyBytes, PublicKeyBytes
from ..types.wallet import KeyPair
from ..utils.encoding import hash160

__all__ = ["HDNode", "parse_path", "derive_keypair"]

logger = logging.getLogger(__name__)

N = SECP256K1_ORDER


def parse_path(path: str) -> List[int]:
    """
    Parse a BIP32 path like m/44'/118'/0'/0/0 into child indices.

    Raises:
        InvalidDerivation: If a segment is not a valid index
    """
    if not path or path in ('m', 'M'):
        return []

    if path.startswith('m/') or path.startswith('M/'):
        path = path[2:]

    indices = []
    for component in path.split('/'):
        hardened = component.endswith("'") or component.endswith("h")
        digits = component[:-1] if hardened else component

        if not (digits.isascii() and digits.isdigit()):
            raise InvalidDerivation(f"Invalid path component: {component!r}")

        index = int(digits)
        if index >= HARDENED_OFFSET:
            raise InvalidDerivation(f"Path index out of range: {component!r}")

        indices.append(index + HARDENED_OFFSET if hardened else index)

    return indices


class HDNode:
    """HD wallet node (BIP32), private derivation only."""

    def __init__(
        self,
        private_key: bytes,
        chain_code: bytes,
        depth: int = 0,
        parent_fingerprint: bytes = b'\x00\x00\x00\x00',
        index: int = 0,
    ):
        self.private_key = PrivateKeyBytes(private_key)
        self.chain_code = chain_code
        self.depth = depth
        self.parent_fingerprint = parent_fingerprint
        self.index = index
        self._public_key: Optional[PublicKeyBytes] = None

    @classmethod
    def from_seed(cls, seed: bytes) -> "HDNode":
        """
        Create master node from seed.

        Raises:
            InvalidDerivation: If the seed length is outside 16..64 bytes
                or the master key is not a valid scalar
        """
        if len(seed) < 16 or len(seed) > 64:
            raise InvalidDerivation(f"Seed must be between 16 and 64 bytes, got {len(seed)}")

        h = hmac.new(b"Bitcoin seed", seed, hashlib.sha512).digest()

        key_int = int.from_bytes(h[:32], 'big')
        if key_int == 0 or key_int >= N:
            raise InvalidDerivation("Invalid master key")

        return cls(private_key=h[:32], chain_code=h[32:])

    @property
    def public_key(self) -> PublicKeyBytes:
        """Compressed public key of this node."""
        if self._public_key is None:
            self._public_key = PrivateKey(self.private_key).public_key().point
        return self._public_key

    @property
    def fingerprint(self) -> bytes:
        """First four bytes of HASH160 of the public key."""
        return hash160(self.public_key)[:4]

    def derive(self, index: int) -> "HDNode":
        """
        Derive child node.

        A child whose tweak is not below the curve order, or whose key
        sums to zero, is reported instead of skipped; callers pick the
        next index themselves.

        Raises:
            InvalidDerivation: If the derived key is invalid
        """
        if not 0 <= index <= 0xFFFFFFFF:
            raise InvalidDerivation(f"Child index out of range: {index}", index=index)

        if index >= HARDENED_OFFSET:
            data = b'\x00' + self.private_key + index.to_bytes(4, 'big')
        else:
            data = self.public_key + index.to_bytes(4, 'big')

        h = hmac.new(self.chain_code, data, hashlib.sha512).digest()

        child_key_int = int.from_bytes(h[:32], 'big')
        if child_key_int >= N:
            raise InvalidDerivation(f"Derived tweak exceeds curve order at index {index}", index=index)

        parent_key_int = int.from_bytes(self.private_key, 'big')
        child_private_int = (parent_key_int + child_key_int) % N
        if child_private_int == 0:
            raise InvalidDerivation(f"Derived zero key at index {index}", index=index)

        return HDNode(
            private_key=child_private_int.to_bytes(32, 'big'),
            chain_code=h[32:],
            depth=self.depth + 1,
            parent_fingerprint=self.fingerprint,
            index=index,
        )

    def derive_path(self, path: str) -> "HDNode":
        """Derive using BIP32 path like m/44'/118'/0'/0/0."""
        node = self
        for index in parse_path(path):
            node = node.derive(index)

        logger.debug(f"Derived node at depth {node.depth} for path {path}")
        return node

    def keypair(self) -> KeyPair:
        """Extract the private scalar and compressed public key."""
        return KeyPair(private_key=self.private_key, public_key=self.public_key)

    def __repr__(self) -> str:
        return f"HDNode(depth={self.depth}, index={self.index})"


def derive_keypair(master: HDNode, hd_path: str = DEFAULT_HD_PATH) -> KeyPair:
    """Derive the key pair at ``hd_path`` below a master node."""
    return master.derive_path(hd_path).keypair()
