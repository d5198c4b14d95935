"""Key and wallet type definitions for cosmokit."""

from dataclasses import dataclass

from ..types.common import Address, PrivateKeyBytes, PublicKeyBytes

__all__ = ["KeyPair", "Wallet"]


@dataclass(frozen=True)
class KeyPair:
    """Private scalar and compressed public point."""
    private_key: PrivateKeyBytes
    public_key: PublicKeyBytes

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key.hex()})"


@dataclass(frozen=True)
class Wallet:
    """Derived key pair bundled with its account address."""
    private_key: PrivateKeyBytes
    public_key: PublicKeyBytes
    address: Address

    @property
    def keypair(self) -> KeyPair:
        """Get the key pair without the address."""
        return KeyPair(private_key=self.private_key, public_key=self.public_key)

    def to_dict(self) -> dict[str, str]:
        """Export as hex strings, matching the JavaScript wallet shape."""
        return {
            "privateKey": self.private_key.hex(),
            "publicKey": self.public_key.hex(),
            "cosmosAddress": self.address,
        }

    def __repr__(self) -> str:
        # Never print the private key
        hex_str = self.private_key.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"Wallet(address={self.address}, private_key={masked})"
