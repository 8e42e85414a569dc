"""Ed25519 signing keys for publishing Merkle roots."""
from __future__ import annotations
import base64
from dataclasses import dataclass
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import (
    Encoding, NoEncryption, PrivateFormat, PublicFormat, load_pem_private_key,
)


def verify_with_public_key(public_key_b64: str, signature_b64: str, data: bytes) -> bool:
    """Check a signature using only the signer's raw base64 public key.

    Returns False for bad keys, undecodable signatures or a mismatch.
    """
    try:
        public_key = Ed25519PublicKey.from_public_bytes(base64.b64decode(public_key_b64))
        public_key.verify(base64.b64decode(signature_b64), data)
    except (InvalidSignature, ValueError, TypeError):
        return False
    return True


@dataclass(frozen=True)
class KeyPair:
    """A root publisher's private key; the public half is derived on demand."""
    private_key: Ed25519PrivateKey

    @property
    def public_key(self) -> Ed25519PublicKey:
        return self.private_key.public_key()

    @classmethod
    def generate(cls) -> KeyPair:
        return cls(private_key=Ed25519PrivateKey.generate())

    @classmethod
    def from_private_pem(cls, pem_data: bytes) -> KeyPair:
        key = load_pem_private_key(pem_data, password=None)
        if not isinstance(key, Ed25519PrivateKey):
            raise TypeError(f"expected an Ed25519 private key, got {type(key).__name__}")
        return cls(private_key=key)

    def to_private_pem(self) -> bytes:
        return self.private_key.private_bytes(Encoding.PEM, PrivateFormat.PKCS8, NoEncryption())

    def sign(self, data: bytes) -> str:
        return base64.b64encode(self.private_key.sign(data)).decode("ascii")

    def public_key_b64(self) -> str:
        raw = self.public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)
        return base64.b64encode(raw).decode("ascii")
