"""Signed roots: an Ed25519 signature binding a root digest to its leaf count."""
from __future__ import annotations
import json
from dataclasses import dataclass
from merkle_tree.crypto.hashing import from_hex
from merkle_tree.crypto.keys import KeyPair, verify_with_public_key
from merkle_tree.tree import MerkleTree

SIGNED_ROOT_VERSION = 1


def root_head_bytes(root_hex: str, leaf_count: int) -> bytes:
    """Byte string a signed root commits to; keys sorted, no whitespace."""
    head = {"version": SIGNED_ROOT_VERSION, "root": root_hex, "leaf_count": leaf_count}
    return json.dumps(head, sort_keys=True, separators=(",", ":")).encode("ascii")


@dataclass(frozen=True)
class SignedRoot:
    root_hex: str
    leaf_count: int
    public_key_b64: str
    signature: str

    @classmethod
    def create(cls, tree: MerkleTree, key_pair: KeyPair) -> SignedRoot:
        root_hex, leaf_count = tree.root_hex, tree.leaf_count
        return cls(root_hex=root_hex, leaf_count=leaf_count,
                   public_key_b64=key_pair.public_key_b64(),
                   signature=key_pair.sign(root_head_bytes(root_hex, leaf_count)))

    @property
    def root(self) -> bytes:
        return from_hex(self.root_hex)

    def verify(self, public_key_b64: str | None = None) -> bool:
        """Check the signature, optionally pinning the expected signer key."""
        if public_key_b64 is not None and public_key_b64 != self.public_key_b64:
            return False
        if not isinstance(self.root_hex, str) or isinstance(self.leaf_count, bool) \
                or not isinstance(self.leaf_count, int):
            return False
        return verify_with_public_key(self.public_key_b64, self.signature,
                                      root_head_bytes(self.root_hex, self.leaf_count))

    def matches(self, tree: MerkleTree) -> bool:
        """True when this head describes the tree's current root and size."""
        return self.root_hex == tree.root_hex and self.leaf_count == tree.leaf_count

    def to_dict(self) -> dict:
        return {"root": self.root_hex, "leaf_count": self.leaf_count,
                "public_key_b64": self.public_key_b64, "signature": self.signature}
