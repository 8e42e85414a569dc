"""Domain-separated leaf and node hashing for Merkle trees."""
from __future__ import annotations
import hashlib
import string
from dataclasses import dataclass
from typing import Callable

HashFunction = Callable[[bytes], bytes]

DIGEST_SIZE = 32
LEAF_PREFIX = b"\x00"
NODE_PREFIX = b"\x01"

_HEX_DIGITS = frozenset(string.hexdigits)


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def to_hex(digest: bytes) -> str:
    return digest.hex()


def from_hex(text: str, size: int = DIGEST_SIZE) -> bytes:
    """Parse a hex-encoded digest of exactly ``size`` bytes."""
    if len(text) != size * 2:
        raise ValueError(f"expected {size * 2} hex characters, got {len(text)}")
    if not _HEX_DIGITS.issuperset(text):
        raise ValueError(f"invalid hex digest: {text!r}")
    return bytes.fromhex(text)


@dataclass(frozen=True)
class TreeHasher:
    """Leaf hash ``H(0x00 || x)`` and node hash ``H(0x01 || left || right)``."""
    hash_fn: HashFunction = sha256

    @property
    def digest_size(self) -> int:
        return len(self.hash_fn(b""))

    def hash_leaf(self, data: bytes) -> bytes:
        return self.hash_fn(LEAF_PREFIX + bytes(data))

    def hash_internal(self, left: bytes, right: bytes) -> bytes:
        return self.hash_fn(NODE_PREFIX + left + right)


@dataclass(frozen=True)
class LegacyHasher(TreeHasher):
    """Hex-concatenation scheme without domain separation.

    Leaves are ``H(x)``; a parent hashes the ASCII hex of its children joined
    left then right. Only for reproducing roots built by older trees.
    """

    def hash_leaf(self, data: bytes) -> bytes:
        return self.hash_fn(bytes(data))

    def hash_internal(self, left: bytes, right: bytes) -> bytes:
        return self.hash_fn((left.hex() + right.hex()).encode("ascii"))


DEFAULT_HASHER = TreeHasher()


def hash_leaf(data: bytes) -> bytes:
    return DEFAULT_HASHER.hash_leaf(data)


def hash_internal(left: bytes, right: bytes) -> bytes:
    return DEFAULT_HASHER.hash_internal(left, right)
