"""Shared fixtures for merkle_tree tests."""
import hashlib

import pytest

from merkle_tree.crypto.hashing import TreeHasher


WORDS = [b"hola", b"mundo", b"lambda", b"class"]


def _truncated_hash(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()[:4]


@pytest.fixture
def words() -> list[bytes]:
    return list(WORDS)


@pytest.fixture
def elements_factory():
    def make(n: int) -> list[bytes]:
        return [f"element-{i}".encode() for i in range(n)]
    return make


@pytest.fixture
def stub_hasher() -> TreeHasher:
    """Domain-separated hasher over a short, cheap digest."""
    return TreeHasher(hash_fn=_truncated_hash)
