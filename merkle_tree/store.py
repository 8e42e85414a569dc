"""Lock-guarded Merkle tree for callers that share one tree across threads."""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from typing import Iterable
from merkle_tree.crypto.hashing import TreeHasher, to_hex
from merkle_tree.proof import MerkleProof, prove
from merkle_tree.tree import MerkleTree

logger = logging.getLogger("merkle_tree.store")


@dataclass(frozen=True)
class TreeSnapshot:
    root: bytes
    leaf_count: int

    @property
    def root_hex(self) -> str:
        return to_hex(self.root)


class SynchronizedTree:
    """Serializes appends and reads on a single :class:`MerkleTree`."""

    def __init__(self, tree: MerkleTree) -> None:
        self._tree = tree
        self._lock = threading.Lock()

    @classmethod
    def build(cls, elements: Iterable[bytes], hasher: TreeHasher | None = None) -> SynchronizedTree:
        return cls(MerkleTree.build(elements, hasher))

    @property
    def hasher(self) -> TreeHasher:
        return self._tree.hasher

    @property
    def root(self) -> bytes:
        with self._lock:
            return self._tree.root

    @property
    def leaf_count(self) -> int:
        with self._lock:
            return self._tree.leaf_count

    def leaf_at(self, index: int) -> bytes:
        with self._lock:
            return self._tree.leaf_at(index)

    def append(self, element: bytes) -> int:
        with self._lock:
            self._tree.append(element)
            idx = self._tree.leaf_count - 1
        logger.debug(f"Appended element at index {idx}")
        return idx

    def prove(self, element: bytes) -> MerkleProof | None:
        with self._lock:
            return prove(self._tree, element)

    def prove_with_root(self, element: bytes) -> tuple[MerkleProof | None, bytes]:
        """Proof and the root it was derived against, read under one lock."""
        with self._lock:
            return prove(self._tree, element), self._tree.root

    def snapshot(self) -> TreeSnapshot:
        with self._lock:
            return TreeSnapshot(root=self._tree.root, leaf_count=self._tree.leaf_count)
