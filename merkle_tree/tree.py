"""Merkle tree builder over an ordered, append-only sequence of elements."""
from __future__ import annotations
import logging
from typing import Iterable, Sequence
from merkle_tree.crypto.hashing import DEFAULT_HASHER, TreeHasher, to_hex
from merkle_tree.errors import EmptyInputError, LeafIndexError

logger = logging.getLogger("merkle_tree.tree")


def compute_levels(digests: Sequence[bytes], hasher: TreeHasher | None = None) -> list[list[bytes]]:
    """Reduce ``digests`` pairwise until one remains; return every level.

    A trailing node on an odd-length level is promoted to the next level
    unchanged, never paired with itself.
    """
    if not digests:
        raise EmptyInputError()
    hasher = hasher or DEFAULT_HASHER
    levels: list[list[bytes]] = [list(digests)]
    while len(levels[-1]) > 1:
        below = levels[-1]
        above = [hasher.hash_internal(left, right) for left, right in zip(below[0::2], below[1::2])]
        if len(below) % 2:
            above.append(below[-1])
        levels.append(above)
    return levels


def compute_root(digests: Sequence[bytes], hasher: TreeHasher | None = None) -> bytes:
    return compute_levels(digests, hasher)[-1][0]


def check_index(index: int, leaf_count: int) -> None:
    """Raise unless ``index`` is a plain int in ``[0, leaf_count)``."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"leaf index must be an int, got {type(index).__name__}")
    if not 0 <= index < leaf_count:
        raise LeafIndexError(index, leaf_count)


class MerkleTree:
    """Ordered leaf digests plus the cached root derived from them.

    The constructor takes leaf digests and derives every level itself;
    :meth:`build` hashes raw elements first. The only mutation is
    :meth:`append`, after which the root is already recomputed. Not safe for
    concurrent use, see :class:`merkle_tree.store.SynchronizedTree`.
    """

    def __init__(self, leaves: Sequence[bytes], hasher: TreeHasher | None = None) -> None:
        self.hasher = hasher or DEFAULT_HASHER
        self._levels = compute_levels([bytes(leaf) for leaf in leaves], self.hasher)
        self._index: dict[bytes, int] = {}
        for i, leaf in enumerate(self._levels[0]):
            self._index.setdefault(leaf, i)

    @classmethod
    def build(cls, elements: Iterable[bytes], hasher: TreeHasher | None = None) -> MerkleTree:
        hasher = hasher or DEFAULT_HASHER
        tree = cls([hasher.hash_leaf(e) for e in elements], hasher)
        logger.debug(f"Built tree with {tree.leaf_count} leaves, root {tree.root_hex}")
        return tree

    @property
    def root(self) -> bytes:
        return self._levels[-1][0]

    @property
    def root_hex(self) -> str:
        return to_hex(self.root)

    @property
    def leaf_count(self) -> int:
        return len(self._levels[0])

    def __len__(self) -> int:
        return self.leaf_count

    @property
    def leaves(self) -> tuple[bytes, ...]:
        return tuple(self._levels[0])

    @property
    def levels(self) -> tuple[tuple[bytes, ...], ...]:
        return tuple(tuple(level) for level in self._levels)

    @property
    def depth(self) -> int:
        return len(self._levels) - 1

    def leaf_at(self, index: int) -> bytes:
        check_index(index, self.leaf_count)
        return self._levels[0][index]

    def index_of(self, element: bytes) -> int | None:
        """Lowest index whose leaf matches ``element``, or None."""
        return self._index.get(self.hasher.hash_leaf(element))

    def append(self, element: bytes) -> bytes:
        leaf_hash = self.hasher.hash_leaf(element)
        levels = compute_levels(self._levels[0] + [leaf_hash], self.hasher)
        self._levels = levels
        self._index.setdefault(leaf_hash, self.leaf_count - 1)
        logger.debug(f"Appended leaf {self.leaf_count - 1}, root now {self.root_hex}")
        return leaf_hash

    def __repr__(self) -> str:
        return f"MerkleTree(leaf_count={self.leaf_count}, root={self.root_hex})"
