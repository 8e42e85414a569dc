"""Inclusion proofs: derive a sibling path from a tree, verify it against a root."""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator
from merkle_tree.crypto.hashing import DEFAULT_HASHER, TreeHasher, from_hex, to_hex
from merkle_tree.errors import ProofFormatError
from merkle_tree.tree import MerkleTree, check_index

logger = logging.getLogger("merkle_tree.proof")

_BYTES_TYPES = (bytes, bytearray, memoryview)


class Side(str, Enum):
    """Which operand the sibling is when recombining upward."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ProofStep:
    sibling: bytes
    side: Side

    def to_dict(self) -> dict:
        return {"hash": to_hex(self.sibling), "side": self.side.value}


@dataclass(frozen=True)
class MerkleProof:
    leaf_index: int
    steps: tuple[ProofStep, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[ProofStep]:
        return iter(self.steps)

    def to_dict(self) -> dict:
        return {"leaf_index": self.leaf_index, "steps": [s.to_dict() for s in self.steps]}

    @classmethod
    def from_dict(cls, data: dict) -> MerkleProof:
        try:
            leaf_index = data["leaf_index"]
            raw_steps = data["steps"]
            steps = tuple(ProofStep(sibling=from_hex(s["hash"]), side=Side(s["side"]))
                          for s in raw_steps)
        except (KeyError, TypeError, ValueError) as e:
            raise ProofFormatError(f"malformed proof: {e}") from e
        if not isinstance(leaf_index, int) or isinstance(leaf_index, bool) or leaf_index < 0:
            raise ProofFormatError(f"leaf_index must be a non-negative integer, got {leaf_index!r}")
        return cls(leaf_index=leaf_index, steps=steps)


def prove_index(tree: MerkleTree, index: int) -> MerkleProof:
    """Sibling path for the leaf at ``index``, mirroring the builder's pairing."""
    check_index(index, tree.leaf_count)
    steps = []
    position = index
    for level in tree.levels[:-1]:
        # the promoted tail of an odd level has no sibling
        sibling = position ^ 1
        if sibling < len(level):
            steps.append(ProofStep(level[sibling], Side.LEFT if position & 1 else Side.RIGHT))
        position >>= 1
    return MerkleProof(leaf_index=index, steps=tuple(steps))


def prove(tree: MerkleTree, element: bytes) -> MerkleProof | None:
    """Proof for the first leaf equal to ``element``; None if it is not a member."""
    index = tree.index_of(element)
    if index is None:
        logger.debug(f"No leaf matches element among {tree.leaf_count} leaves")
        return None
    return prove_index(tree, index)


def verify(proof: MerkleProof | None, root: bytes, element: bytes,
           hasher: TreeHasher | None = None) -> bool:
    """Recompute the root from ``element`` and ``proof``; compare with ``root``.

    Never raises: anything malformed simply fails verification.
    """
    if proof is None or not isinstance(proof, MerkleProof):
        return False
    if not isinstance(root, _BYTES_TYPES) or not isinstance(element, _BYTES_TYPES):
        return False
    if not isinstance(proof.steps, (tuple, list)):
        return False
    hasher = hasher or DEFAULT_HASHER
    current = hasher.hash_leaf(element)
    for step in proof.steps:
        if not isinstance(step, ProofStep) or not isinstance(step.sibling, _BYTES_TYPES):
            return False
        sibling = bytes(step.sibling)
        if step.side == Side.LEFT:
            current = hasher.hash_internal(sibling, current)
        elif step.side == Side.RIGHT:
            current = hasher.hash_internal(current, sibling)
        else:
            return False
    if current != bytes(root):
        logger.debug(f"Proof for leaf {proof.leaf_index} does not reach root {to_hex(bytes(root))}")
        return False
    return True
