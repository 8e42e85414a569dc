"""Exception hierarchy for tree construction, indexing and proof parsing."""
from __future__ import annotations


class MerkleTreeError(Exception):
    """Base class for all merkle_tree errors."""


class ConstructionError(MerkleTreeError):
    """A tree could not be built from the supplied elements."""


class EmptyInputError(ConstructionError):
    def __init__(self, message: str = "cannot build a Merkle tree from zero elements") -> None:
        super().__init__(message)


class LeafIndexError(MerkleTreeError, IndexError):
    def __init__(self, index: int, leaf_count: int) -> None:
        self.index = index
        self.leaf_count = leaf_count
        super().__init__(f"leaf index {index} out of range for {leaf_count} leaves")


class ProofFormatError(MerkleTreeError, ValueError):
    """A serialized proof is missing fields or carries undecodable values."""
