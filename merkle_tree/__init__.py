"""Merkle trees with domain-separated hashing and inclusion proofs."""
__version__ = "0.1.0"
from merkle_tree.crypto.hashing import LegacyHasher, TreeHasher, from_hex, hash_internal, hash_leaf, to_hex
from merkle_tree.crypto.keys import KeyPair
from merkle_tree.errors import (ConstructionError, EmptyInputError, LeafIndexError, MerkleTreeError,
                                ProofFormatError)
from merkle_tree.proof import MerkleProof, ProofStep, Side, prove, prove_index, verify
from merkle_tree.signed_root import SignedRoot
from merkle_tree.store import SynchronizedTree, TreeSnapshot
from merkle_tree.tree import MerkleTree, compute_levels, compute_root
__all__ = ["ConstructionError", "EmptyInputError", "KeyPair", "LeafIndexError", "LegacyHasher",
           "MerkleProof", "MerkleTree", "MerkleTreeError", "ProofFormatError", "ProofStep", "Side",
           "SignedRoot", "SynchronizedTree", "TreeHasher", "TreeSnapshot", "compute_levels",
           "compute_root", "from_hex", "hash_internal", "hash_leaf", "prove", "prove_index",
           "to_hex", "verify"]
