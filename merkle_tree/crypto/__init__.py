from merkle_tree.crypto.hashing import (DEFAULT_HASHER, DIGEST_SIZE, LegacyHasher, TreeHasher,
                                        from_hex, hash_internal, hash_leaf, sha256, to_hex)
from merkle_tree.crypto.keys import KeyPair, verify_with_public_key
__all__ = ["DEFAULT_HASHER", "DIGEST_SIZE", "KeyPair", "LegacyHasher", "TreeHasher", "from_hex",
           "hash_internal", "hash_leaf", "sha256", "to_hex", "verify_with_public_key"]
