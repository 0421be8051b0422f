"""
merkleproof - Merkle hash trees and inclusion proofs

Commit to an ordered batch of records with one root digest, then prove
any single record belongs to the batch without revealing the rest.

    tree = construct([b"a", b"b", b"c"])
    proof = tree.prove(b"b")
    verify_proof(b"b", proof, tree.root())  # True
"""

__version__ = "1.0.0"

from merkleproof.anchor import (
    HashDirection,
    MerkleTree,
    Proof,
    construct,
    hash_concat,
    hash_data,
    verify_leaves,
    verify_proof,
)
from merkleproof.core import EmptyInput, LeafNotFound, MerkleError, emit_receipt

__all__ = [
    "hash_data",
    "hash_concat",
    "HashDirection",
    "MerkleTree",
    "Proof",
    "construct",
    "verify_leaves",
    "verify_proof",
    "MerkleError",
    "EmptyInput",
    "LeafNotFound",
    "emit_receipt",
    "__version__",
]
