"""Merkle trees and inclusion proofs over raw byte leaves."""
from .direction import HashDirection
from .hash import (
    algorithms,
    digest_size,
    get_algorithm,
    hash_concat,
    hash_data,
    register_algorithm,
)
from .proof import Proof, compute_root, verify_proof
from .tree import MerkleTree, construct, verify_leaves

__all__ = [
    "hash_data",
    "hash_concat",
    "register_algorithm",
    "get_algorithm",
    "algorithms",
    "digest_size",
    "HashDirection",
    "Proof",
    "compute_root",
    "verify_proof",
    "MerkleTree",
    "construct",
    "verify_leaves",
]
