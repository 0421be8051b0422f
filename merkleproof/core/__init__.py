"""Core subpackage for merkleproof primitives.

Exports receipts, errors, and constants.
"""
from .constants import DEFAULT_HASH_ALGORITHM, REQUIRED_FIELDS, TENANT_ID
from .errors import EmptyInput, LeafNotFound, MerkleError
from .receipt import dual_hash, emit_receipt

__all__ = [
    # Receipts
    "dual_hash",
    "emit_receipt",
    # Errors
    "MerkleError",
    "EmptyInput",
    "LeafNotFound",
    # Constants
    "DEFAULT_HASH_ALGORITHM",
    "REQUIRED_FIELDS",
    "TENANT_ID",
]
