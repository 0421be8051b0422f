"""Faults raised by tree construction and proof generation.

A failed verification is not a fault: verify_root and verify_proof
return False for a mismatched commitment.
"""


class MerkleError(Exception):
    """Base class for merkleproof faults."""
    pass


class EmptyInput(MerkleError, ValueError):
    """Raised when a tree is constructed from zero leaves."""

    def __init__(self, message: str = "Cannot construct a Merkle tree from zero leaves"):
        super().__init__(message)


class LeafNotFound(MerkleError, ValueError):
    """Raised when proof generation is asked for a leaf the tree does not hold."""

    def __init__(self, leaf_hash: bytes | None = None, message: str | None = None):
        self.leaf_hash = leaf_hash
        if message is None:
            if leaf_hash is None:
                message = "Leaf not in tree"
            else:
                message = f"Leaf not in tree: {leaf_hash.hex()}"
        super().__init__(message)
