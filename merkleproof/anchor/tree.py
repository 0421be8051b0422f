"""Merkle tree construction and inclusion-proof generation.

Layout: every level's digests live in one flat tuple, leaves first and
root last. Levels with an odd count above one are padded by duplicating
their last digest before pairing, and are stored padded, so each
non-root level has even width and the sibling of slot i is slot i ^ 1.

    [3 leaves]  nodes = (L0, L1, L2, L2', H01, H22, ROOT)
                levels = ((0, 4), (4, 2), (6, 1))
"""
from typing import Iterable, Sequence

from ..core.constants import DEFAULT_HASH_ALGORITHM, TENANT_ID
from ..core.errors import EmptyInput, LeafNotFound
from ..core.receipt import emit_receipt
from .direction import HashDirection
from .hash import digest_hex, get_algorithm, hash_concat, hash_data
from .proof import Proof


def _build_levels(leaves: list[bytes], algorithm: str) -> tuple[list[bytes], list[tuple[int, int]]]:
    """Pair-and-hash leaf digests up to a single root.

    Returns the flat node list and (offset, width) of each level.
    """
    nodes: list[bytes] = []
    levels: list[tuple[int, int]] = []
    current = leaves[:]

    while len(current) > 1:
        # Duplicate last if odd
        if len(current) % 2 == 1:
            current.append(current[-1])

        levels.append((len(nodes), len(current)))
        nodes.extend(current)

        current = [hash_concat(current[i], current[i + 1], algorithm)
                   for i in range(0, len(current), 2)]

    levels.append((len(nodes), 1))
    nodes.append(current[0])

    return nodes, levels


class MerkleTree:
    """Immutable binary hash tree over an ordered collection of leaves."""

    __slots__ = ("_nodes", "_levels", "_leaf_count", "_algorithm")

    def __init__(self, nodes: Sequence[bytes], levels: Sequence[tuple[int, int]],
                 leaf_count: int, algorithm: str = DEFAULT_HASH_ALGORITHM):
        self._nodes = tuple(nodes)
        self._levels = tuple(levels)
        self._leaf_count = leaf_count
        self._algorithm = algorithm

    @classmethod
    def construct(cls, leaves: Iterable[bytes | str],
                  algorithm: str = DEFAULT_HASH_ALGORITHM) -> "MerkleTree":
        """Build a tree from leaf data, hashing each leaf in order.

        Args:
            leaves: Non-empty ordered collection of byte sequences
            algorithm: Registered hash algorithm name

        Returns:
            Constructed MerkleTree

        Raises:
            EmptyInput: If leaves is empty
            ValueError: If algorithm is not supported
        """
        get_algorithm(algorithm)
        leaf_hashes = [hash_data(leaf, algorithm) for leaf in leaves]
        if not leaf_hashes:
            raise EmptyInput()

        nodes, levels = _build_levels(leaf_hashes, algorithm)
        tree = cls(nodes, levels, len(leaf_hashes), algorithm)

        emit_receipt("merkle_tree_build", {
            "tenant_id": TENANT_ID,
            "algorithm": algorithm,
            "leaves": len(leaf_hashes),
            "levels": len(levels),
            "root": tree.root().hex()
        })

        return tree

    @classmethod
    def verify(cls, leaves: Iterable[bytes | str], expected_root: bytes,
               algorithm: str = DEFAULT_HASH_ALGORITHM) -> bool:
        """Rebuild a tree from leaves and compare its root to expected_root."""
        return cls.construct(leaves, algorithm).verify_root(expected_root)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def leaf_count(self) -> int:
        """Number of original leaves, before padding."""
        return self._leaf_count

    @property
    def depth(self) -> int:
        """Number of levels above the leaves; 0 for a single leaf."""
        return len(self._levels) - 1

    @property
    def nodes(self) -> tuple[bytes, ...]:
        """Flat level-ordered digests, leaves first, root last."""
        return self._nodes

    def level(self, depth: int) -> tuple[bytes, ...]:
        """Stored (padded) digests of one level; 0 is the leaf level."""
        offset, width = self._levels[depth]
        return self._nodes[offset:offset + width]

    def leaves(self) -> tuple[bytes, ...]:
        """Leaf digests of the original leaves, without padding."""
        offset, _ = self._levels[0]
        return self._nodes[offset:offset + self._leaf_count]

    def root(self) -> bytes:
        """Root digest computed at construction."""
        return self._nodes[-1]

    def verify_root(self, expected_root: bytes) -> bool:
        """True if expected_root equals this tree's root.

        A mismatch returns False; it is not an error.
        """
        verified = self.root() == expected_root

        emit_receipt("merkle_root_verification", {
            "tenant_id": TENANT_ID,
            "algorithm": self._algorithm,
            "root": self.root().hex(),
            "expected_root": digest_hex(expected_root),
            "verified": verified
        })

        return verified

    def index_of(self, leaf_data: bytes | str) -> int:
        """Position of the first original leaf whose digest matches leaf_data.

        Raises:
            LeafNotFound: If no leaf matches
        """
        leaf_hash = hash_data(leaf_data, self._algorithm)
        try:
            return self.leaves().index(leaf_hash)
        except ValueError:
            raise LeafNotFound(leaf_hash) from None

    def prove(self, leaf_data: bytes | str) -> Proof:
        """Generate an inclusion proof for leaf_data.

        Raises:
            LeafNotFound: If leaf_data is not one of the original leaves
        """
        return self.prove_index(self.index_of(leaf_data))

    def prove_index(self, index: int) -> Proof:
        """Generate an inclusion proof for the leaf-level slot at index.

        index may address the padding copy of an odd trailing leaf.

        Raises:
            LeafNotFound: If index is outside the padded leaf level
        """
        _, width = self._levels[0]
        if not 0 <= index < width:
            raise LeafNotFound(message=f"Leaf index {index} out of range [0, {width})")

        steps = []
        idx = index
        for offset, _ in self._levels[:-1]:  # All levels except root
            sibling_idx = idx ^ 1
            steps.append((self._nodes[offset + sibling_idx],
                          HashDirection.for_sibling_index(sibling_idx)))
            idx //= 2

        proof = Proof(tuple(steps), self._algorithm)

        emit_receipt("merkle_proof", {
            "tenant_id": TENANT_ID,
            "algorithm": self._algorithm,
            "index": index,
            "proof_length": len(proof),
            "root": self.root().hex()
        })

        return proof

    def __len__(self) -> int:
        return self._leaf_count

    def __repr__(self) -> str:
        return (f"MerkleTree(leaves={self._leaf_count}, depth={self.depth}, "
                f"algorithm={self._algorithm!r}, root={self.root().hex()[:16]}...)")


def construct(leaves: Iterable[bytes | str], algorithm: str = DEFAULT_HASH_ALGORITHM) -> MerkleTree:
    """Build a MerkleTree from leaf data. See MerkleTree.construct."""
    return MerkleTree.construct(leaves, algorithm)


def verify_leaves(leaves: Iterable[bytes | str], expected_root: bytes,
                  algorithm: str = DEFAULT_HASH_ALGORITHM) -> bool:
    """Rebuild a tree from leaves and compare roots. See MerkleTree.verify."""
    return MerkleTree.verify(leaves, expected_root, algorithm)
