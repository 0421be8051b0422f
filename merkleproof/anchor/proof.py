"""Inclusion proofs and their verification.

A Proof lists (sibling_digest, HashDirection) pairs from the leaf's
sibling up to the root's children. Verification replays the same
concatenations from the candidate leaf and needs no tree.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..core.constants import DEFAULT_HASH_ALGORITHM, TENANT_ID
from ..core.receipt import emit_receipt
from .direction import HashDirection
from .hash import digest_hex, get_algorithm, hash_concat, hash_data

ProofStep = tuple[bytes, HashDirection]


@dataclass(frozen=True)
class Proof:
    """Ordered path of sibling digests, leaf-adjacent first."""
    steps: tuple[ProofStep, ...] = ()
    algorithm: str = DEFAULT_HASH_ALGORITHM

    def __post_init__(self):
        steps = tuple((bytes(sibling), direction) for sibling, direction in self.steps)
        for _, direction in steps:
            if not isinstance(direction, HashDirection):
                raise TypeError(f"Proof direction must be HashDirection, got {direction!r}")
        object.__setattr__(self, "steps", steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[ProofStep]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> ProofStep:
        return self.steps[index]

    def to_dict(self) -> dict:
        """Render as {"algorithm", "proof_path": [{"hash", "position"}]}."""
        return {
            "algorithm": self.algorithm,
            "proof_path": [
                {"hash": sibling.hex(), "position": direction.value}
                for sibling, direction in self.steps
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Proof":
        """Parse the to_dict() rendering.

        Raises:
            ValueError: On a malformed path entry or unknown algorithm
        """
        if not isinstance(data, dict):
            raise ValueError("Proof must be a JSON object")
        algorithm = data.get("algorithm", DEFAULT_HASH_ALGORITHM)
        if not isinstance(algorithm, str):
            raise ValueError(f"algorithm must be a string, got {type(algorithm).__name__}")
        get_algorithm(algorithm)

        path = data.get("proof_path")
        if not isinstance(path, list):
            raise ValueError("proof_path must be a list")

        steps = []
        for i, element in enumerate(path):
            try:
                sibling = bytes.fromhex(element["hash"])
                direction = HashDirection(element["position"])
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Malformed proof_path[{i}]: {e}") from e
            steps.append((sibling, direction))

        return cls(tuple(steps), algorithm)


def as_proof(proof: "Proof | Iterable[ProofStep]", algorithm: str | None = None) -> Proof:
    """Accept a Proof or a plain sequence of (digest, direction) pairs."""
    if isinstance(proof, Proof):
        return proof
    return Proof(tuple(proof), algorithm or DEFAULT_HASH_ALGORITHM)


def compute_root(leaf_data: bytes | str, proof: "Proof | Iterable[ProofStep]",
                 algorithm: str | None = None) -> bytes:
    """Replay proof from leaf_data and return the reconstructed root."""
    proof = as_proof(proof, algorithm)
    algorithm = algorithm or proof.algorithm

    current = hash_data(leaf_data, algorithm)
    for sibling, direction in proof:
        if direction is HashDirection.LEFT:
            current = hash_concat(sibling, current, algorithm)
        else:
            current = hash_concat(current, sibling, algorithm)

    return current


def verify_proof(leaf_data: bytes | str, proof: "Proof | Iterable[ProofStep]",
                 expected_root: bytes, algorithm: str | None = None) -> bool:
    """Verify Merkle proof for leaf inclusion.

    Recomputes the root from hash_data(leaf_data) and the proof path and
    compares it to expected_root. A mismatch returns False; it is not an
    error.

    Args:
        leaf_data: Raw leaf bytes claimed to be in the tree
        proof: Proof from MerkleTree.prove, or a list of (digest, direction)
        expected_root: Published root digest
        algorithm: Overrides the algorithm recorded on the proof

    Returns:
        True if proof is valid, False otherwise
    """
    proof = as_proof(proof, algorithm)
    computed = compute_root(leaf_data, proof, algorithm)
    verified = computed == expected_root

    emit_receipt("merkle_proof_verification", {
        "tenant_id": TENANT_ID,
        "algorithm": algorithm or proof.algorithm,
        "proof_length": len(proof),
        "computed_root": computed.hex(),
        "expected_root": digest_hex(expected_root),
        "verified": verified
    })

    return verified
