"""Tests for merkleproof.anchor.proof."""
import pytest

from merkleproof.anchor import HashDirection, Proof, compute_root, construct, hash_data, verify_proof


def _flip_byte(value: bytes, index: int = 0) -> bytes:
    return value[:index] + bytes([value[index] ^ 0x01]) + value[index + 1:]


class TestVerifyProof:
    """Tests for verify_proof function."""

    def test_two_leaf_scenario(self):
        """Proof for [1,2,3] verifies; [7,8,9] with the same proof does not."""
        tree = construct([bytes([1, 2, 3]), bytes([4, 5, 6])])
        proof = tree.prove(bytes([1, 2, 3]))
        assert verify_proof(bytes([1, 2, 3]), proof, tree.root()) is True
        assert verify_proof(bytes([7, 8, 9]), proof, tree.root()) is False

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 8, 13])
    def test_round_trip_all_leaves(self, n):
        """Every original leaf verifies against the root."""
        leaves = [f"leaf-{i}".encode() for i in range(n)]
        tree = construct(leaves)
        for leaf in leaves:
            assert verify_proof(leaf, tree.prove(leaf), tree.root()) is True

    @pytest.mark.parametrize("algorithm", ["sha256", "blake3", "dual"])
    def test_round_trip_algorithms(self, records, algorithm):
        """Proofs verify under each registered algorithm."""
        tree = construct(records, algorithm)
        for leaf in records:
            assert verify_proof(leaf, tree.prove(leaf), tree.root()) is True

    def test_single_leaf_empty_proof(self):
        """Empty proof verifies a single-leaf tree."""
        tree = construct([b"d"])
        assert tree.root() == hash_data(b"d")
        assert verify_proof(b"d", [], tree.root()) is True
        assert verify_proof(b"d", tree.prove(b"d"), tree.root()) is True

    def test_odd_both_copies_verify(self, three_leaves):
        """Both copies of the padded leaf [3] verify against the same root."""
        tree = construct(three_leaves)
        original = tree.prove(bytes([3]))
        padding = tree.prove_index(3)

        assert original[0] == (hash_data(bytes([3])), HashDirection.RIGHT)
        assert padding[0] == (hash_data(bytes([3])), HashDirection.LEFT)
        assert verify_proof(bytes([3]), original, tree.root()) is True
        assert verify_proof(bytes([3]), padding, tree.root()) is True

    def test_wrong_leaf_for_proof(self, three_leaves):
        """Proof for one leaf does not verify a different leaf."""
        tree = construct(three_leaves)
        proof = tree.prove(three_leaves[1])
        assert verify_proof(three_leaves[2], proof, tree.root()) is False

    def test_tampered_leaf_byte(self, records):
        """Flipping any byte of the leaf returns False."""
        tree = construct(records)
        leaf = records[4]
        proof = tree.prove(leaf)
        for i in range(len(leaf)):
            assert verify_proof(_flip_byte(leaf, i), proof, tree.root()) is False

    def test_tampered_sibling(self, records):
        """Corrupting any sibling digest returns False."""
        tree = construct(records)
        leaf = records[9]
        proof = tree.prove(leaf)
        for i in range(len(proof)):
            steps = list(proof)
            sibling, direction = steps[i]
            steps[i] = (_flip_byte(sibling), direction)
            assert verify_proof(leaf, Proof(tuple(steps)), tree.root()) is False

    def test_flipped_direction(self, records):
        """Swapping a step's side returns False."""
        tree = construct(records)
        leaf = records[2]
        steps = list(tree.prove(leaf))
        sibling, direction = steps[0]
        other = HashDirection.LEFT if direction is HashDirection.RIGHT else HashDirection.RIGHT
        steps[0] = (sibling, other)
        assert verify_proof(leaf, steps, tree.root()) is False

    def test_tampered_root(self, records):
        """Corrupting the expected root returns False."""
        tree = construct(records)
        proof = tree.prove(records[0])
        assert verify_proof(records[0], proof, _flip_byte(tree.root(), 31)) is False

    def test_reversed_proof_fails(self, eight_leaves):
        """Proofs are leaf-first; replaying root-first does not verify."""
        tree = construct(eight_leaves)
        leaf = eight_leaves[5]
        proof = tree.prove(leaf)
        reversed_proof = Proof(tuple(reversed(proof.steps)))
        assert verify_proof(leaf, proof, tree.root()) is True
        assert verify_proof(leaf, reversed_proof, tree.root()) is False

    def test_truncated_proof_fails(self, eight_leaves):
        """Dropping the last step does not reach the root."""
        tree = construct(eight_leaves)
        proof = tree.prove(eight_leaves[0])
        assert verify_proof(eight_leaves[0], proof.steps[:-1], tree.root()) is False

    def test_algorithm_mismatch_fails(self, records):
        """Replaying with a different primitive does not verify."""
        tree = construct(records, "blake3")
        proof = tree.prove(records[3])
        assert verify_proof(records[3], proof, tree.root(), algorithm="sha256") is False

    def test_needs_no_tree(self, records):
        """Verification uses only leaf, proof and root."""
        tree = construct(records)
        proof = tree.prove(records[11])
        root = tree.root()
        del tree
        assert verify_proof(records[11], proof, root) is True

    def test_compute_root(self, records):
        """compute_root reproduces the tree root."""
        tree = construct(records)
        assert compute_root(records[6], tree.prove(records[6])) == tree.root()


class TestProofValue:
    """Tests for the Proof value type."""

    def test_immutable(self, four_leaves):
        """Proof fields cannot be reassigned."""
        proof = construct(four_leaves).prove(four_leaves[0])
        with pytest.raises(AttributeError):
            proof.steps = ()

    def test_rejects_bad_direction(self):
        """Directions must be HashDirection members."""
        with pytest.raises(TypeError):
            Proof(((b"\x00" * 32, "left"),))

    def test_equality(self, four_leaves):
        """Proofs for the same leaf compare equal."""
        tree = construct(four_leaves)
        assert tree.prove(four_leaves[1]) == tree.prove(four_leaves[1])

    def test_to_dict(self):
        """to_dict renders hex hashes and left/right positions."""
        tree = construct([bytes([1, 2, 3]), bytes([4, 5, 6])])
        rendered = tree.prove(bytes([1, 2, 3])).to_dict()
        assert rendered == {
            "algorithm": "sha256",
            "proof_path": [{"hash": hash_data(bytes([4, 5, 6])).hex(), "position": "right"}],
        }

    def test_from_dict_round_trip(self, records):
        """from_dict(to_dict()) yields an equal, verifying proof."""
        tree = construct(records, "dual")
        proof = tree.prove(records[8])
        parsed = Proof.from_dict(proof.to_dict())
        assert parsed == proof
        assert verify_proof(records[8], parsed, tree.root()) is True

    @pytest.mark.parametrize("data", [
        [],
        {"proof_path": "nope"},
        {"proof_path": [{"hash": "zz", "position": "left"}]},
        {"proof_path": [{"hash": "00", "position": "up"}]},
        {"proof_path": [{"position": "left"}]},
        {"algorithm": "unknown", "proof_path": []},
        {"algorithm": ["sha256"], "proof_path": []},
        {"algorithm": {"x": 1}, "proof_path": []},
    ])
    def test_from_dict_malformed(self, data):
        """Malformed renderings raise ValueError."""
        with pytest.raises(ValueError):
            Proof.from_dict(data)
