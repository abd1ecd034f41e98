"""
Unit tests for hasher construction and field profiles.
"""
import pytest
from poseidon_py.poseidon_hash import poseidon_hash_many, poseidon_hash_single

from poseidon_input.circom import poseidon
from poseidon_input.hasher import FIELDS, STARK_MODULUS, PoseidonHasher, build_poseidon


class TestBuild:

    def test_default_profile_is_bn254(self):
        assert build_poseidon().field == "bn254"

    def test_known_profiles(self):
        assert FIELDS == ("bn254", "stark")

    def test_unknown_profile_rejected(self):
        with pytest.raises(ValueError, match="Unknown field profile"):
            build_poseidon("goldilocks")

    def test_repr(self, hasher: PoseidonHasher):
        assert repr(hasher) == "PoseidonHasher(field='bn254')"


class TestBn254Profile:

    def test_matches_permutation(self, hasher: PoseidonHasher):
        assert hasher([123456]) == poseidon([123456])

    def test_same_input_same_string(self, hasher: PoseidonHasher):
        """Hashing the same input twice yields the same output string."""
        first = hasher.to_string(hasher([123456]))
        second = hasher.to_string(hasher([123456]))
        assert first == second
        assert first.isdigit()

    def test_accepts_any_sequence(self, hasher: PoseidonHasher):
        assert hasher((1, 2)) == hasher([1, 2])


class TestStarkProfile:

    def test_single_input(self, stark_hasher: PoseidonHasher):
        assert stark_hasher([123456]) == poseidon_hash_single(123456)

    def test_many_inputs(self, stark_hasher: PoseidonHasher):
        assert stark_hasher([1, 2, 3]) == poseidon_hash_many([1, 2, 3])

    def test_inputs_reduced(self, stark_hasher: PoseidonHasher):
        assert stark_hasher([STARK_MODULUS + 5]) == stark_hasher([5])

    def test_empty_rejected(self, stark_hasher: PoseidonHasher):
        with pytest.raises(ValueError):
            stark_hasher([])

    def test_profiles_differ(self, hasher: PoseidonHasher, stark_hasher: PoseidonHasher):
        assert hasher([123456]) != stark_hasher([123456])
