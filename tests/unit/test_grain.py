"""
Unit tests for Grain LFSR parameter generation.
"""
from itertools import islice

from poseidon_input.field import MODULUS
from poseidon_input.grain import _seed_bits, generate_parameters, grain_bits


class TestSeed:

    def test_seed_is_80_bits(self):
        bits = _seed_bits(254, 2, 8, 56)
        assert len(bits) == 80
        assert set(bits) <= {0, 1}

    def test_seed_layout(self):
        bits = _seed_bits(254, 2, 8, 56)
        # field type 1 (prime), S-box 0 (x^alpha)
        assert bits[:2] == [0, 1]
        assert bits[2:6] == [0, 0, 0, 0]
        assert int("".join(map(str, bits[6:18])), 2) == 254
        assert int("".join(map(str, bits[18:30])), 2) == 2
        assert int("".join(map(str, bits[30:40])), 2) == 8
        assert int("".join(map(str, bits[40:50])), 2) == 56
        assert bits[50:] == [1] * 30


class TestStream:

    def test_stream_deterministic(self):
        first = list(islice(grain_bits(254, 3, 8, 57), 512))
        second = list(islice(grain_bits(254, 3, 8, 57), 512))
        assert first == second

    def test_stream_depends_on_width(self):
        a = list(islice(grain_bits(254, 2, 8, 56), 256))
        b = list(islice(grain_bits(254, 3, 8, 57), 256))
        assert a != b


class TestParameters:

    def test_shapes(self):
        constants, matrix = generate_parameters(MODULUS, 2, 8, 56)
        assert len(constants) == (8 + 56) * 2
        assert len(matrix) == 2
        assert all(len(row) == 2 for row in matrix)

    def test_values_in_field(self):
        constants, matrix = generate_parameters(MODULUS, 2, 8, 56)
        assert all(0 <= c < MODULUS for c in constants)
        assert all(0 < m < MODULUS for row in matrix for m in row)

    def test_cached(self):
        assert generate_parameters(MODULUS, 2, 8, 56) is generate_parameters(MODULUS, 2, 8, 56)
