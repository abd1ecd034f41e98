"""
Poseidon parameter generation with the Grain LFSR.

Round constants and the MDS matrix are drawn from a self-shrinking Grain
stream seeded with the instance parameters, so any width can be rebuilt
deterministically instead of shipping constant tables:

- 80-bit seed: field type | S-box | field size | width | R_F | R_P | thirty 1s
- first 160 register outputs are discarded
- output bits come in pairs; the second bit is kept only when the first is 1
"""
import logging
from functools import lru_cache
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

FIELD_PRIME = 1
SBOX_POWER = 0

_TAPS = (62, 51, 38, 23, 13, 0)


def _seed_bits(field_bits: int, width: int, full_rounds: int, partial_rounds: int) -> List[int]:
    layout = (
        (FIELD_PRIME, 2),
        (SBOX_POWER, 4),
        (field_bits, 12),
        (width, 12),
        (full_rounds, 10),
        (partial_rounds, 10),
    )
    bits: List[int] = []
    for value, size in layout:
        bits.extend(int(b) for b in format(value, "0{}b".format(size)))
    bits.extend([1] * 30)
    return bits


def _clock(register: List[int]) -> int:
    bit = 0
    for tap in _TAPS:
        bit ^= register[tap]
    register.pop(0)
    register.append(bit)
    return bit


def grain_bits(field_bits: int, width: int, full_rounds: int, partial_rounds: int) -> Iterator[int]:
    """Yield the self-shrinking Grain output stream for one Poseidon instance."""
    register = _seed_bits(field_bits, width, full_rounds, partial_rounds)
    for _ in range(160):
        _clock(register)

    while True:
        selector = _clock(register)
        while selector == 0:
            _clock(register)
            selector = _clock(register)
        yield _clock(register)


def _take(stream: Iterator[int], count: int) -> int:
    value = 0
    for _ in range(count):
        value = (value << 1) | next(stream)
    return value


def _round_constants(stream: Iterator[int], prime: int, field_bits: int, count: int) -> List[int]:
    constants = []
    while len(constants) < count:
        candidate = _take(stream, field_bits)
        if candidate < prime:
            constants.append(candidate)
    return constants


def _cauchy_matrix(stream: Iterator[int], prime: int, field_bits: int, width: int) -> List[List[int]]:
    while True:
        draws = [_take(stream, field_bits) % prime for _ in range(2 * width)]
        while len(set(draws)) != len(draws):
            draws = [_take(stream, field_bits) % prime for _ in range(2 * width)]
        xs, ys = draws[:width], draws[width:]

        if any((x + y) % prime == 0 for x in xs for y in ys):
            continue
        return [[pow(x + y, prime - 2, prime) for y in ys] for x in xs]


@lru_cache(maxsize=None)
def generate_parameters(
    prime: int, width: int, full_rounds: int, partial_rounds: int
) -> Tuple[Tuple[int, ...], Tuple[Tuple[int, ...], ...]]:
    """
    Generate (round_constants, mds_matrix) for a Poseidon instance over GF(prime).

    Round constants are flat: constant ``r * width + i`` is added to state
    element ``i`` in round ``r``. The matrix is indexed ``[row][column]``.
    """
    field_bits = prime.bit_length()
    logger.debug(
        "Generating Poseidon parameters: t=%d R_F=%d R_P=%d n=%d",
        width, full_rounds, partial_rounds, field_bits,
    )
    stream = grain_bits(field_bits, width, full_rounds, partial_rounds)
    constants = _round_constants(stream, prime, field_bits, (full_rounds + partial_rounds) * width)
    matrix = _cauchy_matrix(stream, prime, field_bits, width)
    return tuple(constants), tuple(tuple(row) for row in matrix)
