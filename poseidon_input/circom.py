"""
circomlib-compatible Poseidon over the BN254 scalar field.

Parameters follow circomlib: x^5 S-box, 8 full rounds and a per-width number
of partial rounds, constants from the Grain LFSR. The state is seeded as
``[0, *inputs]`` and the digest is ``state[0]`` after the permutation.
"""
from typing import List, Sequence

from poseidon_input.field import MODULUS, BN254Field, to_field
from poseidon_input.grain import generate_parameters

FULL_ROUNDS = 8
PARTIAL_ROUNDS = [56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65, 70, 60, 64, 68]
MAX_INPUTS = len(PARTIAL_ROUNDS)


def partial_rounds_for(width: int) -> int:
    if not 2 <= width <= MAX_INPUTS + 1:
        raise ValueError(
            f"Poseidon width must be between 2 and {MAX_INPUTS + 1}, got {width}"
        )
    return PARTIAL_ROUNDS[width - 2]


def permute(state: Sequence[BN254Field]) -> List[BN254Field]:
    """Apply the Poseidon permutation to a full state vector."""
    width = len(state)
    partial_rounds = partial_rounds_for(width)
    constants, matrix = generate_parameters(MODULUS, width, FULL_ROUNDS, partial_rounds)
    half = FULL_ROUNDS // 2

    state = list(state)
    for r in range(FULL_ROUNDS + partial_rounds):
        state = [s + constants[r * width + i] for i, s in enumerate(state)]
        if r < half or r >= half + partial_rounds:
            state = [s ** 5 for s in state]
        else:
            state[0] = state[0] ** 5
        state = [
            sum((s * m for s, m in zip(state, row)), BN254Field(0))
            for row in matrix
        ]
    return state


def poseidon(inputs: Sequence[int]) -> int:
    """Hash 1 to 16 integers; the result is a canonical field element."""
    if not inputs:
        raise ValueError("Poseidon needs at least one input")
    if len(inputs) > MAX_INPUTS:
        raise ValueError(f"Poseidon accepts at most {MAX_INPUTS} inputs, got {len(inputs)}")

    state = [BN254Field(0)] + [to_field(x) for x in inputs]
    return int(permute(state)[0])
