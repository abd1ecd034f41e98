"""
Poseidon hasher construction.

``build_poseidon`` returns a callable bound to one field profile:

- ``bn254``: circomlib parameters, what circom circuits expect
- ``stark``: Starknet Poseidon from ``poseidon_py``
"""
import logging
from typing import Callable, Dict, Sequence

from poseidon_py.poseidon_hash import poseidon_hash_many, poseidon_hash_single

from poseidon_input import circom
from poseidon_input.field import MODULUS as BN254_MODULUS, BN254Field

logger = logging.getLogger(__name__)

STARK_MODULUS = 2**251 + 17 * 2**192 + 1


def _stark_poseidon(inputs: Sequence[int]) -> int:
    if not inputs:
        raise ValueError("Poseidon needs at least one input")
    elements = [x % STARK_MODULUS for x in inputs]
    if len(elements) == 1:
        return poseidon_hash_single(elements[0])
    return poseidon_hash_many(elements)


_PROFILES: Dict[str, Callable[[Sequence[int]], int]] = {
    "bn254": circom.poseidon,
    "stark": _stark_poseidon,
}

_MODULI = {
    "bn254": BN254_MODULUS,
    "stark": STARK_MODULUS,
}

FIELDS = tuple(_PROFILES)
DEFAULT_FIELD = "bn254"


class PoseidonHasher:
    """Poseidon bound to one field profile."""

    def __init__(self, field: str = DEFAULT_FIELD):
        if field not in _PROFILES:
            raise ValueError(
                f"Unknown field profile {field!r}; expected one of {', '.join(FIELDS)}"
            )
        self.field = field
        self.modulus = _MODULI[field]
        self._hash = _PROFILES[field]

    def __call__(self, inputs: Sequence[int]) -> int:
        return self._hash(list(inputs))

    def to_string(self, value: int) -> str:
        """Decimal rendering of a field element."""
        return str(value % self.modulus)

    def __repr__(self) -> str:
        return f"PoseidonHasher(field={self.field!r})"


def build_poseidon(field: str = DEFAULT_FIELD) -> PoseidonHasher:
    """Build a hasher and warm its parameters so the first call is cheap."""
    hasher = PoseidonHasher(field)
    if field == "bn254":
        # t=2 is the width used for a single password
        circom.permute([BN254Field(0)] * 2)
    logger.debug("Built %r", hasher)
    return hasher
