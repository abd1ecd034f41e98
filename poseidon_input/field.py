"""
BN254 scalar field used by circom circuits.
"""
from py_ecc import bn128
from py_ecc.fields.field_elements import FQ

MODULUS = bn128.curve_order
FIELD_BITS = MODULUS.bit_length()


class BN254Field(FQ):
    field_modulus = MODULUS


def to_field(value: int) -> BN254Field:
    """Reduce an integer into the field (negative values wrap around)."""
    return BN254Field(value % MODULUS)
