"""
Poseidon hash input generator.

Builds a Poseidon hasher, hashes a single integer "password" and writes the
witness input file consumed by the password circuit.
"""
from poseidon_input.hasher import build_poseidon
from poseidon_input.record import (
    HashRecord,
    build_record,
    parse_password,
    read_record,
    verify_record,
    write_record,
)

__version__ = "0.1.0"

__all__ = [
    "HashRecord",
    "build_poseidon",
    "build_record",
    "parse_password",
    "read_record",
    "verify_record",
    "write_record",
]
