"""
Shared pytest fixtures for Poseidon input tests.
"""
from pathlib import Path

import pytest

from poseidon_input.hasher import PoseidonHasher, build_poseidon


@pytest.fixture(scope="session")
def hasher() -> PoseidonHasher:
    """circomlib-compatible hasher (built once, parameters are cached)."""
    return build_poseidon("bn254")


@pytest.fixture(scope="session")
def stark_hasher() -> PoseidonHasher:
    """Starknet Poseidon hasher."""
    return build_poseidon("stark")


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """Input file location inside a scratch directory."""
    return tmp_path / "circuit" / "input.json"


@pytest.fixture
def clean_env(monkeypatch):
    """Strip POSEIDON_INPUT_* overrides from the environment."""
    for var in ("POSEIDON_INPUT_PASSWORD", "POSEIDON_INPUT_OUTPUT", "POSEIDON_INPUT_FIELD"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
