"""
Runtime defaults with optional env overrides.
Command-line options take precedence over both.
"""
import os
from typing import Dict, Optional

_DEFAULTS = {
    "password": "123456",
    "output": "input.json",
    "field": "bn254",
}

_ENV_VARS = {
    "password": "POSEIDON_INPUT_PASSWORD",
    "output": "POSEIDON_INPUT_OUTPUT",
    "field": "POSEIDON_INPUT_FIELD",
}


def _env_overrides(environ: Dict[str, str]) -> Dict[str, str]:
    overrides = {}
    for key, var in _ENV_VARS.items():
        value = environ.get(var)
        if value:
            overrides[key] = value
    return overrides


def get_config(environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Return merged config: defaults <- env."""
    merged = dict(_DEFAULTS)
    merged.update(_env_overrides(os.environ if environ is None else environ))
    return merged
