"""
Password/hash record and its JSON file.

The file is the circuit's witness input:

    {
      "password": "123456",
      "hash": "<decimal field element>"
    }

Both values are decimal strings so that 254-bit integers survive JSON
readers that parse numbers as doubles.
"""
import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from poseidon_input.hasher import PoseidonHasher

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"^[+-]?[0-9]+$")
_HEX = re.compile(r"^0[xX][0-9a-fA-F]+$")


@dataclass(frozen=True)
class HashRecord:
    password: str
    hash: str

    def to_dict(self) -> Dict[str, str]:
        return {"password": self.password, "hash": self.hash}

    @classmethod
    def from_dict(cls, data: Any) -> "HashRecord":
        if not isinstance(data, dict):
            raise ValueError("Record must be a JSON object")
        missing = [key for key in ("password", "hash") if key not in data]
        if missing:
            raise ValueError(f"Record is missing keys: {', '.join(missing)}")
        for key in ("password", "hash"):
            if not isinstance(data[key], str):
                raise ValueError(f"Record field {key!r} must be a string")
        return cls(password=data["password"], hash=data["hash"])


def parse_password(text: Union[str, int]) -> int:
    """
    Parse a password into an integer.

    Accepts decimal strings (optionally signed) and 0x-prefixed hex strings,
    surrounding whitespace ignored.

    Raises:
        ValueError: If the text is not an integer literal
    """
    if isinstance(text, bool):
        raise ValueError(f"Password must be an integer, got {text!r}")
    if isinstance(text, int):
        return text

    stripped = str(text).strip()
    if _DECIMAL.match(stripped):
        return int(stripped, 10)
    if _HEX.match(stripped):
        return int(stripped, 16)
    raise ValueError(f"Password must be an integer, got {text!r}")


def build_record(password: Union[str, int], hasher: PoseidonHasher) -> HashRecord:
    """Hash a single password and pair it with its digest."""
    value = parse_password(password)
    digest = hasher([value])
    return HashRecord(password=str(value), hash=hasher.to_string(digest))


def verify_record(record: HashRecord, hasher: PoseidonHasher) -> bool:
    """Return True when ``record.hash`` is the Poseidon hash of ``record.password``."""
    expected = build_record(record.password, hasher)
    if expected.hash != record.hash:
        logger.debug("Hash mismatch: expected %s, found %s", expected.hash, record.hash)
        return False
    return True


def write_record(record: HashRecord, path: Union[str, Path]) -> Path:
    """Write the record as pretty-printed JSON (2-space indent)."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(record.to_dict(), indent=2) + "\n",
        encoding="utf-8",
    )
    logger.debug("Wrote %s", output_path)
    return output_path


def read_record(path: Union[str, Path]) -> HashRecord:
    """
    Load a record written by ``write_record``.

    Raises:
        ValueError: If the file is not valid JSON or has the wrong shape
        OSError: If the file cannot be read
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e
    return HashRecord.from_dict(data)
