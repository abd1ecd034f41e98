#!/usr/bin/env python3
"""
Poseidon input CLI

Hashes a password with Poseidon and writes the circuit input file, or checks
that an existing input file carries the correct hash.
"""
import argparse
import logging
import sys
from typing import List, Optional

from poseidon_input.config import get_config
from poseidon_input.hasher import FIELDS, build_poseidon
from poseidon_input.record import build_record, read_record, verify_record, write_record

logger = logging.getLogger(__name__)


def cmd_calculate(args) -> int:
    """Hash the password and write the input file."""
    hasher = build_poseidon(args.field)
    record = build_record(args.password, hasher)

    print("Password:", record.password)
    print("Poseidon Hash:", record.hash)

    path = write_record(record, args.output)
    print(f"Updated {path} with correct hash")
    return 0


def cmd_verify(args) -> int:
    """Check an existing input file against a fresh hash of its password."""
    record = read_record(args.output)
    hasher = build_poseidon(args.field)

    if verify_record(record, hasher):
        print(f"OK: {args.output} hash matches password {record.password}")
        return 0

    expected = build_record(record.password, hasher)
    print(f"MISMATCH: {args.output} has {record.hash}, expected {expected.hash}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calculate-hash",
        description="Poseidon Input - hash a password and write the circuit input file",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Integer password, decimal or 0x-prefixed hex (default: 123456)",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Input file to write or verify (default: input.json)",
    )
    parser.add_argument(
        "--field",
        choices=FIELDS,
        default=None,
        help="Poseidon field profile (default: bn254, circomlib compatible)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Verify the existing output file instead of writing it",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    config = get_config()
    for key in ("password", "output", "field"):
        if getattr(args, key) is None:
            setattr(args, key, config[key])
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.verify:
            return cmd_verify(args)
        return cmd_calculate(args)
    except Exception as e:
        logger.error("Failed to %s %s: %s", "verify" if args.verify else "write", args.output, e)
        logger.debug("Traceback", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
