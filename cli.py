#!/usr/bin/env python3
"""
Compact bit array command line interface.

Converts between the text form of a bit array and its compact binary
encoding, printed as hex.

Note: This CLI uses sys.argv instead of argparse so it runs with nothing
beyond the package itself.

Usage:
    python cli.py <bits>
    python cli.py -d <hex>

Examples:
    python cli.py xx___          # encode
    python cli.py -d 05c0        # decode
"""

import sys

from compactbitarray import (
    DecodeError,
    __version__,
    compact_marshal,
    compact_unmarshal,
    marshal_json,
    unmarshal_json,
)


def print_version() -> None:
    """Print version information."""
    print(f"compactbitarray {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"Compact Bit Array (v{__version__})")
    print("=" * 26)
    print()
    print("Usage:")
    print(f"  {prog_name} <bits>")
    print(f"  {prog_name} -d <hex>")
    print()
    print("Options:")
    print("  -d             Decode a compact payload (default is encode)")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Arguments:")
    print("  bits           Bit string of 'x' (set) and '_' (clear)")
    print("  hex            Compact encoding as hex digits, or 'null'")
    print()
    print("Examples:")
    print(f"  {prog_name} xx___          # encode")
    print(f"  {prog_name} -d 05c0        # decode")
    print()


def print_summary(ba) -> None:
    """Print both encodings of a bit array."""
    print(f"JSON:        {marshal_json(ba).decode('ascii')}")
    print(f"Compact:     {compact_marshal(ba).hex()}")
    if ba is None:
        print("Bits:        0 (absent)")
    else:
        print(f"Bits:        {ba.count()} ({ba.num_true_bits_before(ba.count())} set)")


def do_encode(bits: str) -> int:
    """Encode a bit string.

    Args:
        bits: String of 'x' and '_' characters.

    Returns:
        0 on success, 1 on error.
    """
    try:
        ba = unmarshal_json(f'"{bits}"')
    except DecodeError as e:
        print(f"Error: Invalid bit string: {e}", file=sys.stderr)
        return 1

    print_summary(ba)
    return 0


def do_decode(text: str) -> int:
    """Decode a compact payload given as hex.

    Args:
        text: Hex digits, or the literal 'null'.

    Returns:
        0 on success, 1 on error.
    """
    if text == "null":
        data = b"null"
    else:
        try:
            data = bytes.fromhex(text)
        except ValueError:
            print(f"Error: Not a hex string: {text}", file=sys.stderr)
            return 1

    try:
        ba = compact_unmarshal(data)
    except DecodeError as e:
        print(f"Error: Decoding failed: {e}", file=sys.stderr)
        return 1

    print_summary(ba)
    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    if len(args) < 2:
        print_help(prog_name)
        return 1

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    if args[1] == "-d":
        if len(args) != 3:
            print("Error: Decode requires 1 argument after -d", file=sys.stderr)
            print(f"Usage: {prog_name} -d <hex>", file=sys.stderr)
            return 1
        return do_decode(args[2])

    if len(args) != 2:
        print("Error: Encode requires 1 argument", file=sys.stderr)
        print(f"Usage: {prog_name} <bits>", file=sys.stderr)
        return 1

    return do_encode(args[1])


if __name__ == "__main__":
    sys.exit(main())
