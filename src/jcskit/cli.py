"""jcskit CLI: canonicalize, hash and verify JSON documents."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Any


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def main():
    """Main CLI entry point for jcskit commands."""
    try:
        jcskit_version = get_version("jcskit")
    except PackageNotFoundError:
        jcskit_version = "dev"

    parser = argparse.ArgumentParser(
        prog="jcskit",
        description="jcskit: Byte-exact JSON canonicalization (RFC 8785)"
    )
    parser.add_argument("--version", action="version", version=f"jcskit {jcskit_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr."
    )
    parent_parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=None,
        help="Maximum array/object nesting depth (defaults to JCSKIT_MAX_DEPTH or 500)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    canonicalize_parser = subparsers.add_parser(
        "canonicalize",
        help="Write the canonical form of a JSON document",
        parents=[parent_parser]
    )
    canonicalize_parser.add_argument(
        "path",
        help="Path to JSON document ('-' for stdin)"
    )
    canonicalize_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output file (defaults to stdout)"
    )

    hash_parser = subparsers.add_parser(
        "hash",
        help="Print the SHA256 of the canonical form of a JSON document",
        parents=[parent_parser]
    )
    hash_parser.add_argument(
        "path",
        help="Path to JSON document ('-' for stdin)"
    )

    verify_parser = subparsers.add_parser(
        "verify",
        help="Check that a JSON document is already in canonical form",
        parents=[parent_parser]
    )
    verify_parser.add_argument(
        "path",
        help="Path to JSON document ('-' for stdin)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s")

    # Lazy import: keep --help and --version free of kernel imports
    from .api import canonicalize
    from .hashing import hash_canonical
    from ._internal.loads import load_json_text
    from .kernel.errors import CanonicalizationError

    def _fail(e: CanonicalizationError) -> None:
        print(f"Error: {e.code.value}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        raw = _read_input(args.path)
    except OSError as e:
        print(f"Error: Cannot read {args.path}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)

    try:
        data: Any = load_json_text(raw)
    except CanonicalizationError as e:
        _fail(e)

    if args.command == "canonicalize":
        try:
            canonical = canonicalize(data, max_depth=args.max_depth)
        except CanonicalizationError as e:
            _fail(e)

        if args.out is not None:
            args.out.parent.mkdir(parents=True, exist_ok=True)
            args.out.write_bytes(canonical)
            if not args.quiet:
                print("[OK] Canonicalization complete")
                print(f"  Output: {args.out}")
        else:
            sys.stdout.buffer.write(canonical)
            sys.stdout.flush()
        sys.exit(0)

    elif args.command == "hash":
        try:
            digest = hash_canonical(data, max_depth=args.max_depth)
        except CanonicalizationError as e:
            _fail(e)
        print(digest)
        sys.exit(0)

    elif args.command == "verify":
        try:
            canonical = canonicalize(data, max_depth=args.max_depth)
        except CanonicalizationError as e:
            _fail(e)

        ok = canonical == raw
        if not args.quiet:
            status = "OK" if ok else "FAILED"
            print(f"[{status}] Verification complete")
            print(f"  Status: {'CANONICAL' if ok else 'NOT CANONICAL'}")
            print(f"  Input bytes: {len(raw)}")
            print(f"  Canonical bytes: {len(canonical)}")
        sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
