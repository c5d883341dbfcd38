"""Main CLI entry point for ssbslp."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..exceptions import SLPError
from .config import InspectOptions
from .dump import inspect_stream
from .pack import pack_files


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the ssb-slp CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="ssb-slp",
        description="ssb-slp: Shallow Length-Prefixed encoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ssb-slp --pack key.bin body.bin -o envelope.slp   Pack files as SLP items
  ssb-slp --inspect envelope.slp                    List the items in a stream
  cat envelope.slp | ssb-slp --inspect -            Inspect from stdin
  ssb-slp --version                                 Show version
        """,
    )

    parser.add_argument(
        "--pack",
        metavar="FILE",
        nargs="+",
        help="Encode each file as one item, in the order given",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        default="-",
        help="Where --pack writes the stream (default: stdout)",
    )
    parser.add_argument(
        "--inspect",
        metavar="FILE",
        help="Decode a stream ('-' for stdin) and list its items",
    )
    parser.add_argument(
        "--preview-bytes",
        metavar="N",
        type=int,
        default=16,
        help="Content bytes shown per item by --inspect (0 disables)",
    )
    parser.add_argument(
        "--no-offsets",
        action="store_true",
        help="Omit stream offsets from --inspect output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ssb-slp {__version__}",
    )

    args = parser.parse_args(argv)

    if args.pack and args.inspect:
        print("Error: --pack and --inspect are mutually exclusive", file=sys.stderr)
        return 1

    # Handle --pack
    if args.pack:
        paths = [Path(p) for p in args.pack]
        missing = [p for p in paths if not p.is_file()]
        if missing:
            print(f"Error: File not found: {missing[0]}", file=sys.stderr)
            return 1

        try:
            if args.output == "-":
                pack_files(paths, sys.stdout.buffer)
                sys.stdout.buffer.flush()
            else:
                with open(args.output, "wb") as sink:
                    pack_files(paths, sink)
            return 0
        except (SLPError, OSError) as e:
            print(f"Error packing files: {e}", file=sys.stderr)
            return 1

    # Handle --inspect
    if args.inspect:
        try:
            options = InspectOptions(
                preview_bytes=args.preview_bytes,
                show_offsets=not args.no_offsets,
            )
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        try:
            if args.inspect == "-":
                inspect_stream(sys.stdin.buffer, options)
            else:
                file_path = Path(args.inspect)
                if not file_path.exists():
                    print(f"Error: File not found: {file_path}", file=sys.stderr)
                    return 1
                with open(file_path, "rb") as source:
                    inspect_stream(source, options)
            return 0
        except (SLPError, OSError) as e:
            print(f"Error inspecting stream: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
