"""Command-line front end: parse address literals and dump their groups.

Usage:
    python -m ipv6literal ADDRESS [ADDRESS ...] [--format rust|simple|json] [-v]

Each parsed address is printed as its group dump, e.g.
``::1 -> [0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x1]``. Failures are printed to
stderr as diagnostics. Exit status is 0 when every address parsed, else 1.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from ipv6literal import __version__
from ipv6literal.diagnostics import DiagnosticFormatter, OutputFormat
from ipv6literal.parsing import parse_ipv6
from ipv6literal.syntax import IPv6Groups

__all__ = ["format_groups", "main"]

logger = logging.getLogger("ipv6literal")


def format_groups(groups: IPv6Groups) -> str:
    """Render groups as a hex list: ``[0xfe01, 0x0, ...]``.

    This is a debugging dump, not IPv6 text notation.
    """
    return "[" + ", ".join(f"0x{group:x}" for group in groups) + "]"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipv6literal",
        description="Parse IPv6 address literals (RFC 3986) into eight 16-bit groups",
    )
    parser.add_argument("addresses", nargs="+", metavar="ADDRESS", help="Address literal to parse")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output style (default: rust)",
    )
    parser.add_argument("--color", action="store_true", help="Colorize diagnostics")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser decisions")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        sanitize=True,
        color=args.color,
    )

    failed = 0
    for address in args.addresses:
        groups, errors = parse_ipv6(address)
        if groups is not None:
            print(f"{address} -> {format_groups(groups)}")
            continue
        failed += 1
        for error in errors:
            if error.diagnostic is not None:
                print(formatter.format(error.diagnostic), file=sys.stderr)
            else:
                print(f"{address}: {error}", file=sys.stderr)

    if failed:
        logger.info("%d of %d addresses failed to parse", failed, len(args.addresses))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
