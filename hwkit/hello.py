"""Print a greeting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

GREETING = "Hello World!"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog="hello", description="Print a greeting.")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and report success; extra arguments are ignored."""
    args = list(sys.argv[1:] if argv is None else argv)
    _build_parser().parse_known_args(args)
    sys.stdout.write(f"{GREETING}\n")
    sys.stdout.flush()
    return 0