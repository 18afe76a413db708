"""gridkit.cli
===============

Command-line front-end over the library. Every subcommand reads one puzzle
input file, runs a single operation and prints the result. Failures are
reported as ``error: <operation> failed for <input>: <reason>`` on stderr and
appended to the failure log instead of surfacing a traceback.
"""

from __future__ import annotations

import argparse
import json
import sys
from fractions import Fraction
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .constants import DEFAULT_FILLER, DEFAULT_PATTERN, FAIL_LOG
from .encoders import DEFAULT_ENCODER, MinimalGridEncoder
from .errors import GridKitError
from .grid_utils import max_column, max_row, min_column, min_row, pad, rotate, sum_column, sum_row
from .logging_utils import log_failure
from .text_utils import parse_numeric_grid, split, split_lines

NUMERIC_KINDS: Dict[str, Callable[[str], Any]] = {
    "int": int,
    "float": float,
    "fraction": Fraction,
}

AGGREGATES: Dict[str, Dict[str, Callable[..., Any]]] = {
    "sum": {"row": sum_row, "column": sum_column},
    "min": {"row": min_row, "column": min_column},
    "max": {"row": max_row, "column": max_column},
}


def _numeric_grid(text: str, pattern: str, kind: str) -> List[List[Any]]:
    tokens = [[token for token in line if token] for line in split_lines(text, pattern)]
    return parse_numeric_grid([line for line in tokens if line], NUMERIC_KINDS[kind])


def run_split(args: argparse.Namespace, text: str) -> str:
    if args.lines:
        return json.dumps(split_lines(text, args.pattern))
    return json.dumps(split(text, args.pattern))


def run_parse(args: argparse.Namespace, text: str) -> str:
    return DEFAULT_ENCODER.to_text(_numeric_grid(text, args.pattern, args.kind))


def run_aggregate(args: argparse.Namespace, text: str) -> str:
    grid = _numeric_grid(text, args.pattern, args.kind)
    result = AGGREGATES[args.op][args.axis](grid, args.index)
    return "absent" if result is None else str(result)


def run_rotate(args: argparse.Namespace, text: str) -> str:
    return DEFAULT_ENCODER.to_text(rotate(split_lines(text.strip("\n"), args.pattern)))


def run_pad(args: argparse.Namespace, text: str) -> str:
    padded = pad(text, args.filler)
    if padded is None:
        return "absent"
    return MinimalGridEncoder().to_text(padded)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("gridkit", description="Grid puzzle text utilities")
    parser.add_argument("--fail-log", default=FAIL_LOG, help="JSON-lines file receiving failure records")
    commands = parser.add_subparsers(dest="command", required=True)

    split_cmd = commands.add_parser("split", help="Split input text on a pattern")
    split_cmd.add_argument("infile", help="Input text file")
    split_cmd.add_argument("--pattern", default=DEFAULT_PATTERN, help="Delimiter regular expression")
    split_cmd.add_argument("--lines", action="store_true", help="Split each line separately")
    split_cmd.set_defaults(handler=run_split)

    parse_cmd = commands.add_parser("parse", help="Parse each line into numbers")
    parse_cmd.add_argument("infile", help="Input text file")
    parse_cmd.add_argument("--pattern", default=DEFAULT_PATTERN, help="Delimiter regular expression")
    parse_cmd.add_argument("--kind", choices=sorted(NUMERIC_KINDS), default="int", help="Numeric type")
    parse_cmd.set_defaults(handler=run_parse)

    agg_cmd = commands.add_parser("aggregate", help="Sum, min or max of one row or column")
    agg_cmd.add_argument("infile", help="Input text file")
    agg_cmd.add_argument("--pattern", default=DEFAULT_PATTERN, help="Delimiter regular expression")
    agg_cmd.add_argument("--kind", choices=sorted(NUMERIC_KINDS), default="int", help="Numeric type")
    agg_cmd.add_argument("--op", choices=sorted(AGGREGATES), default="sum")
    agg_cmd.add_argument("--axis", choices=["row", "column"], default="row")
    agg_cmd.add_argument("--index", type=int, required=True, help="Row or column index")
    agg_cmd.set_defaults(handler=run_aggregate)

    rotate_cmd = commands.add_parser("rotate", help="Transpose the token grid")
    rotate_cmd.add_argument("infile", help="Input text file")
    rotate_cmd.add_argument("--pattern", default=DEFAULT_PATTERN, help="Delimiter regular expression")
    rotate_cmd.set_defaults(handler=run_rotate)

    pad_cmd = commands.add_parser("pad", help="Surround the character grid with a border")
    pad_cmd.add_argument("infile", help="Input text file")
    pad_cmd.add_argument("--filler", default=DEFAULT_FILLER, help="Border character")
    pad_cmd.set_defaults(handler=run_pad)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI arguments, run the requested operation and return an exit code."""

    args = build_parser().parse_args(argv)
    try:
        text = Path(args.infile).read_text(encoding="utf-8")
        output = args.handler(args, text)
    except (GridKitError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {args.command} failed for {args.infile}: {exc}", file=sys.stderr)
        log_failure(args.command, args.infile, exc, path=args.fail_log)
        return 1
    print(output)
    return 0


__all__ = ["main", "build_parser"]
