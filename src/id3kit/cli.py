"""Command-line driver: load a training table, grow a tree and print it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO, get_args

from id3kit.engine import ID3
from id3kit.exceptions import Id3Error
from id3kit.loader import load_training_table
from id3kit.logging import LogLevel, enable_logging
from id3kit.settings import Id3Settings

EXIT_OK: int = 0
EXIT_ERROR: int = 1


def build_parser(settings: Id3Settings) -> argparse.ArgumentParser:
    """Create the argument parser, using `settings` for defaults.

    Args:
        settings (Id3Settings): Environment-derived defaults.

    Returns:
        argparse.ArgumentParser: The configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="id3kit",
        description="Grow an ID3 decision tree from a whitespace-delimited table of categorical examples.",
    )
    parser.add_argument("data_file", type=Path, help="training table: a header line, then one example per line")
    parser.add_argument("-t", "--target", default=settings.target, help="attribute to predict (default: %(default)s)")
    parser.add_argument(
        "-f",
        "--format",
        choices=("text", "dot"),
        default="text",
        help="output format (default: %(default)s)",
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="write output here instead of stdout")
    parser.add_argument(
        "--log-level",
        choices=get_args(LogLevel.__value__),
        default=settings.log_level,
        help="minimum level of log records on stderr (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line.

    Args:
        argv (Sequence[str] | None): Arguments without the program name;
            `None` reads `sys.argv`.

    Returns:
        int: Process exit code.
    """
    settings = Id3Settings()
    args = build_parser(settings).parse_args(argv)

    with enable_logging(level=args.log_level):
        try:
            table = load_training_table(args.data_file)
            id3 = ID3()
            id3.set_data(table.rows, args.target, table.headers)
            id3.run()
        except (Id3Error, OSError) as exc:
            print(f"id3kit: error: {exc}", file=sys.stderr)
            return EXIT_ERROR

        if args.output is None:
            _write_tree(id3, sys.stdout, args.format, settings)
        else:
            with args.output.open("w", encoding="utf-8") as sink:
                _write_tree(id3, sink, args.format, settings)
    return EXIT_OK


def _write_tree(id3: ID3, sink: TextIO, output_format: str, settings: Id3Settings) -> None:
    if output_format == "dot":
        id3.print_dot(sink, graph_name=settings.graph_name)
    else:
        id3.print_text(sink, marker=settings.text_marker, gain_precision=settings.gain_precision)


if __name__ == "__main__":
    sys.exit(main())
