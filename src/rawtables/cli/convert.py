"""
rawtables convert command - Rewrite a table in canonical form.

Reads a generic or PLINK-style table (plain or gzipped) and writes it back
with a quoted header and truncated integer values, the format produced by
the raw-data export.

Usage:
    rawtables convert covar.txt results/run1.cov --plink
"""

import argparse
import logging
from pathlib import Path

from rawtables.cli._options import add_table_arguments, resolve_config
from rawtables.cli.config import ConfigError

logger = logging.getLogger(__name__)


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the convert subcommand."""
    parser = subparsers.add_parser(
        "convert",
        help="Rewrite a generic or PLINK-style table in canonical form",
        description=(
            "Read a labeled table, tolerating malformed lines and non-numeric "
            "values, and write it as a tab-delimited table with quoted column "
            "labels and truncated integer values."
        )
    )
    parser.add_argument("input", type=Path, help="Table to read (.gz allowed)")
    parser.add_argument("output", type=Path, help="Destination table")
    parser.add_argument("--upper-left", default=None,
                        help="Header corner cell (default: name read from input)")
    add_table_arguments(parser)
    parser.set_defaults(func=run_convert)


def run_convert(args: argparse.Namespace) -> int:
    """Execute the convert command."""
    from rawtables.core.table import LabeledTable

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ConfigError) as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if not args.input.exists():
        logger.error(f"Input table not found: {args.input}")
        return 1

    table, n_invalid = LabeledTable.read(
        args.input,
        default_value=config.default_value,
        plink=config.plink,
        strict=config.strict_labels,
        separators=config.separators,
    )
    if args.upper_left is not None:
        table.upper_left_name = args.upper_left

    written = table.write(args.output)
    if written is None:
        logger.error(f"Nothing written for {args.input}")
        return 1

    print(
        f"Wrote {table.matrix.rows} x {table.matrix.cols} table to {written} "
        f"({n_invalid} values replaced by {config.default_value:g})"
    )
    return 0
