"""
rawtables summary command - Describe a table file.

Usage:
    rawtables summary results/run1.geno
    rawtables summary covar.txt --plink --default-value -9
"""

import argparse
import logging
from pathlib import Path

from rawtables.cli._options import add_table_arguments, resolve_config
from rawtables.cli.config import ConfigError

logger = logging.getLogger(__name__)

# Labels shown per axis before eliding
MAX_SHOWN_LABELS = 5


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the summary subcommand."""
    parser = subparsers.add_parser(
        "summary",
        help="Report shape, labels and invalid values of a table",
    )
    parser.add_argument("input", type=Path, help="Table to read (.gz allowed)")
    add_table_arguments(parser)
    parser.set_defaults(func=run_summary)


def _preview(labels: list) -> str:
    shown = ", ".join(labels[:MAX_SHOWN_LABELS])
    if len(labels) > MAX_SHOWN_LABELS:
        shown += f", ... (+{len(labels) - MAX_SHOWN_LABELS})"
    return shown or "-"


def run_summary(args: argparse.Namespace) -> int:
    """Execute the summary command."""
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

    print(f"Table:          {args.input}")
    print(f"Layout:         {'plink' if config.plink else 'generic'}")
    print(f"Shape:          {table.matrix.rows} rows x {table.matrix.cols} columns")
    print(f"Corner label:   {table.corner_label or '-'}")
    print(f"Row labels:     {_preview(table.row_labels.labels())}")
    print(f"Column labels:  {_preview(table.col_labels.labels())}")
    print(f"Invalid values: {n_invalid}")
    for error in table.dimension_errors():
        print(f"Inconsistent:   {error}")
    return 0
