"""Shared argparse options for commands that read tables.

Options default to None so that values from a ``--config`` file can be told
apart from values the user typed; see ``merge_config_with_args``.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from rawtables.cli.config import (
    TableIOConfig,
    explicit_arguments,
    load_config,
    merge_config_with_args,
)


def _separators(value: str) -> str:
    """argparse type for separator sets; ``\\t`` is accepted for a tab."""
    separators = value.replace("\\t", "\t")
    if not separators:
        raise argparse.ArgumentTypeError("separators must not be empty")
    return separators


def add_table_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the reading options shared by all table commands."""
    parser.add_argument("--config", "-c", type=Path, default=None,
                        help="YAML or JSON file with default options")
    parser.add_argument("--plink", action="store_true", default=None,
                        help="Input is PLINK-style (FID IID value...)")
    parser.add_argument("--default-value", type=float, default=None,
                        help="Value stored for non-numeric tokens (default: -9)")
    parser.add_argument("--separators", type=_separators, default=None,
                        help="Token separator characters (default: space and tab)")
    parser.add_argument("--strict-labels", action="store_true", default=None,
                        help="Skip lines with a repeated row label instead of remapping it")


def resolve_config(args: argparse.Namespace) -> TableIOConfig:
    """Effective settings: explicit CLI options > config file > defaults."""
    config = load_config(args.config) if args.config is not None else {}
    explicit = explicit_arguments(getattr(args, "argv", ()))
    return merge_config_with_args(config, args, explicit)
