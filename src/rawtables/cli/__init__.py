"""
rawtables CLI - Command-line interface for labeled table files.

Commands:
    rawtables convert   - Rewrite a generic or PLINK-style table in canonical form
    rawtables summary   - Report shape, labels and invalid values of a table
    rawtables export    - Write the four raw-data tables under one prefix
"""

import argparse
import logging
import sys
from typing import Optional, List


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI dispatcher for rawtables."""
    parser = argparse.ArgumentParser(
        prog="rawtables",
        description="Read and write labeled numeric tables (R/PLINK text format)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  convert   Rewrite a generic or PLINK-style table in canonical form
  summary   Report shape, labels and invalid values of a table
  export    Write the four raw-data tables under one prefix

Examples:
  rawtables convert covar.txt results/run1.cov --plink
  rawtables summary results/run1.geno
  rawtables export --geno geno.txt --pheno pheno.txt --prefix results/run1
  rawtables convert pheno.txt pheno.clean --config tables.yaml --strict-labels
        """
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version="%(prog)s 0.1.0"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true",
                           help="Log progress and per-line diagnostics (DEBUG)")
    verbosity.add_argument("--quiet", "-q", action="store_true",
                           help="Only log errors")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Import and register subcommands
    from rawtables.cli import convert, export, summary
    convert.register_parser(subparsers)
    summary.register_parser(subparsers)
    export.register_parser(subparsers)

    argv = sys.argv[1:] if args is None else list(args)
    parsed_args = parser.parse_args(argv)

    if parsed_args.command is None:
        parser.print_help()
        return 0

    level = logging.INFO
    if parsed_args.verbose:
        level = logging.DEBUG
    elif parsed_args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')

    parsed_args.argv = argv

    # Dispatch to subcommand
    return parsed_args.func(parsed_args)


if __name__ == "__main__":
    sys.exit(main())
