"""
rawtables export command - Write the four raw-data tables under one prefix.

Reads up to four input tables and writes them as ``{prefix}.geno``,
``{prefix}.cgeno``, ``{prefix}.cov`` and ``{prefix}.pheno`` with the fixed
corner labels of the raw-data format.

Usage:
    rawtables export --geno geno.txt --cov covar.txt --pheno pheno.txt --prefix results/run1
"""

import argparse
import logging
from pathlib import Path

from rawtables.cli._options import add_table_arguments, resolve_config
from rawtables.cli.config import ConfigError

logger = logging.getLogger(__name__)

# option name -> write_raw_data keyword
EXPORT_INPUTS = {
    "geno": "genotype",
    "cgeno": "collapsed_genotype",
    "cov": "covariate",
    "pheno": "phenotype",
}


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the export subcommand."""
    parser = subparsers.add_parser(
        "export",
        help="Write genotype, collapsed genotype, covariate and phenotype tables under one prefix",
        description=(
            "Read up to four labeled tables and write them as the raw-data "
            "files PREFIX.geno, PREFIX.cgeno, PREFIX.cov and PREFIX.pheno."
        )
    )
    parser.add_argument("--geno", type=Path, default=None, help="Genotype table")
    parser.add_argument("--cgeno", type=Path, default=None, help="Collapsed genotype table")
    parser.add_argument("--cov", type=Path, default=None, help="Covariate table")
    parser.add_argument("--pheno", type=Path, default=None, help="Phenotype table")
    parser.add_argument("--prefix", default=None,
                        help="Output path prefix (default: rvtest.raw)")
    add_table_arguments(parser)
    parser.set_defaults(func=run_export)


def run_export(args: argparse.Namespace) -> int:
    """Execute the export command."""
    from rawtables.core.table import LabeledTable
    from rawtables.io.writers import write_raw_data

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ConfigError) as e:
        logger.error(f"Configuration error: {e}")
        return 1

    inputs = {
        option: getattr(args, option)
        for option in EXPORT_INPUTS
        if getattr(args, option) is not None
    }
    if not inputs:
        logger.error("No input tables given (use --geno, --cgeno, --cov or --pheno)")
        return 1
    missing = [str(path) for path in inputs.values() if not path.exists()]
    if missing:
        logger.error(f"Input table not found: {', '.join(missing)}")
        return 1

    tables = {}
    for option, path in inputs.items():
        table, n_invalid = LabeledTable.read(
            path,
            default_value=config.default_value,
            plink=config.plink,
            strict=config.strict_labels,
            separators=config.separators,
        )
        if n_invalid:
            logger.info(f"{path}: {n_invalid} values replaced by {config.default_value:g}")
        tables[EXPORT_INPUTS[option]] = table

    written = write_raw_data(config.prefix, **tables)
    if not written:
        logger.error("Nothing written")
        return 1

    for suffix, path in written.items():
        print(f"Wrote {suffix} table to {path}")
    return 0 if len(written) == len(inputs) else 1
