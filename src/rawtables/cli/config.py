"""
Configuration file support for the rawtables CLI.

Supports YAML and JSON config files with CLI argument override.

Example config (``tables.yaml``)::

    default_value: -9
    separators: " \\t"
    strict_labels: true
    plink: false
    prefix: results/run1
"""

import json
from argparse import Namespace
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from rawtables.io.readers import DEFAULT_MISSING_VALUE
from rawtables.io.tokenizer import DEFAULT_SEPARATORS
from rawtables.io.writers import DEFAULT_PREFIX


class ConfigError(ValueError):
    """Raised when a config file cannot be parsed or has unknown keys."""
    pass


@dataclass
class TableIOConfig:
    """
    Settings shared by the table commands.

    Mirrors the CLI argument structure for consistency.
    """
    prefix: str = DEFAULT_PREFIX
    separators: str = DEFAULT_SEPARATORS
    default_value: float = DEFAULT_MISSING_VALUE
    strict_labels: bool = False
    plink: bool = False

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "TableIOConfig":
        """
        Build a config from a mapping, rejecting unknown keys.

        Raises:
            ConfigError: If a key is not a TableIOConfig field or a value
                has the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(
                f"Unknown config keys: {unknown}. Valid keys: {sorted(known)}"
            )

        config = cls(**values)
        try:
            config.default_value = float(config.default_value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"default_value must be a number: {e}") from e
        if not isinstance(config.separators, str) or not config.separators:
            raise ConfigError("separators must be a non-empty string")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters:
        config_path: Path to config file (.yaml, .yml, or .json)

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If file format is unsupported or invalid

    Examples:
        >>> config = load_config(Path("tables.yaml"))
        >>> print(config['default_value'])
        -9
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in ('.yaml', '.yml', '.json'):
        raise ConfigError(
            f"Unsupported config format: {suffix}. "
            f"Use .yaml, .yml, or .json"
        )

    try:
        with open(config_path, 'r') as f:
            if suffix == '.json':
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file: {e}") from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ConfigError("Config file must contain a dictionary/mapping at top level")

    return config


def merge_config_with_args(
    config: Dict[str, Any],
    args: Namespace,
    explicit: Optional[Iterable[str]] = None,
) -> TableIOConfig:
    """
    Merge config file values with CLI arguments.

    Priority (highest to lowest):
    1. Explicitly provided CLI arguments
    2. Config file values
    3. CLI argument defaults

    Parameters:
        config: Configuration dictionary from load_config()
        args: Parsed CLI arguments (argparse.Namespace)
        explicit: Names of arguments the user passed on the command line

    Returns:
        Effective TableIOConfig

    Raises:
        ConfigError: If the config holds unknown keys or bad values
    """
    explicit = set(explicit or ())
    merged = TableIOConfig.from_dict(config).to_dict()

    for name in merged:
        if not hasattr(args, name):
            continue
        cli_value = getattr(args, name)
        # CLI argument explicitly set - always wins
        if name in explicit or (name not in config and cli_value is not None):
            merged[name] = cli_value

    return TableIOConfig.from_dict(merged)


def explicit_arguments(argv: Iterable[str]) -> set:
    """
    Names of long options present in a raw argument list.

    ``--default-value`` and ``--default-value=-9`` both yield
    ``default_value``.
    """
    explicit = set()
    for arg in argv:
        if arg.startswith('--'):
            explicit.add(arg[2:].split('=', 1)[0].replace('-', '_'))
    return explicit
