"""
Line tokenizer and token helpers for whitespace-delimited tables.

Tables in this format are split on a set of separator characters (space and
tab by default). A run of separators counts as one delimiter, so
column-aligned files written by other tools parse the same as tab-separated
ones. Gzip-compressed input is read transparently when the file name ends in
``.gz``.

Examples:
    >>> from rawtables.io.tokenizer import iter_tokenized_lines, parse_float
    >>>
    >>> for line_number, tokens in iter_tokenized_lines("pheno.txt"):
    ...     print(line_number, tokens)
    1 ['PeopleID', '"BMI"']
    2 ['S1', '22.5']
    >>> parse_float("22.5"), parse_float("NA")
    (22.5, None)
"""

from __future__ import annotations

import gzip
import re
from functools import lru_cache
from pathlib import Path
from typing import IO, Iterator, Optional, Pattern, Union

__all__ = [
    'DEFAULT_SEPARATORS',
    'open_text',
    'iter_tokenized_lines',
    'split_tokens',
    'parse_float',
    'quote_label',
    'unquote_label',
]

PathLike = Union[str, Path]

DEFAULT_SEPARATORS = " \t"


def open_text(path: PathLike, mode: str = "r", errors: str = "replace") -> IO[str]:
    """Open a plain or gzip-compressed (``.gz``) UTF-8 text file.

    Undecodable bytes become U+FFFD by default, so one badly encoded label
    does not abort a whole load.
    """
    path = Path(path)
    if path.suffix == ".gz":
        return gzip.open(path, mode + "t", encoding="utf-8", errors=errors)
    return open(path, mode, encoding="utf-8", errors=errors)


@lru_cache(maxsize=16)
def _separator_pattern(separators: str) -> Pattern[str]:
    if not separators:
        raise ValueError("separators must contain at least one character")
    return re.compile("[" + re.escape(separators) + "]+")


def split_tokens(line: str, separators: str = DEFAULT_SEPARATORS) -> list[str]:
    """Split one line into tokens; empty tokens are never produced."""
    line = line.rstrip("\r\n")
    return [token for token in _separator_pattern(separators).split(line) if token]


def iter_tokenized_lines(
    path: PathLike,
    separators: str = DEFAULT_SEPARATORS,
) -> Iterator[tuple[int, list[str]]]:
    """
    Yield ``(line_number, tokens)`` for every line of a text file.

    Line numbers are 1-based physical line numbers. Blank lines are yielded
    with an empty token list so callers can report them.

    Raises:
        FileNotFoundError: If path does not exist
    """
    with open_text(path) as handle:
        for line_number, line in enumerate(handle, start=1):
            yield line_number, split_tokens(line, separators)


def parse_float(token: str) -> Optional[float]:
    """
    Parse a whole token as a float, or return None.

    Accepts what C ``strtod`` accepts for a complete token (decimal,
    exponent, ``nan``, ``inf``); rejects empty tokens and Python-only
    ``_`` digit grouping.
    """
    if not token or "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def quote_label(label: str) -> str:
    """Wrap a label in double quotes."""
    return f'"{label}"'


def unquote_label(token: str) -> str:
    """Strip one pair of surrounding double quotes, if present."""
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        return token[1:-1]
    return token
