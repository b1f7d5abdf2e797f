"""
Atomic file-write utilities.

Prevents truncated tables when a process is interrupted mid-write by
writing to a temporary file in the same directory and then performing an
atomic ``os.replace()`` (POSIX rename guarantee).
"""

from __future__ import annotations

import gzip
import os
import stat
import tempfile
from contextlib import contextmanager
from typing import Iterator, TextIO


def _target_mode(path: str) -> int:
    """Permission bits for *path*: kept if it exists, else 0666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@contextmanager
def atomic_open(
    path: str | os.PathLike,
    *,
    newline: str = "\n",
    encoding: str = "utf-8",
) -> Iterator[TextIO]:
    """Open *path* for text writing; the file appears only on clean exit.

    The handle points at a temporary file in the same directory as *path*.
    When the ``with`` block completes the handle is flushed, closed and
    moved into place with ``os.replace()``. If the block raises, the
    temporary file is removed and *path* is left as it was.

    A *path* ending in ``.gz`` is written gzip-compressed. The replaced file
    keeps the permission bits of the file it overwrites.

    Parameters
    ----------
    path:
        Destination file path.
    newline:
        Line terminator translation passed to the text handle.
    encoding:
        Text encoding; UTF-8 matches what the readers decode.
    """
    path = str(path)
    dir_path = os.path.dirname(path) or "."
    opener = gzip.open if path.endswith(".gz") else open
    fd, tmp_path = tempfile.mkstemp(dir=dir_path, suffix=".tmp")
    os.close(fd)
    try:
        with opener(tmp_path, "wt", encoding=encoding, newline=newline) as tmp:
            yield tmp
        os.chmod(tmp_path, _target_mode(path))
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any failure
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
