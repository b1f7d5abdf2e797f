"""Utility modules for table file handling."""

from rawtables.utils.fileio import atomic_open

__all__ = [
    # Atomic file-write utilities
    'atomic_open',
]
