"""
Ordered label index for table rows and columns.

A LabelIndex maps string labels (sample IDs, marker names, covariate or
phenotype names) to dense integer positions in a NumericMatrix while
remembering the order in which labels were first seen.

Duplicate Policy:
    Tables produced by upstream tools occasionally repeat a sample ID. By
    default a repeated label is remapped to its newest index and keeps its
    original insertion position (last writer wins). With ``strict=True`` the
    index refuses the update and raises DuplicateLabelError instead, so the
    caller can decide what to do with the offending record.

Examples:
    >>> from rawtables.core.labels import LabelIndex
    >>>
    >>> people = LabelIndex.from_labels(["S1", "S2"], name="PeopleID")
    >>> people["S2"], people.label_at(0)
    (1, 'S1')
    >>> people.insert_or_update("S1", 5)
    5
    >>> people.labels()
    ['S1', 'S2']
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

import pandas as pd

__all__ = ['LabelIndex', 'TableFormatError', 'DuplicateLabelError']


class TableFormatError(ValueError):
    """Raised when table contents violate the labeled table format."""
    pass


class DuplicateLabelError(TableFormatError, KeyError):
    """Raised by a strict LabelIndex when a label is inserted twice."""

    def __init__(self, label: str, index: int, existing: int):
        self.label = label
        self.index = index
        self.existing = existing
        super().__init__(
            f"Duplicate label '{label}' (already mapped to {existing}, attempted {index})"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class LabelIndex:
    """
    Insertion-ordered mapping from label to integer index.

    Attributes:
        name: Optional name of the label axis. For row labels this is the
            corner label written in the upper-left cell of a table header.
        strict: Whether re-inserting a label raises DuplicateLabelError
    """

    def __init__(self, name: Optional[str] = None, strict: bool = False):
        self.name = name
        self.strict = strict
        self._index: dict[str, int] = {}
        self._order: list[str] = []

    @classmethod
    def from_labels(
        cls,
        labels: Iterable[str],
        name: Optional[str] = None,
        strict: bool = False,
    ) -> LabelIndex:
        """
        Build an index mapping each label to its position in ``labels``.

        Repeated labels follow the duplicate policy of the new index.
        """
        index = cls(name=name, strict=strict)
        for position, label in enumerate(labels):
            index.insert_or_update(str(label), position)
        return index

    def insert_or_update(self, label: str, index: Optional[int] = None) -> int:
        """
        Map ``label`` to ``index`` and return the stored index.

        Args:
            label: Label to insert
            index: Target index. Defaults to the current size for new labels
                and to the existing index for known labels.

        Returns:
            The index now associated with ``label``

        Raises:
            DuplicateLabelError: If the index is strict and ``label`` exists
        """
        existing = self._index.get(label)
        if existing is None:
            if index is None:
                index = len(self._order)
            self._order.append(label)
        else:
            if index is None:
                index = existing
            if self.strict:
                raise DuplicateLabelError(label, index, existing)
        self._index[label] = index
        return index

    def index_of(self, label: str) -> int:
        """Index mapped to ``label``; raises KeyError if absent."""
        return self._index[label]

    def label_at(self, position: int) -> str:
        """Label inserted at ``position`` (insertion order, not mapped index)."""
        return self._order[position]

    def labels(self) -> list[str]:
        """All labels in insertion order."""
        return list(self._order)

    def to_index(self) -> pd.Index:
        """Labels in insertion order as a pandas Index named after this axis."""
        return pd.Index(self._order, dtype=object, name=self.name)

    def __getitem__(self, label: str) -> int:
        return self._index[label]

    def __setitem__(self, label: str, index: int) -> None:
        self.insert_or_update(label, index)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def items(self) -> list[tuple[str, int]]:
        """(label, index) pairs in insertion order."""
        return [(label, self._index[label]) for label in self._order]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelIndex):
            return NotImplemented
        return self.items() == other.items()

    __hash__ = None

    def __repr__(self) -> str:
        shown = ", ".join(f"{label!r}: {idx}" for label, idx in self.items()[:5])
        more = ", ..." if len(self) > 5 else ""
        return f"LabelIndex({{{shown}{more}}}, name={self.name!r})"
