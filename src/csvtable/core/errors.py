"""Exception types raised by `csvtable`.

All errors derive from `TableError` so callers can catch the whole family, and
each also derives from the closest builtin (`OSError`, `ValueError`,
`IndexError`) so generic handlers keep working.

Messages are stable and suitable for test assertions.
"""

from __future__ import annotations

from pathlib import Path


class TableError(Exception):
    """Base class for every csvtable failure."""


class IoError(TableError, OSError):
    """A file could not be opened for reading or writing."""

    def __init__(self, op: str, path: str | Path):
        self.op = op
        self.path = Path(path)
        super().__init__(f'{op}: could not open file "{path}"')


class SizeMismatch(TableError, ValueError):
    """A row's field count disagrees with the header's field count."""

    def __init__(self, op: str, *, expected: int, actual: int, row: int | None = None):
        self.op = op
        self.expected = expected
        self.actual = actual
        self.row = row
        where = "row" if row is None else f"row[{row}]"
        super().__init__(f"{op}: {where} has different size than header ({actual} != {expected})")


class IndexOutOfBounds(TableError, IndexError):
    """A row index is outside `0 <= idx < row_count`."""

    def __init__(self, op: str, *, index: int, size: int):
        self.op = op
        self.index = index
        self.size = size
        super().__init__(f"{op}: index ({index}) out of bounds (row count {size})")


__all__ = [
    "IndexOutOfBounds",
    "IoError",
    "SizeMismatch",
    "TableError",
]
