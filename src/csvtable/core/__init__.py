"""csvtable core: the `Table` container and its error types.

This package must not import the CLI.
"""

from __future__ import annotations

from .errors import IndexOutOfBounds, IoError, SizeMismatch, TableError
from .table import Table

__all__ = [
    "IndexOutOfBounds",
    "IoError",
    "SizeMismatch",
    "Table",
    "TableError",
]
