"""csvtable: one-shot CSV file I/O.

Loads a file into a header plus rows of strings and saves such a table back.
No quoting, no type coercion; see `csvtable.io.text` for the exact dialect.
"""

from __future__ import annotations

from csvtable.core import IndexOutOfBounds, IoError, SizeMismatch, Table, TableError

__version__ = "0.2.3"

__all__ = [
    "__version__",
    "IndexOutOfBounds",
    "IoError",
    "SizeMismatch",
    "Table",
    "TableError",
]
