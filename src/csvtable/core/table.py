"""In-memory CSV table: one header plus rows of text fields.

Invariant: every row has exactly as many fields as the header at the time the
row was added. `set_header` does not re-check rows that are already present.

Accessors return immutable tuples (value semantics), so callers can hold on
to them across later mutation of the table.

`load` is all-or-nothing: the file is parsed into local values first and the
table is only updated once the whole parse succeeded. A failed `load` leaves
header and rows exactly as they were.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator

from csvtable.core.errors import IndexOutOfBounds, SizeMismatch
from csvtable.io.text import (
    DEFAULT_ENCODING,
    DEFAULT_SEPARATOR,
    Row,
    check_separator,
    read_table_text,
    write_table_text,
)


def _as_row(values: Iterable[Any], *, where: str) -> Row:
    if isinstance(values, str):
        raise TypeError(f"{where}: expected a sequence of str, got str")
    out = tuple(values)
    for i, v in enumerate(out):
        if not isinstance(v, str):
            raise TypeError(f"{where}[{i}]: expected str, got {type(v).__name__}")
    return out


class Table:
    """Header + rows of strings with a fixed single-character separator."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        self._separator = check_separator(separator)
        self._header: Row = ()
        self._rows: list[Row] = []

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        separator: str = DEFAULT_SEPARATOR,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> "Table":
        """Construct a table and `load` it from `path`."""
        table = cls(separator)
        table.load(path, encoding=encoding)
        return table

    # ---- options ----

    @property
    def separator(self) -> str:
        return self._separator

    def reserve(self, row_count: int) -> None:
        """Capacity hint for `row_count` rows.

        Python lists grow on demand, so this only validates the argument.
        """
        if row_count < 0:
            raise ValueError(f"reserve: row_count must be >= 0, got {row_count}")

    def clear(self) -> None:
        """Drop header and rows; the separator is kept."""
        self._header = ()
        self._rows = []

    # ---- header ----

    def set_header(self, columns: Iterable[str]) -> None:
        self._header = _as_row(columns, where="set_header")

    @property
    def header(self) -> Row:
        return self._header

    @property
    def column_count(self) -> int:
        return len(self._header)

    # ---- rows ----

    def add_row(self, row: Iterable[str]) -> None:
        """Append `row`; raise `SizeMismatch` if its length differs from the header's."""
        values = _as_row(row, where="add_row")
        if len(values) != len(self._header):
            raise SizeMismatch("add_row", expected=len(self._header), actual=len(values))
        self._rows.append(values)

    def row(self, idx: int) -> Row:
        """Return data row `idx` (0 is the first row after the header)."""
        if idx < 0 or idx >= len(self._rows):
            raise IndexOutOfBounds("row", index=idx, size=len(self._rows))
        return self._rows[idx]

    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(tuple(self._rows))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (
            self._separator == other._separator
            and self._header == other._header
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Table(separator={self._separator!r}, columns={len(self._header)}, "
            f"rows={len(self._rows)})"
        )

    # ---- IO ----

    def load(self, path: str | Path, *, encoding: str = DEFAULT_ENCODING) -> None:
        """Replace header and rows with the contents of the file at `path`.

        Raises:
            IoError: the file cannot be opened.
            SizeMismatch: a row's field count differs from the header's.
        """
        header, rows = read_table_text(path, self._separator, encoding=encoding)
        self._header = header
        self._rows = rows

    def save(self, path: str | Path, *, encoding: str = DEFAULT_ENCODING) -> None:
        """Write header and rows to `path`, truncating or creating it.

        No quoting is applied: a field containing the separator or a newline
        produces a file that does not load back to the same table.

        Raises:
            IoError: the file cannot be opened for writing.
        """
        write_table_text(path, self._header, self._rows, self._separator, encoding=encoding)


__all__ = ["Table"]
