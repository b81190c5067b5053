"""Plain-text CSV codec.

Dialect:
- first line is the header, every following line is one data row
- fields are delimited by a single separator character
- lines are terminated by `\\n`; `\\r` is *not* stripped and stays part of the
  last field of its line
- no quoting and no escaping; a field containing the separator or `\\n` does
  not survive a save/load roundtrip
- bytes that do not decode in the chosen encoding are kept as lone
  surrogates (`surrogateescape`) and written back byte for byte

Column count is derived from the header line (`1 + separator count`, or 0 for
an empty first line). Every line, header included, is then split into exactly
that many fields: tokens past the column count are dropped and missing tokens
become empty strings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from csvtable.core.errors import IoError, SizeMismatch

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ","
DEFAULT_ENCODING = "utf-8"

Row = tuple[str, ...]


def check_separator(separator: object) -> str:
    """Return `separator` if it is a one-character string, else raise."""
    if not isinstance(separator, str):
        raise ValueError(f"separator: expected str, got {type(separator).__name__}")
    if len(separator) != 1:
        raise ValueError(f"separator: expected a single character, got {separator!r}")
    if separator == "\n":
        raise ValueError("separator: must not be the line terminator")
    return separator


def count_columns(line: str, separator: str) -> int:
    """Column count implied by a header line."""
    if not line:
        return 0
    return line.count(separator) + 1


def split_line(line: str, separator: str, column_count: int) -> Row:
    """Split one line (without its terminator) into exactly `column_count` fields."""
    if column_count <= 0:
        return ()
    parts = line.split(separator, column_count)[:column_count]
    if len(parts) < column_count:
        parts.extend([""] * (column_count - len(parts)))
    return tuple(parts)


def join_line(fields: Sequence[str], separator: str) -> str:
    """Join fields into one `\\n`-terminated line."""
    return separator.join(fields) + "\n"


def _data_lines(text: str) -> list[str]:
    # A final "\n" terminates the last line; it does not open an empty one.
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def parse_table_text(text: str, separator: str = DEFAULT_SEPARATOR) -> tuple[Row, list[Row]]:
    """Parse CSV text into `(header, rows)`.

    Raises:
        SizeMismatch: a parsed row's field count differs from the header's.
    """
    separator = check_separator(separator)
    lines = _data_lines(text)
    if not lines:
        return (), []

    column_count = count_columns(lines[0], separator)
    header = split_line(lines[0], separator, column_count)

    rows: list[Row] = []
    for i, line in enumerate(lines[1:]):
        row = split_line(line, separator, column_count)
        # Structurally always equal today; guards changes to split_line.
        if len(row) != len(header):
            raise SizeMismatch("load", expected=len(header), actual=len(row), row=i)
        rows.append(row)
    return header, rows


def format_table_text(header: Sequence[str], rows: Iterable[Sequence[str]], separator: str = DEFAULT_SEPARATOR) -> str:
    """Render `(header, rows)` as CSV text, one `\\n`-terminated line each."""
    separator = check_separator(separator)
    parts = [join_line(header, separator)]
    parts.extend(join_line(row, separator) for row in rows)
    return "".join(parts)


def read_table_text(
    path: str | Path,
    separator: str = DEFAULT_SEPARATOR,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> tuple[Row, list[Row]]:
    """Read and parse the CSV file at `path`.

    The file is read with `newline=""` so no line-ending translation happens,
    and with `errors="surrogateescape"` so bytes that are not valid in
    `encoding` load as lone surrogates and are written back unchanged by
    `write_table_text`.

    Raises:
        IoError: the file cannot be opened.
        SizeMismatch: see `parse_table_text`.
    """
    p = Path(path)
    try:
        with p.open("r", encoding=encoding, errors="surrogateescape", newline="") as f:
            text = f.read()
    except OSError as e:
        raise IoError("load", p) from e

    header, rows = parse_table_text(text, separator)
    logger.debug("loaded %s: %d columns, %d rows", p, len(header), len(rows))
    return header, rows


def write_table_text(
    path: str | Path,
    header: Sequence[str],
    rows: Iterable[Sequence[str]],
    separator: str = DEFAULT_SEPARATOR,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write `(header, rows)` to `path`, truncating or creating it.

    Parent directories are not created.

    Raises:
        IoError: the file cannot be opened for writing.
    """
    p = Path(path)
    text = format_table_text(header, rows, separator)
    try:
        f = p.open("w", encoding=encoding, errors="surrogateescape", newline="")
    except OSError as e:
        raise IoError("save", p) from e
    with f:
        f.write(text)
    logger.debug("saved %s: %d bytes", p, len(text))


__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_SEPARATOR",
    "Row",
    "check_separator",
    "count_columns",
    "format_table_text",
    "join_line",
    "parse_table_text",
    "read_table_text",
    "split_line",
    "write_table_text",
]
