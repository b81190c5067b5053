"""csvtable I/O helpers.

- plain-text codec in [`text`](text.py:1)
- pandas interop in [`frames`](frames.py:1), imported explicitly as
  `csvtable.io.frames` (it depends on `csvtable.core`)
"""

from __future__ import annotations

from .text import (
    DEFAULT_ENCODING,
    DEFAULT_SEPARATOR,
    format_table_text,
    parse_table_text,
    read_table_text,
    write_table_text,
)

__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_SEPARATOR",
    "format_table_text",
    "parse_table_text",
    "read_table_text",
    "write_table_text",
]
