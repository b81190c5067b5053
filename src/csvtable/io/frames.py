"""pandas interop for `Table`.

Tables convert to DataFrames whose columns all use the pandas `string`
extension dtype, so values stay text exactly as loaded (no type inference).
Column names come from the header.

pandas is imported lazily to keep `import csvtable` light.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from csvtable.core.table import Table
from csvtable.io.text import DEFAULT_SEPARATOR

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


def table_to_dataframe(table: Table) -> "pd.DataFrame":
    """Return a DataFrame with one `string` column per header field.

    Duplicate header names are rejected since DataFrame column lookup by name
    would become ambiguous.
    """
    import pandas as pd

    if not isinstance(table, Table):
        raise TypeError(f"table: expected csvtable.Table, got {type(table).__name__}")

    header = list(table.header)
    dupes = sorted({c for c in header if header.count(c) > 1})
    if dupes:
        raise ValueError(f"table_to_dataframe: duplicate column names: {dupes}")

    if not header:
        return pd.DataFrame(index=pd.RangeIndex(len(table)))

    rows = [list(r) for r in table.rows()]
    return pd.DataFrame(rows, columns=header, dtype="string")


def table_from_dataframe(df: "pd.DataFrame", separator: str = DEFAULT_SEPARATOR) -> Table:
    """Build a `Table` from a DataFrame.

    Column names become the header. Every cell must be a string; missing
    values (`<NA>`/`NaN`/`None`) are rejected rather than guessed at.
    """
    import pandas as pd

    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"df: expected pandas.DataFrame, got {type(df).__name__}")

    header = [str(c) for c in df.columns]
    table = Table(separator)
    table.set_header(header)
    table.reserve(len(df))

    for i, values in enumerate(df.itertuples(index=False, name=None)):
        row: list[str] = []
        for col, v in zip(header, values):
            if v is None or v is pd.NA or (isinstance(v, float) and v != v):
                raise ValueError(f"row[{i}].{col}: missing value")
            if not isinstance(v, str):
                raise TypeError(f"row[{i}].{col}: expected str, got {type(v).__name__}")
            row.append(v)
        table.add_row(row)
    return table


__all__ = [
    "table_from_dataframe",
    "table_to_dataframe",
]
