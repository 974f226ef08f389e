"""
Best-effort decoder for the sheet's CSV exports.

Rows are split on ``\\n`` and fields on ``,``. A double quote toggles
quoted mode, so quoted fields may contain commas. Doubled quotes inside a
quoted field are not unescaped and quoted newlines are not supported;
the exports this reads never contain either. Decoding never raises.
"""
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def decode_csv(text: str) -> List[List[str]]:
    """
    Split CSV text into rows of trimmed string fields.

    An empty string yields ``[[""]]``; callers drop rows whose first field
    is empty.

    Example:
        >>> decode_csv('a,b,"c,d"')
        [['a', 'b', 'c,d']]
    """
    rows: List[List[str]] = []
    for line in text.split("\n"):
        fields: List[str] = []
        current: List[str] = []
        in_quotes = False
        for char in line:
            if char == '"':
                in_quotes = not in_quotes
            elif char == "," and not in_quotes:
                fields.append("".join(current).strip())
                current = []
            else:
                current.append(char)
        fields.append("".join(current).strip())
        rows.append(fields)
    return rows


def data_rows(rows: Sequence[Sequence[str]]) -> List[Sequence[str]]:
    """Rows after the header whose first field is non-empty."""
    return [row for row in rows[1:] if row and row[0]]


def map_data_rows(rows: Sequence[Sequence[str]], mapper: Callable[[Sequence[str]], T]) -> List[T]:
    """Apply ``mapper`` to every data row, preserving sheet order."""
    return [mapper(row) for row in data_rows(rows)]
