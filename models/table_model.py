from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

Row = Dict[str, str]


@dataclass(frozen=True)
class Column:
    name: str
    position: int


class Table:
    """
    Represents the loaded data in memory:
      - columns: ordered list of unique column names (header order)
      - rows: list of dicts column -> raw string, every declared column present
    """

    def __init__(self, columns: Optional[List[str]] = None, rows: Optional[List[Row]] = None):
        self._columns: List[str] = list(columns or [])
        if len(set(self._columns)) != len(self._columns):
            raise ValueError("Column names must be unique.")
        self._rows: List[Row] = [self._normalize(row) for row in (rows or [])]

    def _normalize(self, row: Row) -> Row:
        unknown = [key for key in row if key not in self._columns]
        if unknown:
            raise ValueError(f"Row references undeclared columns: {', '.join(map(str, unknown))}")
        return {col: ("" if row.get(col) is None else str(row.get(col))) for col in self._columns}

    @property
    def column_names(self) -> List[str]:
        return list(self._columns)

    @property
    def columns(self) -> List[Column]:
        return [Column(name, i) for i, name in enumerate(self._columns)]

    @property
    def rows(self) -> List[Row]:
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def has_column(self, name: str) -> bool:
        return name in self._columns

    def values(self, name: str) -> List[str]:
        if name not in self._columns:
            raise KeyError(name)
        return [row[name] for row in self._rows]

    def preview_rows(self, limit: Optional[int] = None) -> List[List[str]]:
        rows = self._rows if limit is None else self._rows[:limit]
        return [[row[col] for col in self._columns] for row in rows]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self._rows, columns=self._columns)
