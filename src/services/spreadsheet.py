"""
Spreadsheet access over local workbook files.

Supported:
  - Excel / OpenDocument workbooks (.xlsx, .xlsm, .xls, .ods): every sheet tab
  - CSV (.csv): a single sheet named after the file stem

Cells are read verbatim: no header row, no dtype inference, and no missing-value
strings ("NA", "None", "null" are names like any other). Empty cells come back
as "" or None.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls", ".ods"}


def column_index(designator: str) -> int:
    """Convert a column letter to a 0-based index ("A" -> 0, "AA" -> 26)."""
    if not designator or not designator.isascii() or not designator.isalpha():
        raise ValueError(f"Invalid column designator: {designator!r}")
    idx = 0
    for ch in designator.upper():
        idx = idx * 26 + (ord(ch) - ord("A") + 1)
    return idx - 1


def _cell(value: Any) -> Any:
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


@dataclass
class Sheet:
    name: str
    frame: pd.DataFrame

    def get_column_values(self, column: str) -> List[List[Any]]:
        """All values of a whole column, one single-cell row per sheet row."""
        idx = column_index(column)
        if idx >= self.frame.shape[1]:
            return []
        return [[_cell(v)] for v in self.frame.iloc[:, idx].tolist()]


class Workbook:
    def __init__(self, path: Path, sheets: Dict[str, pd.DataFrame]) -> None:
        self.path = path
        self._sheets = sheets

    @classmethod
    def open(cls, path: Path | str) -> "Workbook":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Spreadsheet not found: {path}")

        suffix = path.suffix.lower()
        if suffix == ".csv":
            frame = pd.read_csv(
                path, header=None, dtype=object, skip_blank_lines=False, keep_default_na=False, na_values=[]
            )
            sheets = {path.stem: frame}
        elif suffix in EXCEL_SUFFIXES:
            sheets = pd.read_excel(
                path, sheet_name=None, header=None, dtype=object, keep_default_na=False, na_values=[]
            )
        else:
            raise ValueError(f"Unsupported spreadsheet format: {path.suffix or '(none)'}")
        return cls(path, {str(k): v for k, v in sheets.items()})

    @property
    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def get_sheet_by_name(self, name: str) -> Sheet:
        if name not in self._sheets:
            raise KeyError(f"Sheet '{name}' not found in {self.path.name} (available: {', '.join(self._sheets)})")
        return Sheet(name=name, frame=self._sheets[name])
