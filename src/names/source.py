"""Read the raw name list from a sheet column."""

from __future__ import annotations

from typing import Any, List

from src.services.spreadsheet import Sheet


def is_blank(value: Any) -> bool:
    return not value or str(value).strip() == ""


def get_names_from_sheet(sheet: Sheet, column: str) -> List[Any]:
    """
    Return the names in ``column`` in row order.

    Empty cells are dropped, then the first remaining value is dropped as the
    header. There is no header detection: if the header cell is blank, the
    first real name goes instead.
    """
    values = sheet.get_column_values(column)
    names = [row[0] for row in values if row]
    names = [n for n in names if not is_blank(n)]
    return names[1:]
