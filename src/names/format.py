"""Display formatting for names read from the sheet: "FirstName L."."""

from __future__ import annotations

import re
from typing import Any

_WS_RE = re.compile(r"\s+")


def format_name(full_name: Any) -> Any:
    """
    Format a full name as first name plus last initial.

    "Maria Elena Garcia" -> "Maria G."
    "Madonna"            -> "Madonna"

    Anything that is not a non-empty string is returned as-is.
    """
    if not full_name or not isinstance(full_name, str):
        return full_name

    clean = _WS_RE.sub(" ", full_name.strip())
    parts = clean.split(" ")

    if len(parts) == 1:
        return parts[0]

    first = parts[0]
    last_initial = parts[-1][0].upper()
    return f"{first} {last_initial}."
