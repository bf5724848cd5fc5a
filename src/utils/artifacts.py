"""
Artifact utilities: small helpers for files written next to a run.

A populate run leaves a JSON manifest behind (which deck, which template,
which names in which order) so a generated deck can be traced back to its run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def ensure_dir(p: Path) -> None:
    """Create directory if missing (including parents)."""
    p.mkdir(parents=True, exist_ok=True)


def save_json(obj: Any, out_path: Path) -> str:
    """Save JSON (UTF-8) with indentation."""
    ensure_dir(out_path.parent)
    out_path.write_text(json.dumps(obj, indent=2, ensure_ascii=False), encoding="utf-8")
    return str(out_path)
