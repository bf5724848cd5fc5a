"""
Load config.yaml into the explicit run configuration.

Every key is required; there are no silent fallbacks. Relative paths are
resolved against the directory holding the config file, so the repo-root
config.yaml behaves like the other scripts (paths relative to the repo root).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml


_COLUMN_RE = re.compile(r"^[A-Za-z]+$")


@dataclass(frozen=True)
class SlidesConfig:
    spreadsheet_path: Path
    sheet_name: str
    name_column: str
    presentation_path: Path
    output_path: Path
    template_slide_index: int
    keep_count: int
    placeholders: Tuple[str, ...]
    shuffle_seed: Optional[int]
    reports_dir: Path
    log_level: str


def load_yaml(path: Path) -> dict:
    # robust against BOM in config.yaml
    with open(path, "r", encoding="utf-8-sig") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError("Config did not parse as a dictionary.")
    return cfg


def _require(cfg: Dict[str, Any], *keys: str) -> Any:
    node: Any = cfg
    for i, k in enumerate(keys):
        if not isinstance(node, dict) or k not in node:
            raise ValueError(f"Missing config key: {'.'.join(keys[: i + 1])}")
        node = node[k]
    return node


def _non_negative_int(value: Any, key: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def _resolve(base: Path, value: Any, key: str) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{key} must be a non-empty path string")
    p = Path(value)
    return p if p.is_absolute() else base / p


def config_from_dict(cfg: Dict[str, Any], base_dir: Path) -> SlidesConfig:
    """Validate a parsed config mapping and build a SlidesConfig."""
    sheet_name = _require(cfg, "spreadsheet", "sheet_name")
    if not isinstance(sheet_name, str) or not sheet_name:
        raise ValueError("spreadsheet.sheet_name must be a non-empty string")

    name_column = _require(cfg, "spreadsheet", "name_column")
    if not isinstance(name_column, str) or not _COLUMN_RE.match(name_column):
        raise ValueError(f"spreadsheet.name_column must be a column letter (A, B, ..., AA), got {name_column!r}")

    placeholders = _require(cfg, "placeholders")
    if (
        not isinstance(placeholders, list)
        or not placeholders
        or not all(isinstance(p, str) and p for p in placeholders)
    ):
        raise ValueError("placeholders must be a non-empty list of non-empty strings")

    seed = _require(cfg, "shuffle", "seed")
    if seed is not None:
        seed = _non_negative_int(seed, "shuffle.seed")

    level = _require(cfg, "logging", "level")
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"logging.level is not a known level name: {level!r}")

    return SlidesConfig(
        spreadsheet_path=_resolve(base_dir, _require(cfg, "spreadsheet", "path"), "spreadsheet.path"),
        sheet_name=sheet_name,
        name_column=name_column.upper(),
        presentation_path=_resolve(base_dir, _require(cfg, "presentation", "path"), "presentation.path"),
        output_path=_resolve(base_dir, _require(cfg, "presentation", "output_path"), "presentation.output_path"),
        template_slide_index=_non_negative_int(
            _require(cfg, "presentation", "template_slide_index"), "presentation.template_slide_index"
        ),
        keep_count=_non_negative_int(_require(cfg, "presentation", "keep_count"), "presentation.keep_count"),
        placeholders=tuple(placeholders),
        shuffle_seed=seed,
        reports_dir=_resolve(base_dir, _require(cfg, "paths", "reports_dir"), "paths.reports_dir"),
        log_level=level.upper(),
    )


def load_slides_config(path: Path | str) -> SlidesConfig:
    cfg_path = Path(path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    return config_from_dict(load_yaml(cfg_path), cfg_path.parent)
