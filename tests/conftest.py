"""Shared fixtures: small real decks and sheets built in tmp_path."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest
from pptx import Presentation
from pptx.util import Inches

from src.common.config import SlidesConfig
from src.slides.generate import PLACEHOLDERS

BLANK_LAYOUT = 6


def add_text_slide(prs, *texts: str):
    slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])
    for i, text in enumerate(texts):
        tx = slide.shapes.add_textbox(Inches(1), Inches(1 + i), Inches(6), Inches(0.8))
        tx.text_frame.text = text
    return slide


def make_deck(path: Path, slides: List[List[str]]) -> Path:
    prs = Presentation()
    for texts in slides:
        add_text_slide(prs, *texts)
    prs.save(str(path))
    return path


def make_csv(path: Path, rows: List[str]) -> Path:
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


def slide_texts(slide) -> List[str]:
    return [sh.text_frame.text for sh in slide.shapes if sh.has_text_frame]


@pytest.fixture()
def make_config(tmp_path):
    def _make(
        spreadsheet: Path,
        presentation: Path,
        sheet_name: Optional[str] = None,
        template_slide_index: int = 1,
        keep_count: int = 2,
        seed: Optional[int] = 7,
    ) -> SlidesConfig:
        return SlidesConfig(
            spreadsheet_path=spreadsheet,
            sheet_name=sheet_name or spreadsheet.stem,
            name_column="A",
            presentation_path=presentation,
            output_path=tmp_path / "out" / "deck.pptx",
            template_slide_index=template_slide_index,
            keep_count=keep_count,
            placeholders=PLACEHOLDERS,
            shuffle_seed=seed,
            reports_dir=tmp_path / "reports",
            log_level="INFO",
        )

    return _make


def write_config(tmp_path: Path, level: str = "WARNING", template_slide_index: int = 1) -> Path:
    """Write a config.yaml pointing at names.csv / deck.pptx inside tmp_path."""
    import yaml

    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        yaml.safe_dump(
            {
                "project": {"name": "t"},
                "spreadsheet": {"path": "names.csv", "sheet_name": "names", "name_column": "A"},
                "presentation": {
                    "path": "deck.pptx",
                    "output_path": "out/deck.pptx",
                    "template_slide_index": template_slide_index,
                    "keep_count": 2,
                },
                "placeholders": list(PLACEHOLDERS),
                "shuffle": {"seed": 3},
                "paths": {"reports_dir": "reports"},
                "logging": {"level": level},
            }
        ),
        encoding="utf-8",
    )
    return cfg_path
