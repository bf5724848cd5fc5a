"""
Setup self-test: verify each collaborator can be reached before a real run.

Steps (each depends on the previous ones):
  1. spreadsheet opens
  2. sheet tab exists
  3. presentation opens
  4. template slide exists
  5. names can be read and formatted

Nothing is written to the presentation.

Run:
  python -m src.slides.check_setup --config config.yaml
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from src.common.config import SlidesConfig, load_slides_config
from src.common.logs import setup_logging
from src.names.format import format_name
from src.names.source import get_names_from_sheet
from src.services.presentation import Deck
from src.services.spreadsheet import Workbook

logger = logging.getLogger("slides.check_setup")


@dataclass
class Check:
    """Represents a single setup check and its result."""
    name: str
    passed: bool
    details: Dict[str, Any]


def run_setup_checks(cfg: SlidesConfig) -> List[Check]:
    checks: List[Check] = []
    step = "spreadsheet access"
    try:
        workbook = Workbook.open(cfg.spreadsheet_path)
        checks.append(Check(step, True, {"path": str(cfg.spreadsheet_path), "sheets": workbook.sheet_names}))
        logger.info("✓ Spreadsheet access successful")

        step = "sheet access"
        sheet = workbook.get_sheet_by_name(cfg.sheet_name)
        checks.append(Check(step, True, {"sheet": sheet.name, "rows": int(sheet.frame.shape[0])}))
        logger.info("✓ Sheet access successful")

        step = "presentation access"
        deck = Deck.open(cfg.presentation_path)
        checks.append(Check(step, True, {"path": str(cfg.presentation_path), "slides": len(deck.slides)}))
        logger.info("✓ Presentation access successful")

        step = "template slide"
        template = deck.get_slide(cfg.template_slide_index)
        checks.append(Check(step, True, {"index": cfg.template_slide_index, "slide_id": template.slide_id}))
        logger.info('✓ Template slide found: "%s"', template.slide_id)

        step = "names"
        names = get_names_from_sheet(sheet, cfg.name_column)
        formatted = [format_name(n) for n in names]
        checks.append(
            Check(step, True, {"count": len(names), "original": names[:3], "formatted": formatted[:3]})
        )
        logger.info("✓ Found %d names", len(names))
        logger.info("Original names: %s", names[:3])
        logger.info("Formatted names: %s", formatted[:3])

    except Exception as e:
        checks.append(Check(step, False, {"error": str(e)}))
        logger.error("❌ Setup test failed: %s", e)

    return checks


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check spreadsheet/presentation access without changing anything.")
    p.add_argument("--config", type=str, default="config.yaml")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    cfg = load_slides_config(args.config)
    setup_logging(cfg.log_level)

    checks = run_setup_checks(cfg)
    failed = [c for c in checks if not c.passed]
    logger.info("checks: passed %d/%d", len(checks) - len(failed), len(checks))
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
