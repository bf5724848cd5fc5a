"""
Populate a presentation with one slide per name from a spreadsheet column.

Flow:
  read names -> format ("FirstName L.") -> shuffle -> clone template per name

The whole run sits behind a single error boundary: a failure is logged and
the run stops. Slides created before the failure are kept (the deck is still
saved); nothing is rolled back.

Run:
  python -m src.slides.populate --config config.yaml
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, List, Optional

import numpy as np

from src.common.config import SlidesConfig, load_slides_config
from src.common.logs import setup_logging
from src.names.format import format_name
from src.names.shuffle import shuffle_names
from src.names.source import get_names_from_sheet
from src.services.presentation import Deck
from src.services.spreadsheet import Workbook
from src.slides.generate import create_slide_for_name
from src.utils.artifacts import save_json

logger = logging.getLogger("slides.populate")

MANIFEST_NAME = "populate_manifest.json"


def populate_slides_from_sheet(
    cfg: SlidesConfig,
    rng: Optional[np.random.Generator] = None,
) -> Optional[List[Any]]:
    """
    Run the pipeline once.

    Returns the names in slide order ([] when the sheet has no names), or
    None when the run failed and the error was logged.
    """
    try:
        workbook = Workbook.open(cfg.spreadsheet_path)
        deck = Deck.open(cfg.presentation_path)

        sheet = workbook.get_sheet_by_name(cfg.sheet_name)
        names = get_names_from_sheet(sheet, cfg.name_column)

        if len(names) == 0:
            logger.info("No names found in the spreadsheet")
            return []

        formatted = [format_name(n) for n in names]

        if rng is None:
            rng = np.random.default_rng(cfg.shuffle_seed)
        randomized = shuffle_names(formatted, rng)
        logger.info("Names have been formatted and randomized")

        template = deck.get_slide(cfg.template_slide_index)

        logger.info("Found %d names. Creating slides in randomized order...", len(randomized))

        try:
            for i, name in enumerate(randomized, start=1):
                create_slide_for_name(deck, template, name, i, cfg.placeholders)
        finally:
            deck.save(cfg.output_path)

        logger.info("Successfully created %d slides in randomized order!", len(randomized))

        save_json(
            {
                "presentation": str(cfg.presentation_path),
                "output": str(cfg.output_path),
                "template_slide_index": cfg.template_slide_index,
                "slides_created": len(randomized),
                "names": [str(n) for n in randomized],
            },
            cfg.reports_dir / MANIFEST_NAME,
        )
        return randomized

    except Exception as e:
        logger.error("Error: %s", e)
        return None


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create one slide per spreadsheet name from a template slide.")
    p.add_argument("--config", type=str, default="config.yaml")
    p.add_argument("--seed", type=int, default=None, help="Override shuffle.seed for this run")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    cfg = load_slides_config(args.config)
    setup_logging(cfg.log_level)

    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    result = populate_slides_from_sheet(cfg, rng)
    return 1 if result is None else 0


if __name__ == "__main__":
    raise SystemExit(main())
