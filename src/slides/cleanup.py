"""
Reset a generated deck: delete every slide after the first ``keep_count``
(typically the title and template slides) so the next run starts clean.

Run:
  python -m src.slides.cleanup --config config.yaml [--deck path/to/deck.pptx]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from src.common.config import load_slides_config
from src.common.logs import setup_logging
from src.services.presentation import Deck

logger = logging.getLogger("slides.cleanup")


def cleanup_slides(deck: Deck, keep_count: int) -> int:
    """Remove slides from the end down to index ``keep_count``. Returns the number removed."""
    if keep_count < 0:
        raise ValueError(f"keep_count must be >= 0, got {keep_count}")

    slides = deck.slides
    removed = 0
    for i in range(len(slides) - 1, keep_count - 1, -1):
        deck.remove_slide(slides[i])
        removed += 1

    logger.info("Cleanup complete. Kept %d slides.", min(keep_count, len(slides)))
    return removed


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Remove generated slides, keeping the leading ones.")
    p.add_argument("--config", type=str, default="config.yaml")
    p.add_argument("--deck", type=str, default=None, help="Deck to clean (default: presentation.output_path)")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    cfg = load_slides_config(args.config)
    setup_logging(cfg.log_level)

    path = Path(args.deck) if args.deck else cfg.output_path
    deck = Deck.open(path)
    removed = cleanup_slides(deck, cfg.keep_count)
    deck.save(path)
    logger.info("Removed %d slides from %s", removed, path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
