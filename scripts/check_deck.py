"""
Check a generated deck for slides that still carry placeholder tokens.

Slides after presentation.keep_count are the generated ones; any of them
still holding a configured placeholder means a replacement was missed.

Needs the project importable (pip install -e .), then from the repo root:
  python scripts/check_deck.py --config config.yaml [--deck report/name_deck.pptx]
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from pptx import Presentation

from src.common.config import load_slides_config


def slide_text(slide) -> str:
    parts = []
    for sh in slide.shapes:
        if hasattr(sh, "text") and sh.text:
            parts.append(sh.text)
    return "\n".join(parts)


def titleish(text: str) -> str:
    for line in text.splitlines():
        line = line.strip()
        if line:
            return line[:80]
    return ""


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Report generated slides with leftover placeholder tokens.")
    p.add_argument("--config", type=str, default="config.yaml")
    p.add_argument("--deck", type=str, default=None, help="Deck to check (default: presentation.output_path)")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_slides_config(args.config)
    pptx_path = Path(args.deck) if args.deck else cfg.output_path
    if not pptx_path.exists():
        print(f"ERROR: missing deck: {pptx_path}")
        return 2

    p = Presentation(str(pptx_path))
    leftover = []
    for i, slide in enumerate(p.slides, 1):
        if i <= cfg.keep_count:
            continue
        txt = slide_text(slide)
        if any(token in txt for token in cfg.placeholders):
            leftover.append((i, titleish(txt)))

    print(f"slides={len(p.slides)}")
    print(f"generated={max(len(p.slides) - cfg.keep_count, 0)}")
    print(f"slides_with_placeholders={len(leftover)}")
    if leftover:
        print("leftover placeholders (index, title-ish):")
        for idx, t in leftover[:50]:
            print(f"  {idx:02d}: {t}")
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
