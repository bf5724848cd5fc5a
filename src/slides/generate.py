"""
Per-name slide generation: clone the template, put it last, fill in the name.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, Sequence

from pptx.slide import Slide

from src.services.presentation import Deck

logger = logging.getLogger("slides.generate")

PLACEHOLDERS = ("{{NAME}}", "{{name}}", "[NAME]", "[name]", "NAME_PLACEHOLDER")


def _replace_in_paragraph(paragraph, tokens: Sequence[str], name: str) -> bool:
    if not any(t in paragraph.text for t in tokens):
        return False

    # run by run first, so each run keeps its own formatting
    for run in paragraph.runs:
        text = run.text
        for token in tokens:
            text = text.replace(token, name)
        if text != run.text:
            run.text = text

    # a token split across runs: rewrite the paragraph using the first run's formatting
    if any(t in paragraph.text for t in tokens):
        text = paragraph.text
        for token in tokens:
            text = text.replace(token, name)
        rPr = paragraph.runs[0]._r.rPr if paragraph.runs else None
        paragraph.text = text
        if rPr is not None:
            for run in paragraph.runs:
                run._r.insert(0, copy.deepcopy(rPr))
    return True


def replace_placeholder_text(slide: Slide, name: Any, placeholders: Iterable[str] = PLACEHOLDERS) -> int:
    """Replace every placeholder token with ``name`` in each text-bearing shape. Returns shapes changed."""
    tokens = list(placeholders)
    text = str(name)
    changed = 0
    for shape in slide.shapes:
        if not shape.has_text_frame:
            continue
        hit = False
        for paragraph in shape.text_frame.paragraphs:
            hit = _replace_in_paragraph(paragraph, tokens, text) or hit
        if hit:
            changed += 1
    return changed


def create_slide_for_name(
    deck: Deck,
    template: Slide,
    name: Any,
    slide_number: int,
    placeholders: Iterable[str] = PLACEHOLDERS,
) -> Slide:
    new_slide = deck.duplicate_slide(template)
    deck.move_slide(new_slide, len(deck.slides) - 1)
    replace_placeholder_text(new_slide, name, placeholders)
    logger.info("Created slide %d for: %s", slide_number, name)
    return new_slide
