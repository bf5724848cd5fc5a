from __future__ import annotations

import pytest
from pptx import Presentation

from src.services.presentation import Deck

from conftest import make_deck, slide_texts


def test_get_slide_bounds(tmp_path) -> None:
    deck = Deck.open(make_deck(tmp_path / "d.pptx", [["Title"], ["{{NAME}}"]]))
    assert slide_texts(deck.get_slide(1)) == ["{{NAME}}"]
    for bad in (2, 5, -1):
        with pytest.raises(IndexError, match=f"index {bad}"):
            deck.get_slide(bad)


def test_open_missing_deck(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        Deck.open(tmp_path / "missing.pptx")


def test_duplicate_appends_independent_copy(tmp_path) -> None:
    deck = Deck.open(make_deck(tmp_path / "d.pptx", [["Title"], ["Hello {{NAME}}", "second"], ["Outro"]]))
    template = deck.get_slide(1)

    clone = deck.duplicate_slide(template)

    assert len(deck.slides) == 4
    assert deck.slide_position(clone) == 3
    assert clone.slide_id != template.slide_id
    assert slide_texts(clone) == ["Hello {{NAME}}", "second"]

    clone.shapes[0].text_frame.text = "changed"
    assert slide_texts(template) == ["Hello {{NAME}}", "second"]


def test_duplicate_survives_save_and_reload(tmp_path) -> None:
    deck = Deck.open(make_deck(tmp_path / "d.pptx", [["Title"], ["{{NAME}}"]]))
    deck.duplicate_slide(deck.get_slide(1))
    out = deck.save(tmp_path / "nested" / "out.pptx")

    prs = Presentation(str(out))
    assert [slide_texts(s) for s in prs.slides] == [["Title"], ["{{NAME}}"], ["{{NAME}}"]]


def test_move_slide(tmp_path) -> None:
    deck = Deck.open(make_deck(tmp_path / "d.pptx", [["a"], ["b"], ["c"]]))
    first = deck.get_slide(0)

    deck.move_slide(first, 2)

    assert [slide_texts(s)[0] for s in deck.slides] == ["b", "c", "a"]
    assert deck.slide_position(first) == 2


def test_remove_slide(tmp_path) -> None:
    deck = Deck.open(make_deck(tmp_path / "d.pptx", [["a"], ["b"], ["c"]]))
    deck.remove_slide(deck.get_slide(1))
    out = deck.save(tmp_path / "out.pptx")

    prs = Presentation(str(out))
    assert [slide_texts(s)[0] for s in prs.slides] == ["a", "c"]
