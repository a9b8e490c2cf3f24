"""Tests for highlight extraction."""

from __future__ import annotations

import json

from bookdigest.config import StyleId
from bookdigest.summary import Highlight, HighlightExtractor, parse_document


def test_highlight_count_scenario() -> None:
    raw = json.dumps(
        {
            "overview": "Short summary.",
            "key_insights": [
                {"text": "Systems beat goals", "page": 12},
                {"concept": "Atomic habits", "explanation": "Small changes compound", "page": 30},
            ],
        }
    )
    document = parse_document(raw, StyleId.EXECUTIVE)

    highlights = HighlightExtractor().render(document, "Atomic Habits")

    assert highlights == [
        Highlight(text="Short summary.", note="Executive — Overview"),
        Highlight(text="Systems beat goals", note="Executive — Key Insights", location=12, location_type="page"),
        Highlight(
            text="Atomic habits — Small changes compound",
            note="Executive — Key Insights",
            location=30,
            location_type="page",
        ),
    ]
    assert highlights[0].page is None
    assert highlights[1].page == 12


def test_highlights_strip_markup_and_skip_blanks() -> None:
    raw = json.dumps(
        {
            "overview": "   ",
            "study_questions": ["**Why** does it *work*?", "", "**"],
            "surprising_stat": "**40%** of actions are habits",
        }
    )
    document = parse_document(raw, StyleId.STUDY)

    highlights = HighlightExtractor().render(document)

    assert [h.text for h in highlights] == ["Why does it work?", "40% of actions are habits"]
    assert highlights[1].note == "Study — Surprising Stat"


def test_empty_document_yields_no_highlights() -> None:
    document = parse_document(json.dumps({"title": "Only a title", "weekly_habits": []}), StyleId.ACTION)

    assert HighlightExtractor().render(document) == []


def test_payload_shape() -> None:
    cited = Highlight(text="t", note="n", location=4, location_type="page")
    uncited = Highlight(text="t", note="n")

    assert cited.to_payload(title="Book") == {
        "text": "t",
        "title": "Book",
        "source_type": "books",
        "note": "n",
        "location": 4,
        "location_type": "page",
    }
    assert uncited.to_payload(title="Book", source_type="articles") == {
        "text": "t",
        "title": "Book",
        "source_type": "articles",
        "note": "n",
    }


def test_failed_parse_yields_no_highlights() -> None:
    assert HighlightExtractor().render(parse_document("not json", StyleId.EXECUTIVE), "Book") == []
