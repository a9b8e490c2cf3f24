"""Tests for the narration script."""

from __future__ import annotations

import json

from bookdigest.config import StyleId
from bookdigest.summary import SpeechRenderer, parse_document

EXPECTED = (
    "Atomic Habits. Executive summary. "
    "Overview. Small habits compound. They add up over years. "
    "Key Insights. Systems beat goals. Source: page 12. "
    "Atomic habits. Small changes compound. Source: page 30. "
    "Identity drives behavior. "
    "Core Message. Focus on systems, not goals. "
    "Surprising Stat. 1% better every day. "
    "Weekly Habits."
)


def test_speech_script(executive_json: str) -> None:
    document = parse_document(executive_json, StyleId.EXECUTIVE)

    assert SpeechRenderer().render(document, "Atomic Habits") == EXPECTED


def test_speech_never_contains_markup() -> None:
    raw = json.dumps(
        {
            "overview": "***Very*** important `code` and [a link](https://example.com)",
            "main_concepts": [{"concept": "**Bold**", "explanation": "*it*", "page": 2}],
            "study_questions": ["Why *this*?"],
        }
    )
    document = parse_document(raw, StyleId.STUDY)

    script = SpeechRenderer().render(document, "**Starred** title")

    assert "*" not in script
    assert "`" not in script
    assert "https://" not in script
    assert script.startswith("Starred title. Study summary.")
    assert "Why this?" in script


def test_speech_skips_empty_lists_and_pageless_items() -> None:
    raw = json.dumps({"immediate_actions": [], "weekly_habits": [{"text": "Review on Sunday"}]})
    document = parse_document(raw, StyleId.ACTION)

    script = SpeechRenderer().render(document, "Book")

    assert script == "Book. Action summary. Immediate Actions. Weekly Habits. Review on Sunday."
    assert "Source" not in script


def test_speech_is_idempotent(executive_json: str) -> None:
    document = parse_document(executive_json, StyleId.EXECUTIVE)
    renderer = SpeechRenderer()

    assert renderer.render(document, "A") == renderer.render(document, "A")


def test_speech_declines_failed_parse() -> None:
    assert SpeechRenderer().render(parse_document("{", StyleId.EXECUTIVE), "Book") is None


def test_speech_drops_block_markdown() -> None:
    raw = json.dumps(
        {
            "overview": "# Heading\n- bullet one\n> quote _em_ ~~x~~",
            "study_questions": ["1. Why does it work?", "## Part two"],
        }
    )
    document = parse_document(raw, StyleId.STUDY)

    script = SpeechRenderer().render(document, "T")

    assert script == (
        "T. Study summary. Overview. Heading bullet one quote em x. "
        "Study Questions. Why does it work? Part two."
    )
    for marker in ("#", "- ", ">", "_", "~"):
        assert marker not in script


def test_speech_keeps_snake_case_and_numbers() -> None:
    raw = json.dumps({"overview": "Use key_value pairs; 2. is not a list here and 1% matters"})

    script = SpeechRenderer().render(parse_document(raw, StyleId.EXECUTIVE), "T")

    assert "key_value pairs; 2. is not a list here and 1% matters." in script
