from __future__ import annotations

import json

import pytest

from bookdigest.config import StyleId
from bookdigest.summary import detect_language, parse_document, suggested_questions
from bookdigest.summary.language import CHAT_SUGGESTIONS, classify, document_text


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"overview": "This book explains how small habits compound."}, "en"),
        ({"overview": "Kirja kertoo, että pienet tavat ovat tärkeitä."}, "fi"),
        ({"overview": "Das Buch zeigt, wie kleine Gewohnheiten wirken."}, "de"),
        ({"overview": "Große Wirkung"}, "de"),
        ({"overview": "Le livre montre comment les petites habitudes changent tout."}, "fr"),
        ({"overview": "El libro explica cómo los hábitos pequeños cambian todo."}, "es"),
        ({"overview": "Boken visar hur små vanor förändrar allt."}, "sv"),
        ({"overview": "Boken viser hvordan små vaner er viktig for leseren og gjør forskjell."}, "no"),
        ({"overview": "Bogen viser hvordan små vaner er vigtig for læseren."}, "da"),
        ({"overview": "Små vaner gør forskel"}, "no"),
    ],
)
def test_detect_language_rules(payload: dict, expected: str) -> None:
    assert detect_language(json.dumps(payload, ensure_ascii=False)) == expected


def test_detect_language_reads_list_items() -> None:
    raw = json.dumps({"key_insights": [{"text": "Die Gewohnheit ist wichtig", "page": 3}]}, ensure_ascii=False)

    assert detect_language(raw) == "de"


def test_detect_language_is_total() -> None:
    assert detect_language("") == "en"
    assert detect_language("not json und mehr") == "de"
    assert detect_language("[1, 2, 3]") == "en"


def test_only_first_800_characters_are_sampled() -> None:
    raw = json.dumps({"overview": "x " * 500 + " und das"})

    assert detect_language(raw) == "en"


def test_classify_defaults_to_english() -> None:
    assert classify("") == "en"


def test_suggested_questions_match_language() -> None:
    raw = json.dumps({"overview": "Le livre est très utile pour les lecteurs."}, ensure_ascii=False)

    assert suggested_questions(raw) == CHAT_SUGGESTIONS["fr"]
    assert suggested_questions("{}") == CHAT_SUGGESTIONS["en"]


def test_only_string_values_are_sampled() -> None:
    raw = json.dumps(
        {
            "overview": "This is an English summary.",
            "meta": {"note": "und das ist"},
            "key_insights": [{"concept": "Habits", "extra": {"de": "und das ist"}}, 42, None],
        }
    )

    assert detect_language(raw) == "en"


def test_nested_values_still_render_but_do_not_vote() -> None:
    raw = json.dumps({"meta": {"note": "und das ist"}})
    document = parse_document(raw, StyleId.EXECUTIVE)

    assert document.get("meta").text == '{"note": "und das ist"}'
    assert document_text(document) == ""
