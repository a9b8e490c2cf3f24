from __future__ import annotations

import pytest

from bookdigest.summary import extract_page


def test_extract_page_returns_page_and_ordered_remainder() -> None:
    page, remainder = extract_page({"concept": "Flow", "page": 9, "explanation": "Deep focus"})

    assert page == 9
    assert remainder == [("concept", "Flow"), ("explanation", "Deep focus")]


def test_extract_page_without_page() -> None:
    page, remainder = extract_page({"text": "No citation"})

    assert page is None
    assert remainder == [("text", "No citation")]


@pytest.mark.parametrize("bad_page", ["12", None, True, 0, -3, 4.5, [1]])
def test_invalid_page_is_dropped_not_leaked(bad_page: object) -> None:
    page, remainder = extract_page({"text": "Insight", "page": bad_page})

    assert page is None
    assert remainder == [("text", "Insight")]


def test_integral_float_page_is_accepted() -> None:
    page, _ = extract_page({"text": "Insight", "page": 12.0})

    assert page == 12
    assert isinstance(page, int)
