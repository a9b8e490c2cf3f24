"""Page citation extraction for list items."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PAGE_KEY = "page"


def extract_page(obj: Mapping[str, Any]) -> tuple[int | None, list[tuple[str, Any]]]:
    """Split a list-item object into its page number and remaining entries.

    The page is only returned when it is a positive integer. The ``page`` key
    is always removed from the remainder, valid or not, so a citation never
    leaks into rendered text. Remaining entries keep the object's key order.
    """

    raw_page = obj.get(PAGE_KEY)
    page: int | None = None
    if isinstance(raw_page, float) and raw_page.is_integer():
        # JSON "12.0" is the same number as 12
        raw_page = int(raw_page)
    if isinstance(raw_page, int) and not isinstance(raw_page, bool) and raw_page > 0:
        page = raw_page
    remainder = [(key, value) for key, value in obj.items() if key != PAGE_KEY]
    return page, remainder


__all__ = ["PAGE_KEY", "extract_page"]
