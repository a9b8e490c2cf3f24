"""Turn raw summary JSON into a :class:`SummaryDocument`.

Generated documents come from several historical prompt schemas, so list
items arrive in three shapes: bare strings, ``{"text", "page"}`` objects and
multi-key objects such as ``{"concept", "explanation", "page"}``. The shape is
decided here, once; renderers only ever see the tagged variants.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from loguru import logger

from bookdigest.config.registry import StyleId

from .citations import extract_page
from .models import (
    ItemList,
    ListItem,
    MultiPartCited,
    ParseFailure,
    Part,
    PlainString,
    ScalarText,
    SimpleCited,
    SummaryDocument,
    SummaryField,
)

TITLE_KEY = "title"


def to_text(value: Any) -> str:
    """String conversion that matches how JSON values read in prose."""

    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def parse_document(raw_text: str, style: StyleId | str) -> SummaryDocument | ParseFailure:
    """Decode ``raw_text`` and normalize it.

    Bad content never raises; it comes back as a :class:`ParseFailure`. An
    unknown ``style`` is a caller error and raises :class:`ValueError` before
    the content is looked at.
    """

    style = StyleId(style)
    try:
        payload = json.loads(raw_text)
    except (TypeError, ValueError) as exc:
        logger.debug("Summary content is not valid JSON: {}", exc)
        return ParseFailure(raw_text=raw_text if isinstance(raw_text, str) else str(raw_text), reason=f"invalid JSON: {exc}")
    if not isinstance(payload, Mapping):
        logger.debug("Summary content top level is {}, expected an object", type(payload).__name__)
        return ParseFailure(raw_text=raw_text, reason=f"top-level JSON value is {type(payload).__name__}, not an object")

    title: str | None = None
    fields: list[SummaryField] = []
    for key, value in payload.items():
        if key == TITLE_KEY:
            if isinstance(value, str) and value.strip():
                title = value
            continue
        fields.append(SummaryField(key=key, value=_normalize_value(key, value)))

    return SummaryDocument(style=style, title=title, fields=tuple(fields))


def _normalize_value(key: str, value: Any) -> ScalarText | ItemList:
    if isinstance(value, list):
        return ItemList(items=tuple(_normalize_item(key, index, item) for index, item in enumerate(value)))
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        logger.warning("Field '{}' holds a {}; rendering it as text", key, type(value).__name__)
    return ScalarText(text=to_text(value), coerced=not isinstance(value, str))


def _normalize_item(key: str, index: int, item: Any) -> ListItem:
    if isinstance(item, str):
        return PlainString(text=item)
    if isinstance(item, Mapping):
        page, remainder = extract_page(item)
        if len(remainder) == 1 and remainder[0][0] == "text":
            text = remainder[0][1]
            return SimpleCited(text=to_text(text), page=page, coerced=not isinstance(text, str))
        parts = tuple(
            Part(label=label, value=to_text(part), coerced=not isinstance(part, str)) for label, part in remainder
        )
        if not parts:
            logger.warning("Item {} of field '{}' has no text besides its page", index, key)
        return MultiPartCited(parts=parts, page=page)
    logger.warning(
        "Item {} of field '{}' is a {}, not a string or object; coercing to text",
        index,
        key,
        type(item).__name__,
    )
    return PlainString(text=to_text(item), coerced=True)


def resolve_title(document: SummaryDocument | ParseFailure, fallback: str) -> str:
    """Document title, or ``fallback`` (the uploaded file name) when absent."""

    if isinstance(document, SummaryDocument) and document.title:
        return document.title
    return fallback


def is_parse_failure(value: object) -> bool:
    return isinstance(value, ParseFailure)


__all__ = ["TITLE_KEY", "is_parse_failure", "parse_document", "resolve_title", "to_text"]
