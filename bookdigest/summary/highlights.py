"""Flatten a document into atomic highlights for third-party import."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .markup import strip_emphasis
from .models import ParseFailure, ScalarText, SummaryDocument
from .renderer import BaseRenderer

PART_SEPARATOR = " — "


@dataclass(frozen=True, slots=True)
class Highlight:
    """One quote-like unit; ``location`` is a page number when known."""

    text: str
    note: str
    location: int | None = None
    location_type: str | None = None

    @property
    def page(self) -> int | None:
        return self.location if self.location_type == "page" else None

    def to_payload(self, *, title: str, source_type: str = "books") -> dict[str, Any]:
        """JSON-ready object in the shape the highlight import API expects."""

        payload: dict[str, Any] = {
            "text": self.text,
            "title": title,
            "source_type": source_type,
            "note": self.note,
        }
        if self.location is not None:
            payload["location"] = self.location
            payload["location_type"] = self.location_type
        return payload


def _clean(text: str) -> str:
    return strip_emphasis(text).strip()


class HighlightExtractor(BaseRenderer):
    """One highlight per scalar field and one per list item.

    An empty result is valid and means there is nothing to export.
    """

    def render(self, document: SummaryDocument | ParseFailure, title: str | None = None) -> list[Highlight]:
        if self._declines(document):
            return []
        style_label = self.registry.style_label(document.style)
        highlights: list[Highlight] = []

        for entry in document.fields:
            note = f"{style_label}{PART_SEPARATOR}{self.registry.label(entry.key)}"
            if isinstance(entry.value, ScalarText):
                text = _clean(entry.value.text)
                if text:
                    highlights.append(Highlight(text=text, note=note))
                continue
            for item in entry.value.items:
                text = PART_SEPARATOR.join(part for part in (_clean(value) for value in item.values()) if part)
                if not text:
                    continue
                if item.page is not None:
                    highlights.append(Highlight(text=text, note=note, location=item.page, location_type="page"))
                else:
                    highlights.append(Highlight(text=text, note=note))

        return highlights

    extract = render


__all__ = ["Highlight", "HighlightExtractor", "PART_SEPARATOR"]
