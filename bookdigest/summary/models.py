"""Canonical data model for AI-generated summary documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from bookdigest.config.registry import StyleId


@dataclass(frozen=True, slots=True)
class PlainString:
    """Bare string list item (oldest prompt schema)."""

    text: str
    coerced: bool = field(default=False, compare=False)

    @property
    def page(self) -> int | None:
        return None

    def values(self) -> tuple[str, ...]:
        return (self.text,)

    def string_values(self) -> tuple[str, ...]:
        return () if self.coerced else (self.text,)


@dataclass(frozen=True, slots=True)
class SimpleCited:
    """``{"text": ..., "page": N}`` list item."""

    text: str
    page: int | None = None
    coerced: bool = field(default=False, compare=False)

    def values(self) -> tuple[str, ...]:
        return (self.text,)

    def string_values(self) -> tuple[str, ...]:
        return () if self.coerced else (self.text,)


@dataclass(frozen=True, slots=True)
class Part:
    """One labelled value of a multi-part list item."""

    label: str | None
    value: str
    coerced: bool = field(default=False, compare=False)


@dataclass(frozen=True, slots=True)
class MultiPartCited:
    """Object list item with several keys, e.g. ``concept`` / ``explanation``.

    The first part is the headline; the remaining parts elaborate on it.
    """

    parts: tuple[Part, ...]
    page: int | None = None

    @property
    def headline(self) -> str:
        return self.parts[0].value if self.parts else ""

    @property
    def rest(self) -> tuple[str, ...]:
        return tuple(part.value for part in self.parts[1:])

    def values(self) -> tuple[str, ...]:
        return tuple(part.value for part in self.parts)

    def string_values(self) -> tuple[str, ...]:
        return tuple(part.value for part in self.parts if not part.coerced)


ListItem = Union[PlainString, SimpleCited, MultiPartCited]


@dataclass(frozen=True, slots=True)
class ScalarText:
    """Single prose value, possibly containing ``**bold**`` markup.

    ``coerced`` marks text converted from a non-string JSON value.
    """

    text: str
    coerced: bool = field(default=False, compare=False)


@dataclass(frozen=True, slots=True)
class ItemList:
    """Ordered list of items; an empty list is valid and renders as nothing."""

    items: tuple[ListItem, ...] = ()


FieldValue = Union[ScalarText, ItemList]


@dataclass(frozen=True, slots=True)
class SummaryField:
    """A named section of a summary document."""

    key: str
    value: FieldValue


@dataclass(frozen=True, slots=True)
class SummaryDocument:
    """Normalized summary: style, optional title and fields in source order."""

    style: StyleId
    title: str | None = None
    fields: tuple[SummaryField, ...] = ()

    def keys(self) -> list[str]:
        return [entry.key for entry in self.fields]

    def get(self, key: str) -> FieldValue | None:
        for entry in self.fields:
            if entry.key == key:
                return entry.value
        return None


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Returned instead of a document when the raw text is not a JSON object."""

    raw_text: str
    reason: str


@dataclass(frozen=True, slots=True)
class SummaryRecord:
    """A stored summary as handed over by the document source."""

    style: StyleId
    content: str
    file_name: str = ""
    created_at: datetime | None = None


def is_blank_item(item: ListItem) -> bool:
    """True when an item carries no text at all (e.g. a page-only object)."""

    return not any(value.strip() for value in item.values())


__all__ = [
    "FieldValue",
    "ItemList",
    "ListItem",
    "MultiPartCited",
    "ParseFailure",
    "Part",
    "PlainString",
    "ScalarText",
    "SimpleCited",
    "SummaryDocument",
    "SummaryField",
    "SummaryRecord",
    "is_blank_item",
]
