"""View model for the interactive summary viewer.

The viewer itself lives in the UI layer; this module gives it the same
labels, citations and field order the other projections use, plus the
expand/collapse and copy affordances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal

from .labels import Registry
from .markup import paragraphs
from .models import MultiPartCited, ParseFailure, ScalarText, SummaryDocument, is_blank_item
from .renderer import item_markdown, list_markdown, scalar_markdown

FALLBACK_MESSAGE = "Could not load summary content."


@dataclass(frozen=True, slots=True)
class ItemView:
    headline: str
    body: str
    page: int | None
    emphasized: bool
    markdown: str


@dataclass(frozen=True, slots=True)
class SectionView:
    key: str
    label: str
    kind: Literal["scalar", "list"]
    paragraphs: tuple[str, ...] = ()
    items: tuple[ItemView, ...] = ()
    copy_text: str = ""


@dataclass(frozen=True, slots=True)
class SummaryView:
    title: str
    style_label: str
    style_emoji: str
    sections: tuple[SectionView, ...]


def _item_view(item) -> ItemView:
    if isinstance(item, MultiPartCited):
        return ItemView(
            headline=item.headline,
            body=" ".join(item.rest),
            page=item.page,
            emphasized=True,
            markdown=item_markdown(item),
        )
    return ItemView(headline="", body=item.text, page=item.page, emphasized=False, markdown=item_markdown(item))


def build_view(
    document: SummaryDocument | ParseFailure, title: str, registry: Registry | None = None
) -> SummaryView | None:
    """Project ``document`` into sections ready for display.

    Returns ``None`` for a failed parse; the viewer then shows
    :func:`fallback_message` instead.
    """

    if isinstance(document, ParseFailure):
        return None
    registry = registry or Registry()
    style = registry.styles.info(document.style)
    sections: list[SectionView] = []
    for entry in document.fields:
        label = registry.label(entry.key)
        if isinstance(entry.value, ScalarText):
            sections.append(
                SectionView(
                    key=entry.key,
                    label=label,
                    kind="scalar",
                    paragraphs=tuple(paragraphs(entry.value.text)),
                    copy_text=section_copy_text(label, scalar_markdown(entry.value.text)),
                )
            )
        else:
            items = tuple(_item_view(item) for item in entry.value.items if not is_blank_item(item))
            sections.append(
                SectionView(
                    key=entry.key,
                    label=label,
                    kind="list",
                    items=items,
                    copy_text=section_copy_text(label, list_markdown(entry.value)),
                )
            )
    return SummaryView(title=title, style_label=style.label, style_emoji=style.emoji, sections=tuple(sections))


def section_copy_text(label: str, body: str) -> str:
    """Clipboard text for one section."""

    return f"## {label}\n\n{body}".rstrip() + "\n"


def fallback_message(failure: ParseFailure) -> str:
    """What the viewer shows instead of sections when parsing failed."""

    return failure.raw_text if failure.raw_text.strip() else FALLBACK_MESSAGE


@dataclass(slots=True)
class ViewerState:
    """Expand/collapse state of one summary card.

    Collapsing, or switching to another style tab, fires ``on_dismiss`` so
    the owner can cancel narration.
    """

    active_style: str | None = None
    expanded: bool = False
    open_sections: set[str] = field(default_factory=set)
    on_dismiss: Callable[[], None] | None = None

    def toggle(self) -> bool:
        self.expanded = not self.expanded
        if not self.expanded:
            self._dismiss()
        return self.expanded

    def collapse_all(self) -> None:
        self.expanded = False
        self.open_sections.clear()
        self._dismiss()

    def select_style(self, style: str) -> None:
        if style != self.active_style:
            self.active_style = style
            self._dismiss()

    def toggle_section(self, key: str) -> bool:
        if key in self.open_sections:
            self.open_sections.discard(key)
            return False
        self.open_sections.add(key)
        return True

    def _dismiss(self) -> None:
        if self.on_dismiss is not None:
            self.on_dismiss()


__all__ = [
    "FALLBACK_MESSAGE",
    "ItemView",
    "SectionView",
    "SummaryView",
    "ViewerState",
    "build_view",
    "fallback_message",
    "section_copy_text",
]
