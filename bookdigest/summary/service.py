"""High-level entry points that turn stored summaries into each projection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger

from bookdigest.config import RegistryConfig

from .highlights import Highlight, HighlightExtractor
from .labels import Registry
from .language import detect_document_language
from .models import ParseFailure, SummaryDocument, SummaryRecord
from .parser import parse_document, resolve_title
from .renderer import MarkdownRenderer, PrintHtmlRenderer, download_filename
from .speech import SpeechRenderer
from .viewer import SummaryView, build_view, fallback_message


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"
    SPEECH = "speech"
    HIGHLIGHTS = "highlights"
    VIEW = "view"


@dataclass(slots=True)
class RenderOutcome:
    """Rendered body, or the message/raw text to show when parsing failed."""

    ok: bool
    body: Any
    message: str = ""
    filename: str | None = None


class SummaryService:
    """Parse once per call and hand the document to the requested renderer."""

    def __init__(self, registry: RegistryConfig | Registry | None = None) -> None:
        if isinstance(registry, Registry):
            self._registry = registry
        else:
            self._registry = Registry(registry)
        self._markdown = MarkdownRenderer(self._registry)
        self._html = PrintHtmlRenderer(self._registry)
        self._speech = SpeechRenderer(self._registry)
        self._highlights = HighlightExtractor(self._registry)

    @property
    def registry(self) -> Registry:
        return self._registry

    def parse(self, record: SummaryRecord) -> tuple[SummaryDocument | ParseFailure, str]:
        document = parse_document(record.content, record.style)
        if isinstance(document, ParseFailure):
            logger.warning("Summary ({}) for '{}' could not be parsed: {}", record.style.value, record.file_name, document.reason)
        return document, resolve_title(document, record.file_name)

    def to_markdown(self, record: SummaryRecord) -> str:
        """Markdown body; falls back to the raw content when parsing fails."""

        document, title = self.parse(record)
        if isinstance(document, ParseFailure):
            return record.content
        return self._markdown.render(document, title)

    def to_html(self, record: SummaryRecord) -> str | None:
        document, title = self.parse(record)
        if isinstance(document, ParseFailure):
            return None
        return self._html.render(document, title, lang=detect_document_language(document))

    def to_speech(self, record: SummaryRecord) -> str:
        """Narration script; just the title when parsing fails."""

        document, title = self.parse(record)
        if isinstance(document, ParseFailure):
            return title
        return self._speech.render(document, title)

    def to_highlights(self, record: SummaryRecord) -> tuple[list[Highlight], str]:
        """Highlights plus the title they belong to; no highlights when parsing fails."""

        document, title = self.parse(record)
        if isinstance(document, ParseFailure):
            return [], title
        return self._highlights.render(document, title), title

    def view(self, record: SummaryRecord) -> SummaryView | str:
        """View model, or the fallback text to display instead."""

        document, title = self.parse(record)
        if isinstance(document, ParseFailure):
            return fallback_message(document)
        return build_view(document, title, self._registry)

    def detect_language(self, record: SummaryRecord) -> str:
        document, _ = self.parse(record)
        return detect_document_language(document)

    def render(self, record: SummaryRecord, fmt: OutputFormat | str) -> RenderOutcome:
        """Render ``record`` in ``fmt``; a failed parse becomes a value, not an error."""

        fmt = OutputFormat(fmt)
        document, title = self.parse(record)
        if isinstance(document, ParseFailure):
            return RenderOutcome(ok=False, body=record.content, message=f"Could not parse summary: {document.reason}")

        if fmt is OutputFormat.MARKDOWN:
            return RenderOutcome(
                ok=True,
                body=self._markdown.render(document, title),
                filename=download_filename(title, record.style.value),
            )
        if fmt is OutputFormat.HTML:
            return RenderOutcome(ok=True, body=self._html.render(document, title, lang=detect_document_language(document)))
        if fmt is OutputFormat.SPEECH:
            return RenderOutcome(ok=True, body=self._speech.render(document, title))
        if fmt is OutputFormat.HIGHLIGHTS:
            highlights = self._highlights.render(document, title)
            if not highlights:
                return RenderOutcome(ok=True, body=[], message="No highlights to export")
            return RenderOutcome(ok=True, body=[highlight.to_payload(title=title) for highlight in highlights])
        return RenderOutcome(ok=True, body=build_view(document, title, self._registry))


__all__ = ["OutputFormat", "RenderOutcome", "SummaryService"]
