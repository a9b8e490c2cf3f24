"""Summary document model and its rendered projections."""

from __future__ import annotations

from .citations import extract_page
from .highlights import Highlight, HighlightExtractor
from .labels import LabelResolver, Registry, resolve_label
from .language import detect_language, suggested_questions
from .models import (
    ItemList,
    MultiPartCited,
    ParseFailure,
    Part,
    PlainString,
    ScalarText,
    SimpleCited,
    SummaryDocument,
    SummaryField,
    SummaryRecord,
)
from .parser import parse_document, resolve_title
from .renderer import MarkdownRenderer, PrintHtmlRenderer, download_filename
from .service import OutputFormat, RenderOutcome, SummaryService
from .speech import SpeechRenderer
from .viewer import SummaryView, ViewerState, build_view

__all__ = [
    "Highlight",
    "HighlightExtractor",
    "ItemList",
    "LabelResolver",
    "MarkdownRenderer",
    "MultiPartCited",
    "OutputFormat",
    "ParseFailure",
    "Part",
    "PlainString",
    "PrintHtmlRenderer",
    "Registry",
    "RenderOutcome",
    "ScalarText",
    "SimpleCited",
    "SpeechRenderer",
    "SummaryDocument",
    "SummaryField",
    "SummaryRecord",
    "SummaryService",
    "SummaryView",
    "ViewerState",
    "build_view",
    "detect_language",
    "download_filename",
    "extract_page",
    "parse_document",
    "resolve_label",
    "resolve_title",
    "suggested_questions",
]
