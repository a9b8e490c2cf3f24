"""Inline emphasis handling shared by the renderers."""

from __future__ import annotations

import re

from markupsafe import Markup, escape

_STRONG = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
_EM = re.compile(r"(?<![\w*])\*(?!\s)(.+?)(?<!\s)\*(?![\w*])", re.DOTALL)
_LINK = re.compile(r"\[([^\]]+)\]\([^)]*\)")
_BLOCK_MARKER = re.compile(r"^[ \t]*(?:#{1,6}|[-+*]|\d+\.|>+)[ \t]+", re.MULTILINE)
_UNDERSCORE_EM = re.compile(r"(?<![\w_])_(?!\s)(.+?)(?<!\s)_(?![\w_])", re.DOTALL)
_WHITESPACE = re.compile(r"\s+")


def strip_emphasis(text: str) -> str:
    """Remove ``**``/``*`` markers, as done for highlight export."""

    return text.replace("**", "").replace("*", "")


def to_plain_speech(text: str) -> str:
    """Reduce Markdown-flavoured text to something a voice can read aloud.

    Line-leading headings, bullets, numbered markers and quotes are dropped,
    as are emphasis, strike-through and code markers; links keep their text.
    """

    text = _BLOCK_MARKER.sub("", text)
    text = _LINK.sub(r"\1", text)
    text = strip_emphasis(text).replace("__", "").replace("~~", "").replace("`", "")
    text = _UNDERSCORE_EM.sub(r"\1", text)
    return _WHITESPACE.sub(" ", text).strip()


def emphasis_to_html(text: str) -> Markup:
    """Escape ``text`` and turn ``**bold**``/``*italic*`` into tags."""

    escaped = str(escape(text))
    escaped = _STRONG.sub(r"<strong>\1</strong>", escaped)
    escaped = _EM.sub(r"<em>\1</em>", escaped)
    return Markup(escaped)


def paragraphs(text: str) -> list[str]:
    """Split scalar text into its non-empty lines."""

    return [line.strip() for line in text.splitlines() if line.strip()]


__all__ = ["emphasis_to_html", "paragraphs", "strip_emphasis", "to_plain_speech"]
