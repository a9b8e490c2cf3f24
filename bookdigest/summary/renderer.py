"""Markdown and printable HTML projections of a summary document."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from jinja2 import BaseLoader, Environment
from loguru import logger
from markupsafe import Markup

from .labels import Registry
from .markup import emphasis_to_html, paragraphs
from .models import (
    ItemList,
    ListItem,
    MultiPartCited,
    ParseFailure,
    ScalarText,
    SimpleCited,
    SummaryDocument,
    is_blank_item,
)


class BaseRenderer:
    """Common plumbing: registry access and the failed-parse check.

    A :class:`ParseFailure` is a normal per-document state, so renderers
    decline it with an empty value instead of raising.
    """

    def __init__(self, registry: Registry | None = None) -> None:
        self._registry = registry or Registry()

    @property
    def registry(self) -> Registry:
        return self._registry

    @staticmethod
    def _declines(document: SummaryDocument | ParseFailure) -> bool:
        if isinstance(document, ParseFailure):
            logger.debug("Not rendering a summary that failed to parse: {}", document.reason)
            return True
        return False


def citation_markdown(page: int | None) -> str:
    return f" *(p. {page})*" if page is not None else ""


def item_markdown(item: ListItem) -> str:
    """One list item as Markdown text, without the bullet marker."""

    if isinstance(item, MultiPartCited):
        body = f"**{item.headline}**" if item.headline.strip() else ""
        rest = " ".join(value for value in item.rest if value.strip())
        if rest:
            body = f"{body} — {rest}" if body else rest
        return body + citation_markdown(item.page)
    if isinstance(item, SimpleCited):
        return item.text + citation_markdown(item.page)
    return item.text


def scalar_markdown(text: str) -> str:
    """Newlines in scalar text become paragraph breaks."""

    return "\n\n".join(paragraphs(text))


def list_markdown(value: ItemList) -> str:
    return "\n".join(f"- {item_markdown(item)}" for item in value.items if not is_blank_item(item))


_MARKDOWN_TEMPLATE = """# {{ title }}
*{{ style_label }} Summary — {{ brand }}*
{% for section in sections %}

## {{ section.label }}
{% if section.body %}

{{ section.body }}
{% endif %}
{% endfor %}
"""


class MarkdownRenderer(BaseRenderer):
    """Render a document into a downloadable ``.md`` body."""

    def __init__(self, registry: Registry | None = None, template: str | None = None) -> None:
        super().__init__(registry)
        env = Environment(loader=BaseLoader(), autoescape=False, trim_blocks=True, lstrip_blocks=True)
        self._template = env.from_string(template or _MARKDOWN_TEMPLATE)

    def render(self, document: SummaryDocument | ParseFailure, title: str) -> str | None:
        """Markdown body, or ``None`` for a failed parse."""

        if self._declines(document):
            return None
        sections = []
        for entry in document.fields:
            if isinstance(entry.value, ScalarText):
                body = scalar_markdown(entry.value.text)
            else:
                body = list_markdown(entry.value)
            sections.append({"label": self.registry.label(entry.key), "body": body})
        rendered = self._template.render(
            title=title,
            style_label=self.registry.style_label(document.style),
            brand=self.registry.brand,
            sections=sections,
        )
        return rendered.strip() + "\n"


@dataclass(slots=True)
class _HtmlItem:
    headline: Markup | None
    body: Markup
    page: int | None


@dataclass(slots=True)
class _HtmlSection:
    label: str
    kind: str
    lines: list[Markup] = field(default_factory=list)
    items: list[_HtmlItem] = field(default_factory=list)


_PRINT_CSS = """\
body{font-family:Georgia,serif;max-width:680px;margin:40px auto;color:#111;font-size:15px;line-height:1.7}
h1{font-size:22px;margin-bottom:2px}
.subtitle{color:#666;font-size:12px;margin-bottom:32px}
h2{font-size:14px;font-weight:700;margin-top:28px;margin-bottom:8px;text-transform:uppercase;letter-spacing:.05em;color:#333;border-bottom:1px solid #eee;padding-bottom:4px}
ul{margin:0;padding-left:20px}li{margin-bottom:6px}
.page{display:inline-block;margin-left:6px;padding:1px 5px;font-size:10px;font-weight:600;border-radius:4px;background:#f5edd8;color:#8a6820;border:1px solid #e8d5a0;white-space:nowrap}
p{margin:0}@media print{body{margin:20px}}"""

_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
{{ css }}
</style>
</head>
<body>
<h1>{{ title }}</h1>
<p class="subtitle">{% if emoji %}{{ emoji }} {% endif %}{{ style_label }} Summary · {{ brand }}</p>
{% for section in sections %}
<h2>{{ section.label }}</h2>
{% if section.kind == "scalar" %}
{% if section.lines %}
<p>{% for line in section.lines %}{% if not loop.first %}<br>{% endif %}{{ line }}{% endfor %}</p>
{% endif %}
{% elif section.items %}
<ul>
{% for item in section.items %}
<li>{% if item.headline is not none %}<strong>{{ item.headline }}</strong>{% if item.body %} — {% endif %}{% endif %}{{ item.body }}{% if item.page is not none %} <span class="page">p.&nbsp;{{ item.page }}</span>{% endif %}</li>
{% endfor %}
</ul>
{% endif %}
{% endfor %}
</body>
</html>
"""


class PrintHtmlRenderer(BaseRenderer):
    """Render a self-contained HTML document for the browser print dialog."""

    def __init__(self, registry: Registry | None = None) -> None:
        super().__init__(registry)
        env = Environment(loader=BaseLoader(), autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._template = env.from_string(_HTML_TEMPLATE)

    def render(self, document: SummaryDocument | ParseFailure, title: str, *, lang: str = "en") -> str | None:
        if self._declines(document):
            return None
        style = self.registry.styles.info(document.style)
        sections = [self._section(entry.key, entry.value) for entry in document.fields]
        return self._template.render(
            lang=lang,
            title=title,
            css=Markup(_PRINT_CSS),
            emoji=style.emoji,
            style_label=style.label,
            brand=self.registry.brand,
            sections=sections,
        )

    def _section(self, key: str, value: ScalarText | ItemList) -> _HtmlSection:
        label = self.registry.label(key)
        if isinstance(value, ScalarText):
            return _HtmlSection(label=label, kind="scalar", lines=[emphasis_to_html(line) for line in paragraphs(value.text)])
        items = [self._item(item) for item in value.items if not is_blank_item(item)]
        return _HtmlSection(label=label, kind="list", items=items)

    @staticmethod
    def _item(item: ListItem) -> _HtmlItem:
        if isinstance(item, MultiPartCited):
            return _HtmlItem(
                headline=emphasis_to_html(item.headline) if item.headline.strip() else None,
                body=emphasis_to_html(" ".join(value for value in item.rest if value.strip())),
                page=item.page,
            )
        return _HtmlItem(headline=None, body=emphasis_to_html(item.text), page=item.page)


_UNSAFE_FILENAME = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def download_filename(title: str, style: str) -> str:
    """``"Atomic Habits"`` + executive -> ``"atomic-habits-executive.md"``."""

    style_value = getattr(style, "value", style)
    return f"{_UNSAFE_FILENAME.sub('-', title).lower()}-{style_value}.md"


__all__ = [
    "BaseRenderer",
    "MarkdownRenderer",
    "PrintHtmlRenderer",
    "download_filename",
    "item_markdown",
]
