"""Plain-text narration script for text-to-speech playback."""

from __future__ import annotations

from .markup import to_plain_speech
from .models import ListItem, ParseFailure, ScalarText, SummaryDocument
from .renderer import BaseRenderer

_TERMINAL = (".", "!", "?", "…")


def _terminate(sentence: str) -> str:
    return sentence if sentence.endswith(_TERMINAL) else f"{sentence}."


class SpeechRenderer(BaseRenderer):
    """Flatten a document into one markup-free string.

    The result never contains ``*``: every fragment, the title included,
    goes through :func:`to_plain_speech` before it is joined.
    """

    def render(self, document: SummaryDocument | ParseFailure, title: str) -> str | None:
        if self._declines(document):
            return None
        style_label = to_plain_speech(self.registry.style_label(document.style))
        parts: list[str] = [f"{_terminate(to_plain_speech(title))} {style_label} summary."]

        for entry in document.fields:
            parts.append(_terminate(to_plain_speech(self.registry.label(entry.key))))
            if isinstance(entry.value, ScalarText):
                text = to_plain_speech(entry.value.text)
                if text:
                    parts.append(_terminate(text))
                continue
            for item in entry.value.items:
                sentence = self._item_sentence(item)
                if sentence:
                    parts.append(sentence)

        return " ".join(part for part in parts if part)

    @staticmethod
    def _item_sentence(item: ListItem) -> str:
        texts = [text for text in (to_plain_speech(value) for value in item.values()) if text]
        if not texts:
            return ""
        sentence = " ".join(_terminate(text) for text in texts)
        if item.page is not None:
            return f"{sentence} Source: page {item.page}."
        return sentence


__all__ = ["SpeechRenderer"]
