"""Heuristic language detection over summary text.

Used to pick UI copy (suggested chat questions) matching the language the
summary was generated in. Rules run in a fixed order and English is the
fallback, so the result is deterministic for any input.
"""

from __future__ import annotations

import re

from .models import ParseFailure, ScalarText, SummaryDocument
from .parser import parse_document

SAMPLE_CHARS = 800
DEFAULT_LANGUAGE = "en"

CHAT_SUGGESTIONS: dict[str, tuple[str, str, str]] = {
    "en": ("What are the main takeaways?", "What action should I take first?", "Summarize this in one sentence."),
    "sv": ("Vad är de viktigaste lärdomarna?", "Vilken åtgärd bör jag ta först?", "Sammanfatta detta i en mening."),
    "de": (
        "Was sind die wichtigsten Erkenntnisse?",
        "Welche Maßnahme sollte ich zuerst ergreifen?",
        "Fasse das in einem Satz zusammen.",
    ),
    "fr": (
        "Quels sont les points essentiels ?",
        "Quelle action devrais-je entreprendre en premier ?",
        "Résume cela en une phrase.",
    ),
    "es": ("¿Cuáles son las conclusiones principales?", "¿Qué acción debo tomar primero?", "Resume esto en una oración."),
    "no": ("Hva er de viktigste lærdomene?", "Hvilken handling bør jeg ta først?", "Oppsummer dette i én setning."),
    "da": ("Hvad er de vigtigste pointer?", "Hvilken handling bør jeg tage først?", "Opsummer dette i én sætning."),
    "fi": ("Mitkä ovat tärkeimmät opit?", "Mitä toimenpidettä minun pitäisi tehdä ensin?", "Tiivistä tämä yhdellä lauseella."),
}


def _words(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(?:" + "|".join(words) + r")\b")


_FINNISH = _words("että", "kanssa", "myös", "kuten", "ovat", "sekä", "joka", "kaikki", "kirja", "toiminta", "ensimmäinen")
_GERMAN = _words("und", "ist", "das", "nicht", "auch", "wird", "sind", "einer", "einen", "beim", "durch")
_FRENCH = _words("les", "des", "est", "une", "pour", "dans", "qui", "sur", "avec", "très", "cette", "même", "être", "avoir")
_SPANISH = _words("los", "las", "del", "una", "por", "con", "más", "para", "también", "acción", "capítulo")
_SWEDISH = _words("och", "att", "är", "för", "med", "till", "som", "det", "av", "på")
_NORWEGIAN = _words("ikke", "gjøre", "ønsker", "viktig", "første", "handling", "boken", "leseren")
_DANISH = _words("ikke", "gøre", "ønsker", "vigtig", "første", "handling", "bogen", "læseren")


def document_text(document: SummaryDocument) -> str:
    """String values in field order; text coerced from numbers, booleans or nested JSON is skipped."""

    parts: list[str] = []
    for entry in document.fields:
        if isinstance(entry.value, ScalarText):
            if not entry.value.coerced:
                parts.append(entry.value.text)
        else:
            for item in entry.value.items:
                parts.extend(item.string_values())
    return " ".join(part for part in parts if part)


def classify(text: str) -> str:
    """Apply the ordered rules to already-extracted text."""

    t = text.lower()
    if _FINNISH.search(t):
        return "fi"
    if "ß" in t or _GERMAN.search(t):
        return "de"
    if _FRENCH.search(t):
        return "fr"
    if "ñ" in t or _SPANISH.search(t):
        return "es"
    has_ae_oe = bool(re.search(r"[æø]", t))
    if (re.search(r"[äö]", t) and not has_ae_oe) or _SWEDISH.search(t):
        return "sv"
    if has_ae_oe:
        if _NORWEGIAN.search(t):
            return "no"
        if _DANISH.search(t):
            return "da"
        return "no"
    return DEFAULT_LANGUAGE


def detect_language(raw_text: str) -> str:
    """Detect the language of raw summary content; unparseable text is sampled as-is."""

    parsed = parse_document(raw_text, "executive") if isinstance(raw_text, str) else None
    if isinstance(parsed, SummaryDocument):
        sample = document_text(parsed)[:SAMPLE_CHARS]
    else:
        sample = (raw_text if isinstance(raw_text, str) else "")[:SAMPLE_CHARS]
    return classify(sample)


def detect_document_language(document: SummaryDocument | ParseFailure) -> str:
    if isinstance(document, ParseFailure):
        return classify(document.raw_text[:SAMPLE_CHARS])
    return classify(document_text(document)[:SAMPLE_CHARS])


def suggested_questions(raw_text: str) -> tuple[str, str, str]:
    return CHAT_SUGGESTIONS.get(detect_language(raw_text), CHAT_SUGGESTIONS[DEFAULT_LANGUAGE])


__all__ = [
    "CHAT_SUGGESTIONS",
    "DEFAULT_LANGUAGE",
    "classify",
    "detect_document_language",
    "detect_language",
    "document_text",
    "suggested_questions",
]
