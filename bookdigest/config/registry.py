"""Static label and style registries.

Both registries are loaded once at process start and never change afterwards.
The defaults cover every field key produced by the known prompt schemas; a
configuration file may add or override labels but must keep every style.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator

from bookdigest.config.base import BaseConfig


class StyleId(str, Enum):
    """Summary personas a document can be generated with."""

    EXECUTIVE = "executive"
    STUDY = "study"
    ACTION = "action"
    RESEARCH = "research"


DEFAULT_FIELD_LABELS: dict[str, str] = {
    # Book styles
    "overview": "Overview",
    "key_insights": "Key Insights",
    "core_message": "Core Message",
    "relevance": "Relevance",
    "main_concepts": "Main Concepts",
    "key_chapters": "Key Chapters",
    "important_quotes": "Important Quotes",
    "study_questions": "Study Questions",
    "immediate_actions": "Immediate Actions",
    "weekly_habits": "Weekly Habits",
    "tools_and_frameworks": "Tools & Frameworks",
    "30_day_plan": "30-Day Plan",
    # Research / academic paper style
    "research_question": "Research Question",
    "methodology": "Methodology",
    "key_findings": "Key Findings",
    "limitations": "Limitations",
    "conclusion": "Conclusion",
    "key_citations": "Key Citations",
}


class StyleConfig(BaseConfig):
    """Presentation metadata for a single summary style."""

    label: str = Field(..., min_length=1, description="Display label, e.g. 'Executive'")
    description: str = Field("", description="Short description shown next to the label")
    emoji: str = Field("", description="Icon token rendered before the label")


def _default_styles() -> dict[StyleId, StyleConfig]:
    return {
        StyleId.EXECUTIVE: StyleConfig(
            label="Executive", description="High-level overview & key insights", emoji="\U0001F4BC"
        ),
        StyleId.STUDY: StyleConfig(
            label="Study", description="Detailed breakdown for deep learning", emoji="\U0001F4DA"
        ),
        StyleId.ACTION: StyleConfig(
            label="Action", description="Practical steps & implementation", emoji="\U0001F680"
        ),
        StyleId.RESEARCH: StyleConfig(
            label="Research", description="Academic analysis & key findings", emoji="\U0001F52C"
        ),
    }


class RegistryConfig(BaseConfig):
    """Field label registry plus style registry."""

    labels: dict[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Extra or overriding field labels, merged over the built-in table",
    )
    styles: dict[StyleId, StyleConfig] = Field(
        default_factory=_default_styles,
        description="Style id to label/description/emoji; every style must be present",
    )
    byline_brand: str = Field("BookDigest", min_length=1, description="Brand shown in document bylines")

    @field_validator("labels")
    @classmethod
    def _merge_default_labels(cls, labels: dict[str, str]) -> dict[str, str]:
        for key, label in labels.items():
            if not label.strip():
                raise ValueError(f"Label for field '{key}' must not be blank")
        return {**DEFAULT_FIELD_LABELS, **labels}

    @field_validator("styles")
    @classmethod
    def _require_every_style(cls, styles: dict[StyleId, StyleConfig]) -> dict[StyleId, StyleConfig]:
        missing = [style.value for style in StyleId if style not in styles]
        if missing:
            raise ValueError(f"Style registry is missing entries for: {', '.join(missing)}")
        return styles


__all__ = ["DEFAULT_FIELD_LABELS", "RegistryConfig", "StyleConfig", "StyleId"]
