"""Human-readable labels for field keys and summary styles."""

from __future__ import annotations

import re
from collections.abc import Mapping

from bookdigest.config.registry import DEFAULT_FIELD_LABELS, RegistryConfig, StyleConfig, StyleId

_WORD_START = re.compile(r"\b\w")


def humanize_key(key: str) -> str:
    """``"surprising_stat"`` -> ``"Surprising Stat"``; other letters are left as-is."""

    return _WORD_START.sub(lambda match: match.group(0).upper(), key.replace("_", " "))


class LabelResolver:
    """Resolve field keys against a fixed label table, humanizing on a miss."""

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        self._labels = dict(DEFAULT_FIELD_LABELS if labels is None else labels)

    def resolve(self, key: str) -> str:
        label = self._labels.get(key)
        if label is not None:
            return label
        return humanize_key(key)

    def __contains__(self, key: object) -> bool:
        return key in self._labels


class StyleRegistry:
    """Read-only view of the configured summary styles."""

    def __init__(self, styles: Mapping[StyleId, StyleConfig]) -> None:
        self._styles = dict(styles)

    def info(self, style: StyleId | str) -> StyleConfig:
        return self._styles[StyleId(style)]

    def label(self, style: StyleId | str) -> str:
        return self.info(style).label

    def styles(self) -> list[StyleId]:
        return list(self._styles)


class Registry:
    """Labels, styles and byline brand bundled for the renderers."""

    def __init__(self, config: RegistryConfig | None = None) -> None:
        config = config or RegistryConfig()
        self.labels = LabelResolver(config.labels)
        self.styles = StyleRegistry(config.styles)
        self.brand = config.byline_brand

    def label(self, key: str) -> str:
        return self.labels.resolve(key)

    def style_label(self, style: StyleId | str) -> str:
        return self.styles.label(style)


_DEFAULT_RESOLVER = LabelResolver()


def resolve_label(key: str) -> str:
    """Resolve ``key`` with the built-in label table."""

    return _DEFAULT_RESOLVER.resolve(key)


__all__ = ["LabelResolver", "Registry", "StyleRegistry", "humanize_key", "resolve_label"]
