"""Application-level configuration models."""

from __future__ import annotations

from pydantic import Field

from bookdigest.config.base import BaseConfig
from bookdigest.config.export import ReadwiseConfig
from bookdigest.config.registry import RegistryConfig


class SpeechConfig(BaseConfig):
    """Narration settings used by the CLI."""

    preview_chars: int = Field(280, ge=0, description="Characters of the narration script echoed to the log by 'speak' (0 = all)")


class AppConfig(BaseConfig):
    """Top-level runtime configuration for the summary engine."""

    logging_level: str = Field("INFO", description="Log level: DEBUG, INFO, WARNING, ERROR")
    registry: RegistryConfig = Field(default_factory=RegistryConfig, description="Field label and style registries")
    readwise: ReadwiseConfig | None = Field(None, description="Readwise highlight export configuration")
    speech: SpeechConfig = Field(default_factory=SpeechConfig, description="Narration configuration")


__all__ = ["AppConfig", "SpeechConfig"]
