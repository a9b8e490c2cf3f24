"""Configuration namespace for bookdigest."""

from __future__ import annotations

from .app import AppConfig, SpeechConfig
from .base import BaseConfig, load_config
from .export import ReadwiseConfig
from .registry import DEFAULT_FIELD_LABELS, RegistryConfig, StyleConfig, StyleId
from .utils import resolve_env_reference

__all__ = [
    "BaseConfig",
    "AppConfig",
    "load_config",
    "DEFAULT_FIELD_LABELS",
    "ReadwiseConfig",
    "RegistryConfig",
    "SpeechConfig",
    "StyleConfig",
    "StyleId",
    "resolve_env_reference",
]
