"""Highlight export configuration models."""

from __future__ import annotations

from pydantic import Field

from bookdigest.config.base import BaseConfig
from bookdigest.config.utils import resolve_env_reference


class ReadwiseConfig(BaseConfig):
    """Connection settings for the Readwise highlight import API."""

    enabled: bool = Field(True, description="Whether the Readwise export command is available")
    token: str | None = Field(
        "env:READWISE_TOKEN",
        description="Readwise access token, can use 'env:VAR_NAME' format",
    )
    base_url: str = Field("https://readwise.io/api/v2", description="Readwise API base URL")
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")
    source_type: str = Field("books", min_length=1, description="source_type attached to every highlight")

    @property
    def token_secret(self) -> str:
        """Return the resolved token, expanding any ``env:VAR`` references."""

        resolved = resolve_env_reference(self.token)
        if resolved is None:
            raise EnvironmentError("No Readwise token configured")
        return resolved


__all__ = ["ReadwiseConfig"]
