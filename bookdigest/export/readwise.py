"""Readwise highlight import client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import requests
from loguru import logger

from bookdigest.config.export import ReadwiseConfig
from bookdigest.summary.highlights import Highlight
from bookdigest.summary.models import SummaryRecord
from bookdigest.summary.service import SummaryService


class ReadwiseExportError(RuntimeError):
    """Raised when Readwise rejects or fails an import request."""


class ReadwiseAuthError(ReadwiseExportError):
    """Raised when the configured token is invalid (HTTP 401)."""


class NothingToExportError(ReadwiseExportError):
    """Raised when a summary yields no highlights; no request is sent."""


@dataclass(frozen=True, slots=True)
class ExportResult:
    count: int
    title: str


class ReadwiseClient:
    """POST highlights to ``{base_url}/highlights/``."""

    def __init__(self, config: ReadwiseConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "BookDigest/0.1", "Content-Type": "application/json"})

    @property
    def endpoint(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/highlights/"

    def export(self, highlights: Sequence[Highlight], *, title: str) -> ExportResult:
        if not highlights:
            raise NothingToExportError("No highlights to export")

        payload = {
            "highlights": [
                highlight.to_payload(title=title, source_type=self._config.source_type) for highlight in highlights
            ]
        }
        logger.info("Exporting {} highlights for '{}' to Readwise", len(highlights), title)
        try:
            response = self.session.post(
                self.endpoint,
                json=payload,
                headers={"Authorization": f"Token {self._config.token_secret}"},
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            raise ReadwiseExportError(f"Readwise request failed: {exc}") from exc

        if response.status_code == 401:
            raise ReadwiseAuthError("Invalid Readwise token")
        if not response.ok:
            logger.error("Readwise returned HTTP {}: {}", response.status_code, response.text)
            raise ReadwiseExportError(f"Readwise error: {response.text}")
        return ExportResult(count=len(highlights), title=title)

    def export_record(self, record: SummaryRecord, service: SummaryService | None = None) -> ExportResult:
        """Build highlights for a stored summary and export them."""

        highlights, title = (service or SummaryService()).to_highlights(record)
        return self.export(highlights, title=title)


__all__ = [
    "ExportResult",
    "NothingToExportError",
    "ReadwiseAuthError",
    "ReadwiseClient",
    "ReadwiseExportError",
]
