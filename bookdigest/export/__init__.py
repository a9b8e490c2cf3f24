"""Third-party highlight export clients."""

from __future__ import annotations

from .readwise import ExportResult, NothingToExportError, ReadwiseAuthError, ReadwiseClient, ReadwiseExportError

__all__ = [
    "ExportResult",
    "NothingToExportError",
    "ReadwiseAuthError",
    "ReadwiseClient",
    "ReadwiseExportError",
]
