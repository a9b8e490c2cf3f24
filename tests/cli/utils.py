"""Shared helpers for CLI tests."""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from loguru import logger


@contextmanager
def logger_to_stderr(level: str = "INFO"):
    """Temporarily route Loguru output to stderr for assertion."""

    handler_id = logger.add(sys.stderr, level=level)
    try:
        yield
    finally:
        logger.remove(handler_id)


def write_config(base_dir: Path, *, readwise_token: str | None = "test-token", extra: str = "") -> Path:
    """Write a minimal config file; ``readwise_token=None`` leaves Readwise unconfigured."""

    lines = ['logging_level = "INFO"', ""]
    if extra:
        lines.extend([extra, ""])
    if readwise_token is not None:
        lines.extend(
            [
                "[readwise]",
                "enabled = true",
                f'token = "{readwise_token}"',
                'base_url = "https://readwise.test/api/v2"',
                "",
            ]
        )
    path = base_dir / "config.toml"
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def write_summary(base_dir: Path, payload: Any, name: str = "summary.json") -> Path:
    """Store a summary payload as a file; strings are written verbatim."""

    path = base_dir / name
    text = payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False)
    path.write_text(text, encoding="utf-8")
    return path
