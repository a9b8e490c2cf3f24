"""Pytest helpers for path configuration and shared summary fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from bookdigest.config import StyleId  # noqa: E402
from bookdigest.summary import SummaryRecord  # noqa: E402


@pytest.fixture()
def executive_payload() -> dict:
    """Mixed-schema executive summary: all three list item shapes plus an unknown key."""

    return {
        "title": "Atomic Habits",
        "overview": "Small **habits** compound.\nThey add up over *years*.",
        "key_insights": [
            {"text": "Systems beat goals", "page": 12},
            {"concept": "Atomic habits", "explanation": "Small changes compound", "page": 30},
            "Identity drives **behavior**",
        ],
        "core_message": "Focus on systems, not goals.",
        "surprising_stat": "1% better every day",
        "weekly_habits": [],
    }


@pytest.fixture()
def executive_json(executive_payload: dict) -> str:
    return json.dumps(executive_payload, ensure_ascii=False)


@pytest.fixture()
def executive_record(executive_json: str) -> SummaryRecord:
    return SummaryRecord(style=StyleId.EXECUTIVE, content=executive_json, file_name="atomic-habits.pdf")
