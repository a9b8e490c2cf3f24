from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from bookdigest.config import ReadwiseConfig, StyleId
from bookdigest.export import (
    NothingToExportError,
    ReadwiseAuthError,
    ReadwiseClient,
    ReadwiseExportError,
)
from bookdigest.summary import Highlight, SummaryRecord


@pytest.fixture()
def config() -> ReadwiseConfig:
    return ReadwiseConfig(enabled=True, token="secret-token", base_url="https://readwise.test/api/v2/", timeout=5.0)


def _session(status: int = 200, text: str = "") -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 400
    response.text = text
    session.post.return_value = response
    return session


def test_export_posts_highlights(config: ReadwiseConfig) -> None:
    session = _session()
    client = ReadwiseClient(config, session=session)
    highlights = [
        Highlight(text="Systems beat goals", note="Executive — Key Insights", location=12, location_type="page"),
        Highlight(text="Short summary.", note="Executive — Overview"),
    ]

    result = client.export(highlights, title="Atomic Habits")

    assert result.count == 2
    assert result.title == "Atomic Habits"
    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args == ("https://readwise.test/api/v2/highlights/",)
    assert kwargs["headers"] == {"Authorization": "Token secret-token"}
    assert kwargs["timeout"] == 5.0
    assert kwargs["json"] == {
        "highlights": [
            {
                "text": "Systems beat goals",
                "title": "Atomic Habits",
                "source_type": "books",
                "note": "Executive — Key Insights",
                "location": 12,
                "location_type": "page",
            },
            {
                "text": "Short summary.",
                "title": "Atomic Habits",
                "source_type": "books",
                "note": "Executive — Overview",
            },
        ]
    }
    assert session.headers["Content-Type"] == "application/json"


def test_empty_export_sends_nothing(config: ReadwiseConfig) -> None:
    session = _session()
    client = ReadwiseClient(config, session=session)

    with pytest.raises(NothingToExportError):
        client.export([], title="Book")

    session.post.assert_not_called()


def test_unauthorized_maps_to_auth_error(config: ReadwiseConfig) -> None:
    client = ReadwiseClient(config, session=_session(401, "Invalid token"))

    with pytest.raises(ReadwiseAuthError, match="Invalid Readwise token"):
        client.export([Highlight(text="t", note="n")], title="Book")


def test_server_error_carries_body(config: ReadwiseConfig) -> None:
    client = ReadwiseClient(config, session=_session(500, "boom"))

    with pytest.raises(ReadwiseExportError, match="Readwise error: boom"):
        client.export([Highlight(text="t", note="n")], title="Book")


def test_network_failure_is_wrapped(config: ReadwiseConfig) -> None:
    session = _session()
    session.post.side_effect = requests.ConnectionError("offline")
    client = ReadwiseClient(config, session=session)

    with pytest.raises(ReadwiseExportError, match="offline"):
        client.export([Highlight(text="t", note="n")], title="Book")


def test_missing_token_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("READWISE_TOKEN", raising=False)
    client = ReadwiseClient(ReadwiseConfig(enabled=True), session=_session())

    with pytest.raises(EnvironmentError):
        client.export([Highlight(text="t", note="n")], title="Book")


def test_export_record(config: ReadwiseConfig, executive_record: SummaryRecord) -> None:
    session = _session()
    client = ReadwiseClient(config, session=session)

    result = client.export_record(executive_record)

    assert result.count == 6
    assert result.title == "Atomic Habits"
    sent = session.post.call_args.kwargs["json"]["highlights"]
    assert [item["note"] for item in sent[:2]] == ["Executive — Overview", "Executive — Key Insights"]


def test_export_record_with_unparseable_summary(config: ReadwiseConfig) -> None:
    session = _session()
    client = ReadwiseClient(config, session=session)

    with pytest.raises(NothingToExportError):
        client.export_record(SummaryRecord(style=StyleId.EXECUTIVE, content="oops"))

    session.post.assert_not_called()
