"""Unit tests for the HTTP transport."""

from __future__ import annotations

import argparse
import types
from typing import TYPE_CHECKING, Protocol

import pytest

from devconvert.infrastructure.history import InMemoryHistoryStore
from devconvert.schemas import HttpServerConfig

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class _UvicornLike(Protocol):
    def run(self, app_ref: str, *, host: str, port: int, reload: bool) -> None: ...


def _client(
    store: InMemoryHistoryStore | None = None,
    config: HttpServerConfig | None = None,
) -> TestClient:
    pytest.importorskip("fastapi")
    pytest.importorskip("httpx")

    from fastapi.testclient import TestClient

    from devconvert.converter import http_server

    return TestClient(http_server.create_app(store=store, config=config))


def test_health_and_readiness() -> None:
    """Report liveness and the number of registered conversions."""
    client = _client()
    assert client.get("/healthz").json() == {"status": "ok"}
    ready = client.get("/readyz").json()
    assert ready["status"] == "ready"
    assert ready["conversions"] == 13


def test_list_conversions_grouped_and_filtered() -> None:
    """Group by category and filter with ``q``."""
    client = _client()
    groups = client.get("/v1/conversions").json()
    assert [group["name"] for group in groups] == ["SVG", "HTML", "CSS", "JSON", "Network"]

    filtered = client.get("/v1/conversions", params={"q": "mongoose"}).json()
    assert len(filtered) == 1
    (spec,) = filtered[0]["conversions"]
    assert spec["id"] == "mongoose"
    assert spec["label"] == "to Mongoose Schema"
    assert spec["example"]


def test_convert_success() -> None:
    """Return the converted text."""
    client = _client()
    response = client.post(
        "/v1/convert",
        json={"conversion_id": "html_jsx", "input_text": '<div class="a" for="b"></div>'},
    )
    assert response.status_code == 200
    assert response.json() == {
        "conversion_id": "html_jsx",
        "output": '<div className="a" htmlFor="b"></div>',
    }


@pytest.mark.parametrize(
    ("payload", "status", "error"),
    [
        ({"conversion_id": "nope", "input_text": "x"}, 404, "not_found"),
        ({"conversion_id": "typescript", "input_text": "{bad"}, 400, "parse_error"),
        ({"conversion_id": "typescript", "input_text": "   "}, 400, "empty_input"),
        ({"conversion_id": "nope", "input_text": "   "}, 400, "empty_input"),
        ({"conversion_id": "TypeScript", "input_text": "{}"}, 404, "not_found"),
    ],
)
def test_convert_failures_map_to_status(
    payload: dict[str, str], status: int, error: str
) -> None:
    """Tagged failures become HTTP errors carrying their kind."""
    response = _client().post("/v1/convert", json=payload)
    assert response.status_code == status
    assert response.json()["detail"]["error"] == error


@pytest.mark.parametrize(
    "payload",
    [
        {"conversion_id": "sql"},
        {"conversion_id": "", "input_text": "x"},
        {"conversion_id": "sql", "input_text": "{}", "extra": 1},
        {"conversion_id": "sql", "input_text": "{}", "options": {"table_name": "a b"}},
    ],
)
def test_convert_invalid_payload_is_422(payload: dict[str, object]) -> None:
    """Schema violations are rejected before conversion."""
    assert _client().post("/v1/convert", json=payload).status_code == 422


def test_convert_applies_options() -> None:
    """Forward validated options to the generators."""
    response = _client().post(
        "/v1/convert",
        json={
            "conversion_id": "sql",
            "input_text": '{"id": 1}',
            "options": {"table_name": "accounts"},
        },
    )
    assert response.json()["output"] == "CREATE TABLE accounts (\n  id INT\n);"


def test_history_requires_user_header() -> None:
    """Anonymous callers have no history endpoint."""
    assert _client().get("/v1/history").status_code == 401


def test_history_records_identified_callers_only() -> None:
    """Only requests with X-User-Id are recorded, newest first."""
    store = InMemoryHistoryStore()
    client = _client(store=store, config=HttpServerConfig(history_limit=2))
    headers = {"X-User-Id": "alice"}

    client.post("/v1/convert", json={"conversion_id": "css_obj", "input_text": "color: red;"})
    for text in ('{"a": 1}', '{"b": 2}', '{"c": 3}'):
        client.post(
            "/v1/convert",
            json={"conversion_id": "zod", "input_text": text},
            headers=headers,
        )

    entries = client.get("/v1/history", headers=headers).json()
    assert [entry["input_text"] for entry in entries] == ['{"c": 3}', '{"b": 2}']
    assert all(entry["format_type"] == "zod" for entry in entries)
    assert client.get("/v1/history", headers={"X-User-Id": "bob"}).json() == []


def test_create_app_requires_fastapi(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail with an install hint when fastapi is unavailable."""
    pytest.importorskip("fastapi")
    from devconvert.converter import http_server

    monkeypatch.setattr(http_server, "fastapi", None)
    with pytest.raises(RuntimeError, match=r"\.\[server\]"):
        http_server.create_app()


def test_main_runs_uvicorn_with_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start uvicorn with host and port read from the environment."""
    pytest.importorskip("fastapi")
    from devconvert.converter import http_server

    seen: dict[str, object] = {}

    def _run(app_ref: str, *, host: str, port: int, reload: bool) -> None:
        seen.update(app_ref=app_ref, host=host, port=port, reload=reload)

    fake_uvicorn: _UvicornLike = types.SimpleNamespace(run=_run)  # type: ignore[assignment]
    monkeypatch.setattr(http_server, "uvicorn", fake_uvicorn)
    monkeypatch.setenv("DEVCONVERT_HTTP_HOST", "127.0.0.1")
    monkeypatch.setenv("DEVCONVERT_HTTP_PORT", "9999")
    monkeypatch.setattr(
        argparse.ArgumentParser,
        "parse_args",
        lambda self: argparse.Namespace(host="127.0.0.1", port=9999, log_level="warning"),
    )

    http_server.main()

    assert seen == {
        "app_ref": "devconvert.converter.http_server:app",
        "host": "127.0.0.1",
        "port": 9999,
        "reload": False,
    }


def test_http_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read server settings from DEVCONVERT_* variables."""
    monkeypatch.delenv("DEVCONVERT_HTTP_HOST", raising=False)
    monkeypatch.setenv("DEVCONVERT_HTTP_PORT", "8123")
    monkeypatch.setenv("DEVCONVERT_HISTORY_LIMIT", "5")
    config = HttpServerConfig.from_env()
    assert config.port == 8123
    assert config.history_limit == 5
    assert config.host == "0.0.0.0"
