#!/usr/bin/env python3
"""Smoke-check a running devconvert-http server."""

from __future__ import annotations

import os
import time

import httpx


def _wait_ok(client: httpx.Client, path: str, timeout_seconds: float = 40.0) -> dict[str, object]:
    deadline = time.time() + timeout_seconds
    last_error: Exception | None = None
    while time.time() < deadline:
        try:
            response = client.get(path)
            if response.status_code == 200:
                return response.json()
        except httpx.HTTPError as exc:
            last_error = exc
        time.sleep(0.5)
    raise RuntimeError(f"timed out waiting for HTTP 200 at {path}: {last_error}")


def main() -> None:
    """Check health, run one conversion and read it back from history."""
    api_base = os.getenv("DEVCONVERT_API_BASE", "http://127.0.0.1:8090")
    with httpx.Client(base_url=api_base, timeout=5.0) as client:
        assert _wait_ok(client, "/healthz").get("status") == "ok"
        assert _wait_ok(client, "/readyz").get("status") == "ready"

        headers = {"X-User-Id": "smoke"}
        response = client.post(
            "/v1/convert",
            json={"conversion_id": "typescript", "input_text": '{"id": 1}'},
            headers=headers,
        )
        response.raise_for_status()
        assert response.json()["output"] == "interface RootObject {\n  id: number;\n}"

        history = client.get("/v1/history", headers=headers).json()
        assert history and history[0]["format_type"] == "typescript", history
    print("HTTP smoke check passed.")


if __name__ == "__main__":
    main()
