"""Shared fixtures: fake backends built on httpx.MockTransport and an isolated results dir."""

from __future__ import annotations

import httpx
import pytest

# (method, path) -> (status, json body) for a backend that passes the smoke suite
COMPLIANT_ROUTES = {
    ("GET", "/health"): (200, {"status": "ok"}),
    ("GET", "/ready"): (200, {"ready": True}),
    ("GET", "/resources"): (200, []),
    ("POST", "/resources"): (201, {"id": "abc", "name": "test"}),
    ("GET", "/health/db"): (200, {"status": "ok", "database": "connected"}),
}


def route_handler(routes: dict[tuple[str, str], tuple[int, object]]):
    """Build a MockTransport handler answering from a routes table (404 otherwise)."""

    def handler(request: httpx.Request) -> httpx.Response:
        status, body = routes.get((request.method, request.url.path), (404, {"error": "Not found"}))
        return httpx.Response(status, json=body)

    return handler


@pytest.fixture
def compliant_transport() -> httpx.MockTransport:
    return httpx.MockTransport(route_handler(COMPLIANT_ROUTES))


@pytest.fixture
def results_dir(tmp_path, monkeypatch):
    """Point BMM_RESULTS_DIR at a fresh temp directory."""
    root = tmp_path / "results"
    monkeypatch.setenv("BMM_RESULTS_DIR", str(root))
    return root
