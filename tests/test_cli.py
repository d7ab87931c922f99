"""Tests for the typer CLI, with the engine wired to a fake backend."""

import json

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

import musclememory.__main__ as cli
from conftest import COMPLIANT_ROUTES, route_handler
from musclememory.engine import VerificationEngine
from musclememory.storage import load_records

runner = CliRunner()


def _use_backend(monkeypatch, routes):
    transport = httpx.MockTransport(route_handler(routes))
    monkeypatch.setattr(cli, "_engine", lambda timeout_ms: VerificationEngine(transport=transport))


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(cli, "console", Console(stderr=True, width=200))


def test_levels_lists_catalogue(results_dir):
    result = runner.invoke(cli.app, ["levels"])
    assert result.exit_code == 0
    assert "l0-server" in result.output
    assert "l12-speedrun" in result.output


def test_all_passes_and_stores_run(results_dir, monkeypatch):
    _use_backend(monkeypatch, COMPLIANT_ROUTES)
    result = runner.invoke(cli.app, ["all", "--url", "http://backend.test"])

    assert result.exit_code == 0
    assert "l2-database" in result.output
    records = load_records("all")
    assert len(records) == 1
    assert records[0].base_url == "http://backend.test"
    assert records[0].passed is True


def test_all_fails_with_exit_code(results_dir, monkeypatch):
    _use_backend(monkeypatch, {})
    result = runner.invoke(cli.app, ["all", "--url", "http://backend.test", "--no-save"])
    assert result.exit_code == 1
    assert load_records() == []


def test_level_unknown(results_dir):
    result = runner.invoke(cli.app, ["level", "l99-nope"])
    assert result.exit_code == 1
    assert "Unknown level" in result.output


def test_level_run_updates_progress(results_dir, monkeypatch):
    _use_backend(monkeypatch, {("GET", "/health/db"): (200, {"status": "ok"})})
    result = runner.invoke(cli.app, ["level", "l2-database", "--url", "http://backend.test"])
    assert result.exit_code == 1

    progress = runner.invoke(cli.app, ["progress"])
    assert progress.exit_code == 0
    assert "0/13 levels completed" in progress.output


def test_endpoint_json_output(results_dir, monkeypatch):
    _use_backend(monkeypatch, {("POST", "/resources"): (201, {"id": "abc"})})
    result = runner.invoke(cli.app, [
        "endpoint", "post", "/resources",
        "--url", "http://backend.test/",
        "--expect", "201",
        "--body", '{"name": "test"}',
        "--json", "--no-save",
    ])

    assert result.exit_code == 0
    payload = json.loads(result.output[result.output.index("{"):])
    assert payload["success"] is True
    assert payload["actualStatus"] == 201
    assert payload["path"] == "/resources"


def test_endpoint_rejects_bad_input(results_dir):
    bad_method = runner.invoke(cli.app, ["endpoint", "TRACE", "/health"])
    bad_path = runner.invoke(cli.app, ["endpoint", "GET", "health"])
    bad_body = runner.invoke(cli.app, ["endpoint", "POST", "/x", "--body", "[1]"])

    assert bad_method.exit_code == 1
    assert "Invalid method" in bad_method.output
    assert bad_path.exit_code == 1
    assert bad_body.exit_code == 1


def test_backend_url_from_environment(results_dir, monkeypatch):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"status": "ok"})

    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(cli, "_engine", lambda timeout_ms: VerificationEngine(transport=transport))
    monkeypatch.setenv("BMM_BACKEND_URL", "http://from-env.test")

    result = runner.invoke(cli.app, ["endpoint", "GET", "/health"])
    assert result.exit_code == 0
    assert seen == ["http://from-env.test/health"]


def test_note_results_and_report(results_dir):
    assert runner.invoke(cli.app, ["note", "20260101T000000Z", "warm cache"]).exit_code == 0
    assert runner.invoke(cli.app, ["results"]).exit_code == 0
    report = runner.invoke(cli.app, ["report"])
    assert report.exit_code == 0
    assert (results_dir / "RESULTS.md").exists()
