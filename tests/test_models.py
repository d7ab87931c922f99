"""Tests for model defaults and JSON shapes."""

from musclememory.models import (
    EndpointResult,
    EndpointSpec,
    FullVerificationResult,
    HttpMethod,
    LevelResult,
)


def test_expected_status_defaults_to_200():
    assert EndpointSpec(HttpMethod.GET, "/health").status == 200
    assert EndpointSpec(HttpMethod.DELETE, "/x", expected_status=204).status == 204


def test_spec_from_dict_accepts_camel_case():
    spec = EndpointSpec.from_dict({"method": "post", "path": "/resources", "expectedStatus": 201, "body": {"name": "t"}})
    assert spec.method is HttpMethod.POST
    assert spec.status == 201
    assert spec.key == (HttpMethod.POST, "/resources")


def test_endpoint_result_omits_details_on_success():
    ok = EndpointResult(True, "GET", "/health", 200, 200, "✓ GET /health returned 200", 5)
    assert "details" not in ok.to_dict()
    assert ok.to_dict()["actualStatus"] == 200


def test_level_result_dict_shape():
    lr = LevelResult("l0-server", passed_count=1, failed_count=1, total_time_ms=12, results=[
        EndpointResult(True, "GET", "/health", 200, 200, "ok", 5),
        EndpointResult(False, "GET", "/ready", 200, 404, "✗ Expected 200, got 404", 6, details="{}"),
    ])
    d = lr.to_dict()
    assert d["passed"] is False
    assert [r["path"] for r in d["results"]] == ["/health", "/ready"]
    assert LevelResult.from_dict(d).results[1].details == "{}"


def test_full_result_passed_requires_completion():
    assert FullVerificationResult().passed is False
    assert FullVerificationResult(completed=True).passed is True
    assert FullVerificationResult(completed=True, failed_count=1).passed is False
