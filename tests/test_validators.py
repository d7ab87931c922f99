"""Tests for the (method, path) validator registry."""

import pytest

from musclememory.models import HttpMethod
from musclememory.validators import VALIDATORS, get_validator


def test_registry_keys():
    assert set(VALIDATORS) == {
        (HttpMethod.GET, "/health"),
        (HttpMethod.GET, "/ready"),
        (HttpMethod.GET, "/resources"),
        (HttpMethod.POST, "/resources"),
        (HttpMethod.POST, "/auth/login"),
    }


def test_lookup_is_exact():
    assert get_validator(HttpMethod.GET, "/health") is not None
    assert get_validator(HttpMethod.GET, "/Health") is None
    assert get_validator(HttpMethod.POST, "/health") is None
    assert get_validator(HttpMethod.GET, "/health/db") is None


@pytest.mark.parametrize(
    "data, valid, reason",
    [
        ({"status": "ok"}, True, None),
        ({"status": None}, True, None),
        ({}, False, 'Response should have "status" field'),
        ([], False, "Response should be an object"),
        (None, False, "Response should be an object"),
    ],
)
def test_health(data, valid, reason):
    result = get_validator(HttpMethod.GET, "/health")(data)
    assert result.valid is valid
    assert result.reason == reason


def test_ready():
    check = get_validator(HttpMethod.GET, "/ready")
    assert check({"ready": False}).valid
    assert check({"status": "ok"}).reason == 'Response should have "ready" field'


@pytest.mark.parametrize("data", [[], [{"id": 1}], {"data": []}])
def test_resources_list_shapes(data):
    assert get_validator(HttpMethod.GET, "/resources")(data).valid


@pytest.mark.parametrize("data", [None, {"items": []}, "[]"])
def test_resources_list_rejects(data):
    result = get_validator(HttpMethod.GET, "/resources")(data)
    assert not result.valid
    assert result.reason == "Response should be an array or object with data array"


def test_created_resource_needs_id():
    check = get_validator(HttpMethod.POST, "/resources")
    assert check({"id": "abc"}).valid
    assert check({"name": "test"}).reason == 'Created resource should have "id" field'


def test_login_tokens():
    check = get_validator(HttpMethod.POST, "/auth/login")
    assert check({"accessToken": "a"}).valid
    assert check({"token": "t"}).valid
    assert check({"refreshToken": "r"}).reason == 'Response should have "accessToken" or "token" field'
