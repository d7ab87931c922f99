"""Response-shape validators keyed by (method, path).

Each validator is a pure function over the parsed JSON body. Endpoints with
no entry in VALIDATORS are judged on status code alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from musclememory.models import HttpMethod


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None


VALID = ValidationResult(valid=True)

Validator = Callable[[Any], ValidationResult]


def _require_fields(*fields: str, reason: str) -> Validator:
    """Build a validator requiring an object with at least one of `fields`."""

    def check(data: Any) -> ValidationResult:
        if not isinstance(data, dict):
            return ValidationResult(False, "Response should be an object")
        if not any(f in data for f in fields):
            return ValidationResult(False, reason)
        return VALID

    return check


def _list_or_data(data: Any) -> ValidationResult:
    if isinstance(data, list) or (isinstance(data, dict) and "data" in data):
        return VALID
    return ValidationResult(False, "Response should be an array or object with data array")


VALIDATORS: dict[tuple[HttpMethod, str], Validator] = {
    (HttpMethod.GET, "/health"): _require_fields(
        "status", reason='Response should have "status" field'
    ),
    (HttpMethod.GET, "/ready"): _require_fields(
        "ready", reason='Response should have "ready" field'
    ),
    (HttpMethod.GET, "/resources"): _list_or_data,
    (HttpMethod.POST, "/resources"): _require_fields(
        "id", reason='Created resource should have "id" field'
    ),
    (HttpMethod.POST, "/auth/login"): _require_fields(
        "accessToken", "token",
        reason='Response should have "accessToken" or "token" field',
    ),
}


def get_validator(method: HttpMethod, path: str) -> Optional[Validator]:
    """Exact, case-sensitive lookup."""
    return VALIDATORS.get((method, path))
