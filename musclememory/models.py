"""Data models for the musclememory verification engine.

HttpMethod enum, EndpointSpec, EndpointResult, LevelSpec, LevelResult,
FullVerificationResult — all the typed structures that flow through
engine → storage → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

DEFAULT_EXPECTED_STATUS = 200


class HttpMethod(str, Enum):
    """HTTP methods a check may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass
class EndpointSpec:
    """One HTTP call to verify."""

    method: HttpMethod
    path: str
    expected_status: Optional[int] = None
    body: Optional[dict[str, Any]] = None
    headers: Optional[dict[str, str]] = None

    @property
    def status(self) -> int:
        """Effective expected status (200 when unset)."""
        if self.expected_status is None:
            return DEFAULT_EXPECTED_STATUS
        return self.expected_status

    @property
    def key(self) -> tuple[HttpMethod, str]:
        return (self.method, self.path)

    @classmethod
    def from_dict(cls, d: dict) -> EndpointSpec:
        """Build from a JSON-style dict. Raises ValueError on an unknown method."""
        return cls(
            method=HttpMethod(str(d["method"]).upper()),
            path=d["path"],
            expected_status=d.get("expectedStatus", d.get("expected_status")),
            body=d.get("body"),
            headers=d.get("headers"),
        )


@dataclass
class EndpointResult:
    """Outcome of evaluating one EndpointSpec."""

    success: bool
    method: str
    path: str
    expected_status: int
    actual_status: int
    message: str
    response_time_ms: int = 0
    details: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d = {
            "success": self.success,
            "method": self.method,
            "path": self.path,
            "expectedStatus": self.expected_status,
            "actualStatus": self.actual_status,
            "message": self.message,
            "responseTimeMs": self.response_time_ms,
        }
        if self.details is not None:
            d["details"] = self.details
        return d

    @classmethod
    def from_dict(cls, d: dict) -> EndpointResult:
        return cls(
            success=d.get("success", False),
            method=d.get("method", ""),
            path=d.get("path", ""),
            expected_status=d.get("expectedStatus", DEFAULT_EXPECTED_STATUS),
            actual_status=d.get("actualStatus", 0),
            message=d.get("message", ""),
            response_time_ms=d.get("responseTimeMs", 0),
            details=d.get("details"),
        )


@dataclass
class LevelSpec:
    """A named, ordered sequence of EndpointSpecs."""

    level_id: str
    endpoints: list[EndpointSpec] = field(default_factory=list)


@dataclass
class LevelResult:
    """Aggregate of running a LevelSpec."""

    level_id: str
    passed_count: int = 0
    failed_count: int = 0
    total_time_ms: int = 0
    results: list[EndpointResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.failed_count == 0

    def to_dict(self) -> dict:
        return {
            "levelId": self.level_id,
            "passed": self.passed,
            "passedCount": self.passed_count,
            "failedCount": self.failed_count,
            "totalTimeMs": self.total_time_ms,
            "results": [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, d: dict) -> LevelResult:
        return cls(
            level_id=d.get("levelId", ""),
            passed_count=d.get("passedCount", 0),
            failed_count=d.get("failedCount", 0),
            total_time_ms=d.get("totalTimeMs", 0),
            results=[EndpointResult.from_dict(r) for r in d.get("results", [])],
        )


@dataclass
class FullVerificationResult:
    """Aggregate across the fixed smoke-test sequence of levels."""

    completed: bool = False
    total_time_ms: int = 0
    passed_count: int = 0
    failed_count: int = 0
    level_results: list[LevelResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.completed and self.failed_count == 0

    def to_dict(self) -> dict:
        return {
            "completed": self.completed,
            "totalTimeMs": self.total_time_ms,
            "passedCount": self.passed_count,
            "failedCount": self.failed_count,
            "levelResults": [lr.to_dict() for lr in self.level_results],
        }

    @classmethod
    def from_dict(cls, d: dict) -> FullVerificationResult:
        return cls(
            completed=d.get("completed", False),
            total_time_ms=d.get("totalTimeMs", 0),
            passed_count=d.get("passedCount", 0),
            failed_count=d.get("failedCount", 0),
            level_results=[LevelResult.from_dict(lr) for lr in d.get("levelResults", [])],
        )
