"""Verification engine — drives declarative HTTP checks against a backend.

Data flow per endpoint:
1. Build URL (base_url + path) and merged JSON headers
2. Send the request under a hard deadline (default 10s)
3. Parse the body as JSON when the response says it is JSON
4. Compare status, then run the (method, path) validator if the status matched
5. Assemble an EndpointResult; network failures become failed results

Levels run their endpoints strictly in order, one request in flight at a
time, and never stop early. verify_all runs the fixed smoke sequence.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Optional

import httpx

from musclememory.models import (
    EndpointResult,
    EndpointSpec,
    FullVerificationResult,
    HttpMethod,
    LevelResult,
    LevelSpec,
)
from musclememory.validators import VALID, Validator, VALIDATORS

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0
DETAILS_LIMIT = 200

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

SMOKE_LEVELS: tuple[LevelSpec, ...] = (
    LevelSpec(
        level_id="l0-server",
        endpoints=[
            EndpointSpec(HttpMethod.GET, "/health", expected_status=200),
            EndpointSpec(HttpMethod.GET, "/ready", expected_status=200),
        ],
    ),
    LevelSpec(
        level_id="l1-crud",
        endpoints=[
            EndpointSpec(HttpMethod.GET, "/resources", expected_status=200),
            EndpointSpec(HttpMethod.POST, "/resources", expected_status=201, body={"name": "test"}),
        ],
    ),
    LevelSpec(
        level_id="l2-database",
        endpoints=[
            EndpointSpec(HttpMethod.GET, "/health/db", expected_status=200),
        ],
    ),
)


def _elapsed_ms(start: float) -> int:
    return int(round((time.monotonic() - start) * 1000))


def _parse_body(response: httpx.Response) -> Any:
    """Return decoded JSON, or None when the body is not (valid) JSON."""
    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _failure_details(data: Any, response: httpx.Response) -> Optional[str]:
    """First DETAILS_LIMIT chars of the body, best effort."""
    if data is not None:
        return json.dumps(data)[:DETAILS_LIMIT]
    try:
        text = response.text
    except (UnicodeDecodeError, LookupError):
        return None
    return text[:DETAILS_LIMIT] or None


class VerificationEngine:
    """Stateless runner for endpoint, level and smoke-test verification.

    Args:
        timeout_s: Hard per-request deadline, measured from request start.
        transport: Optional httpx transport (tests inject MockTransport).
        validators: Override for the (method, path) validator table.
    """

    def __init__(
        self,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        validators: Optional[dict[tuple[HttpMethod, str], Validator]] = None,
    ) -> None:
        self.timeout_s = timeout_s
        self._transport = transport
        self._validators = VALIDATORS if validators is None else validators

    @property
    def timeout_ms(self) -> int:
        return int(round(self.timeout_s * 1000))

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        content: Optional[bytes],
    ) -> httpx.Response:
        # One client per request; leaving the block closes the connection,
        # including when wait_for cancels us mid-flight.
        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout_s) as client:
            return await client.request(method, url, headers=headers, content=content)

    async def verify_endpoint(self, spec: EndpointSpec, base_url: str) -> EndpointResult:
        """Run one check. Network failures are returned, never raised."""
        method = spec.method.value
        expected = spec.status
        url = f"{base_url}{spec.path}"
        headers = {**DEFAULT_HEADERS, **(spec.headers or {})}
        content = json.dumps(spec.body).encode("utf-8") if spec.body is not None else None

        logger.debug("verify %s %s (expect %d)", method, url, expected)
        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                self._send(method, url, headers, content), timeout=self.timeout_s
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            elapsed = _elapsed_ms(start)
            logger.debug("%s %s timed out after %dms", method, url, elapsed)
            return EndpointResult(
                success=False,
                method=method,
                path=spec.path,
                expected_status=expected,
                actual_status=0,
                message=f"✗ {method} {spec.path} timed out after {self.timeout_ms}ms",
                response_time_ms=elapsed,
            )
        except (httpx.RequestError, httpx.InvalidURL, OSError) as e:
            elapsed = _elapsed_ms(start)
            logger.debug("%s %s failed: %r", method, url, e)
            return EndpointResult(
                success=False,
                method=method,
                path=spec.path,
                expected_status=expected,
                actual_status=0,
                message=f"✗ {method} {spec.path} failed to connect",
                response_time_ms=elapsed,
                details=str(e) or type(e).__name__,
            )
        elapsed = _elapsed_ms(start)

        data = _parse_body(response)
        status_match = response.status_code == expected

        validation = VALID
        validator = self._validators.get(spec.key)
        if validator is not None and status_match:
            validation = validator(data)

        success = status_match and validation.valid
        if success:
            message = f"✓ {method} {spec.path} returned {response.status_code}"
        else:
            message = validation.reason or f"✗ Expected {expected}, got {response.status_code}"

        logger.debug("%s %s -> %d in %dms (%s)", method, url, response.status_code, elapsed,
                     "pass" if success else "fail")
        return EndpointResult(
            success=success,
            method=method,
            path=spec.path,
            expected_status=expected,
            actual_status=response.status_code,
            message=message,
            response_time_ms=elapsed,
            details=None if success else _failure_details(data, response),
        )

    async def verify_level(self, spec: LevelSpec, base_url: str) -> LevelResult:
        """Run every endpoint of a level in order, without short-circuiting."""
        result = LevelResult(level_id=spec.level_id)
        start = time.monotonic()

        for endpoint in spec.endpoints:
            endpoint_result = await self.verify_endpoint(endpoint, base_url)
            result.results.append(endpoint_result)
            if endpoint_result.success:
                result.passed_count += 1
            else:
                result.failed_count += 1

        result.total_time_ms = _elapsed_ms(start)
        return result

    async def verify_all(self, base_url: str) -> FullVerificationResult:
        """Run the fixed smoke sequence (l0-server, l1-crud, l2-database)."""
        full = FullVerificationResult()
        start = time.monotonic()

        for level in SMOKE_LEVELS:
            level_result = await self.verify_level(level, base_url)
            full.level_results.append(level_result)
            full.passed_count += level_result.passed_count
            full.failed_count += level_result.failed_count

        full.total_time_ms = _elapsed_ms(start)
        full.completed = True
        return full
