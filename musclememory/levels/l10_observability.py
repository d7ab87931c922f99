"""Observability — request tracing, security headers, rate limiting."""

ID = "l10-observability"
NUMBER = 10
TITLE = "Observability"
DESCRIPTION = "Structured logging, request tracing, rate limiting, and security"
DIFFICULTY = "advanced"
ESTIMATED_TIME = "1 hour"

CHECKS = [
    {"id": "l10-v1", "name": "Request ID", "method": "GET", "path": "/health", "expected_status": 200,
     "description": "X-Request-ID in response"},
    {"id": "l10-v2", "name": "Security Headers", "method": "GET", "path": "/health", "expected_status": 200,
     "description": "Security headers present"},
    {"id": "l10-v3", "name": "Rate Limit", "method": "GET", "path": "/health", "expected_status": 429,
     "description": "Rate limit enforced"},
]
