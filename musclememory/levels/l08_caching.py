"""Caching Layer — read-through cache with TTL and invalidation."""

ID = "l8-caching"
NUMBER = 8
TITLE = "Caching Layer"
DESCRIPTION = "Redis caching with read-through pattern, TTL, and invalidation"
DIFFICULTY = "advanced"
ESTIMATED_TIME = "1 hour"

CHECKS = [
    {"id": "l8-v1", "name": "Cache Health", "method": "GET", "path": "/health/cache", "expected_status": 200,
     "description": "Cache connected"},
    {"id": "l8-v2", "name": "Cache Hit", "method": "GET", "path": "/resources/cached-id", "expected_status": 200,
     "description": "X-Cache: HIT header"},
    {"id": "l8-v3", "name": "Cache Miss", "method": "GET", "path": "/resources/new-id", "expected_status": 200,
     "description": "X-Cache: MISS header"},
]
