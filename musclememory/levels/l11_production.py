"""Production Ready — probes, containers, docs."""

ID = "l11-production"
NUMBER = 11
TITLE = "Production Ready"
DESCRIPTION = "Docker, health probes, CI/CD, and deployment preparation"
DIFFICULTY = "advanced"
ESTIMATED_TIME = "1 hour"

CHECKS = [
    {"id": "l11-v1", "name": "Liveness", "method": "GET", "path": "/health/live", "expected_status": 200,
     "description": "Liveness probe works"},
    {"id": "l11-v2", "name": "Readiness", "method": "GET", "path": "/health/ready", "expected_status": 200,
     "description": "Readiness probe works"},
    {"id": "l11-v3", "name": "API Docs", "method": "GET", "path": "/docs", "expected_status": 200,
     "description": "Swagger docs available"},
]
