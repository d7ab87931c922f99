"""Server Bootstrap — app/server split, middleware, health endpoints."""

ID = "l0-server"
NUMBER = 0
TITLE = "Server Bootstrap"
DESCRIPTION = "Set up the server foundation with health endpoints and middleware"
DIFFICULTY = "beginner"
ESTIMATED_TIME = "30 mins"

CHECKS = [
    {"id": "l0-v1", "name": "Health Check", "method": "GET", "path": "/health", "expected_status": 200,
     "description": "Health endpoint returns 200"},
    {"id": "l0-v2", "name": "Health Response", "method": "GET", "path": "/health", "expected_status": 200,
     "description": "Response has status field"},
    {"id": "l0-v3", "name": "Ready Check", "method": "GET", "path": "/ready", "expected_status": 200,
     "description": "Ready endpoint returns 200"},
    {"id": "l0-v4", "name": "JSON Parsing", "method": "POST", "path": "/health", "expected_status": 404,
     "description": "POST to health returns 404"},
    {"id": "l0-v5", "name": "Unknown Route", "method": "GET", "path": "/unknown", "expected_status": 404,
     "description": "404 for unknown routes"},
    {"id": "l0-v6", "name": "Error Format", "method": "GET", "path": "/error-test", "expected_status": 500,
     "description": "Errors return JSON format"},
]
