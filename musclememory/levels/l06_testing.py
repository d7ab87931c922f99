"""Testing — unit and integration suites."""

ID = "l6-testing"
NUMBER = 6
TITLE = "Testing"
DESCRIPTION = "Unit tests, integration tests, and test-driven development practices"
DIFFICULTY = "intermediate"
ESTIMATED_TIME = "1.5 hours"

CHECKS = [
    {"id": "l6-v1", "name": "Tests Exist", "method": "GET", "path": "/health", "expected_status": 200,
     "description": "Test files exist in project"},
    {"id": "l6-v2", "name": "Coverage Report", "method": "GET", "path": "/health", "expected_status": 200,
     "description": "Coverage > 70%"},
]
