"""Speed Run — rebuild everything from scratch against the clock."""

ID = "l12-speedrun"
NUMBER = 12
TITLE = "Speed Run"
DESCRIPTION = "Rebuild everything from scratch. Target: 2 hours. No docs allowed"
DIFFICULTY = "expert"
ESTIMATED_TIME = "2 hours"

CHECKS = [
    {"id": "l12-v1", "name": "Full Suite", "method": "GET", "path": "/health", "expected_status": 200,
     "description": "All tests pass"},
]
