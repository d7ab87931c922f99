"""Background Jobs — queues, workers, retries, dead letters."""

ID = "l9-jobs"
NUMBER = 9
TITLE = "Background Jobs"
DESCRIPTION = "Job queues with workers, retries, and dead-letter handling"
DIFFICULTY = "advanced"
ESTIMATED_TIME = "1.5 hours"

CHECKS = [
    {"id": "l9-v1", "name": "Queue Health", "method": "GET", "path": "/health/queue", "expected_status": 200,
     "description": "Queue is healthy"},
    {"id": "l9-v2", "name": "Job Status", "method": "GET", "path": "/jobs/test-id", "expected_status": 200,
     "description": "Job status returned"},
]
