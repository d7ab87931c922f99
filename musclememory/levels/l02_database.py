"""Database Integration — PostgreSQL, migrations, repository pattern."""

ID = "l2-database"
NUMBER = 2
TITLE = "Database Integration"
DESCRIPTION = "Connect PostgreSQL with an ORM, migrations, and the repository pattern"
DIFFICULTY = "intermediate"
ESTIMATED_TIME = "1 hour"

CHECKS = [
    {"id": "l2-v1", "name": "DB Health", "method": "GET", "path": "/health/db", "expected_status": 200,
     "description": "Database is connected"},
    {"id": "l2-v2", "name": "Create Persists", "method": "POST", "path": "/resources", "expected_status": 201,
     "body": {"name": "test"}, "description": "Data saved to DB"},
    {"id": "l2-v3", "name": "Read Persisted", "method": "GET", "path": "/resources", "expected_status": 200,
     "description": "Data retrieved from DB"},
    {"id": "l2-v4", "name": "Unique Constraint", "method": "POST", "path": "/users", "expected_status": 409,
     "description": "Duplicate email rejected"},
    {"id": "l2-v5", "name": "Cascade Delete", "method": "DELETE", "path": "/users/test-id", "expected_status": 204,
     "description": "Related resources deleted"},
]
