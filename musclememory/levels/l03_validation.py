"""Validation & Errors — schema validation and a consistent error format."""

ID = "l3-validation"
NUMBER = 3
TITLE = "Validation & Errors"
DESCRIPTION = "Comprehensive input validation and structured error handling"
DIFFICULTY = "intermediate"
ESTIMATED_TIME = "45 mins"

CHECKS = [
    {"id": "l3-v1", "name": "Required Field", "method": "POST", "path": "/resources", "expected_status": 400,
     "body": {}, "description": "Missing required field returns 400"},
    {"id": "l3-v2", "name": "Invalid Type", "method": "POST", "path": "/resources", "expected_status": 400,
     "body": {"name": 42}, "description": "Wrong type returns 400"},
    {"id": "l3-v3", "name": "Email Format", "method": "POST", "path": "/auth/register", "expected_status": 400,
     "body": {"email": "not-an-email", "password": "Str0ng!pass"}, "description": "Invalid email rejected"},
    {"id": "l3-v4", "name": "Password Weak", "method": "POST", "path": "/auth/register", "expected_status": 400,
     "body": {"email": "user@example.com", "password": "123"}, "description": "Weak password rejected"},
    {"id": "l3-v5", "name": "Error Has Code", "method": "POST", "path": "/resources", "expected_status": 400,
     "body": {}, "description": "Error response has code field"},
    {"id": "l3-v6", "name": "Error Has Details", "method": "POST", "path": "/resources", "expected_status": 400,
     "body": {}, "description": "Validation errors have details"},
    {"id": "l3-v7", "name": "Query Validation", "method": "GET", "path": "/resources?limit=invalid",
     "expected_status": 400, "description": "Query params validated"},
]
