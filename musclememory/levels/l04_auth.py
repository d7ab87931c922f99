"""Authentication — registration, login, access and refresh tokens."""

ID = "l4-auth"
NUMBER = 4
TITLE = "Authentication"
DESCRIPTION = "Secure user auth with registration, login, JWT tokens, and refresh flow"
DIFFICULTY = "intermediate"
ESTIMATED_TIME = "1.5 hours"

_USER = {"email": "learner@example.com", "password": "Str0ng!pass"}

CHECKS = [
    {"id": "l4-v1", "name": "Register Success", "method": "POST", "path": "/auth/register", "expected_status": 201,
     "body": _USER, "description": "Valid registration returns 201"},
    {"id": "l4-v2", "name": "No Password in Response", "method": "POST", "path": "/auth/register",
     "expected_status": 201, "body": _USER, "description": "Response excludes password"},
    {"id": "l4-v3", "name": "Duplicate Email", "method": "POST", "path": "/auth/register", "expected_status": 409,
     "body": _USER, "description": "Duplicate email rejected"},
    {"id": "l4-v4", "name": "Login Success", "method": "POST", "path": "/auth/login", "expected_status": 200,
     "body": _USER, "description": "Valid login returns tokens"},
    {"id": "l4-v5", "name": "Login Wrong Password", "method": "POST", "path": "/auth/login", "expected_status": 401,
     "body": {"email": _USER["email"], "password": "wrong"}, "description": "Wrong password rejected"},
    {"id": "l4-v6", "name": "Login No User", "method": "POST", "path": "/auth/login", "expected_status": 401,
     "body": {"email": "nobody@example.com", "password": "wrong"}, "description": "Unknown email rejected"},
    {"id": "l4-v7", "name": "Protected No Token", "method": "GET", "path": "/resources", "expected_status": 401,
     "description": "No token returns 401"},
    {"id": "l4-v8", "name": "Protected Invalid Token", "method": "GET", "path": "/resources",
     "expected_status": 401, "headers": {"Authorization": "Bearer invalid"},
     "description": "Invalid token returns 401"},
    {"id": "l4-v9", "name": "Refresh Token", "method": "POST", "path": "/auth/refresh", "expected_status": 200,
     "description": "Valid refresh returns new tokens"},
]
