"""Authorization — roles and resource ownership."""

ID = "l5-authz"
NUMBER = 5
TITLE = "Authorization"
DESCRIPTION = "Role-based access control (RBAC) and resource ownership enforcement"
DIFFICULTY = "intermediate"
ESTIMATED_TIME = "1 hour"

CHECKS = [
    {"id": "l5-v1", "name": "Own Resource Access", "method": "GET", "path": "/resources/own-id",
     "expected_status": 200, "description": "User can access own resource"},
    {"id": "l5-v2", "name": "Other Resource Denied", "method": "GET", "path": "/resources/other-id",
     "expected_status": 403, "description": "Cannot access others resource"},
    {"id": "l5-v3", "name": "Admin Route Denied", "method": "GET", "path": "/admin/users", "expected_status": 403,
     "description": "User denied admin route"},
    {"id": "l5-v4", "name": "Admin Route Allowed", "method": "GET", "path": "/admin/users", "expected_status": 200,
     "description": "Admin can access admin route"},
    {"id": "l5-v5", "name": "Admin Override", "method": "PATCH", "path": "/resources/any-id", "expected_status": 200,
     "description": "Admin can modify any resource"},
    {"id": "l5-v6", "name": "Update Own Resource", "method": "PATCH", "path": "/resources/own-id",
     "expected_status": 200, "description": "User can update own resource"},
]
