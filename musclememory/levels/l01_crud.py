"""CRUD Operations — layered routes/controllers/services over an in-memory store."""

ID = "l1-crud"
NUMBER = 1
TITLE = "CRUD Operations"
DESCRIPTION = "Build complete CRUD with layered architecture: route, controller, service"
DIFFICULTY = "beginner"
ESTIMATED_TIME = "1 hour"

CHECKS = [
    {"id": "l1-v1", "name": "Create Resource", "method": "POST", "path": "/resources", "expected_status": 201,
     "body": {"name": "test"}, "description": "POST with valid body returns 201"},
    {"id": "l1-v2", "name": "Create Response", "method": "POST", "path": "/resources", "expected_status": 201,
     "body": {"name": "test"}, "description": "Response contains id field"},
    {"id": "l1-v3", "name": "List Resources", "method": "GET", "path": "/resources", "expected_status": 200,
     "description": "GET returns array"},
    {"id": "l1-v4", "name": "Get Resource", "method": "GET", "path": "/resources/test-id", "expected_status": 200,
     "description": "GET by ID returns resource"},
    {"id": "l1-v5", "name": "Resource Not Found", "method": "GET", "path": "/resources/nonexistent",
     "expected_status": 404, "description": "404 for missing resource"},
    {"id": "l1-v6", "name": "Update Resource", "method": "PATCH", "path": "/resources/test-id",
     "expected_status": 200, "body": {"name": "updated"}, "description": "PATCH returns updated resource"},
    {"id": "l1-v7", "name": "Delete Resource", "method": "DELETE", "path": "/resources/test-id",
     "expected_status": 204, "description": "DELETE returns 204"},
    {"id": "l1-v8", "name": "Validation Error", "method": "POST", "path": "/resources", "expected_status": 400,
     "body": {}, "description": "Empty body returns 400"},
    {"id": "l1-v9", "name": "Invalid ID Format", "method": "GET", "path": "/resources/invalid!id",
     "expected_status": 400, "description": "Invalid ID returns 400"},
]
