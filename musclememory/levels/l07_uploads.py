"""File Uploads — multipart handling, storage, type and size limits."""

ID = "l7-uploads"
NUMBER = 7
TITLE = "File Uploads"
DESCRIPTION = "Handle file uploads with object storage and image processing"
DIFFICULTY = "intermediate"
ESTIMATED_TIME = "1 hour"

CHECKS = [
    {"id": "l7-v1", "name": "Upload Success", "method": "POST", "path": "/upload", "expected_status": 201,
     "description": "File upload returns 201"},
    {"id": "l7-v2", "name": "No File", "method": "POST", "path": "/upload", "expected_status": 400,
     "description": "No file returns 400"},
    {"id": "l7-v3", "name": "Too Large", "method": "POST", "path": "/upload", "expected_status": 413,
     "description": "Large file rejected"},
    {"id": "l7-v4", "name": "Wrong Type", "method": "POST", "path": "/upload", "expected_status": 400,
     "description": "Invalid type rejected"},
    {"id": "l7-v5", "name": "Get File", "method": "GET", "path": "/files/test-id", "expected_status": 200,
     "description": "File retrieved"},
    {"id": "l7-v6", "name": "Delete File", "method": "DELETE", "path": "/files/test-id", "expected_status": 204,
     "description": "File deleted"},
]
