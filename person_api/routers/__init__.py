"""
FastAPI routers.

Each module exposes an APIRouter that app.py includes. Endpoints translate
HTTP payloads into service calls and service errors into status codes.
"""
