"""
Response helpers for the MealMatch API.

Error bodies use the {"error": message} shape the client expects rather
than FastAPI's default {"detail": ...}.
"""

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """Create a JSON error response with an {"error": message} body."""
    return JSONResponse(status_code=status_code, content={"error": message})


def success_response() -> dict:
    """Acknowledgement body for mutations."""
    return {"success": True}
