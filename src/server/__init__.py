"""
Server components for the MealMatch API.

This package contains:
- responses: error and acknowledgement response bodies
"""

from server.responses import (
    error_response,
    success_response,
)


__all__ = [
    "error_response",
    "success_response",
]
