"""Error response schema.

All error responses use the same envelope: {"message": "...", "error": "..."}.
Exception handlers in main.py construct it from domain exceptions.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Human-readable ``message`` plus a diagnostic ``error`` string."""

    message: str
    error: str
