"""
Notes Backend - Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the API contract and the values passed
       between NoteService and the routes.
How:   FastAPI uses these to parse request bodies, serialize responses, and
       generate the OpenAPI document.

Request fields are typed `Any` on purpose: type checking of note fields is
the job of `validate_note`, which reports problems as a 400 error array
rather than the framework's 422.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteInput(BaseModel):
    """Body of POST and PUT requests. Unknown keys are ignored."""
    title: Any = Field(default=None, description="Title, 1 to 255 characters")
    text: Any = Field(default=None, description="Body text, any length")
    datetime: Any = Field(default=None, description="ISO 8601 timestamp")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a stored note.
    Who:   Returned by every notes endpoint that yields a note.
    """
    id: int = Field(description="Database-assigned note identifier")
    title: str = Field(description="Sanitized title")
    text: str = Field(description="Sanitized body text")
    datetime: str = Field(description="Sanitized ISO 8601 timestamp")

    model_config = {"from_attributes": True}


class FieldError(BaseModel):
    """One failed validation rule, scoped to a single field."""
    field: str = Field(description="Name of the offending field")
    message: str = Field(description="Human-readable description of the rule")


class NoteWriteResult(BaseModel):
    """
    Outcome of NoteService.create / NoteService.update.

    States:
        success=True                          → item holds the stored row
        success=False, validation non-empty   → input rejected, storage untouched
        success=False, not_found=True         → update targeted an unknown id
    """
    success: bool
    validation: List[FieldError] = Field(default_factory=list)
    item: Optional[NoteResponse] = None
    not_found: bool = False


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class NotFoundResponse(BaseModel):
    """Body of every 404 from the notes endpoints."""
    error: str = Field(default="Note not found")


class ErrorResponse(BaseModel):
    """
    What:  Error format produced by the global exception handlers.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
