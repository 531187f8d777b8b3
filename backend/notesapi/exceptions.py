"""
Notes Backend - Exception Hierarchy
===================================

What:  Application-specific exceptions for faults that abort a request.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers registered in main.py turn them into JSON
       error responses.

Expected outcomes (invalid input, unknown id) are not exceptions: NoteService
returns them as values and the routes map them to 400/404.

Exception Hierarchy:
    NotesError (base)   → 500 Internal Server Error
    └── DatabaseError   → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(NotesError):
    """
    Raised when a database operation fails.

    When:    Connection refused or lost, constraint violation, bad statement.
    HTTP:    500 Internal Server Error

    The response message is always generic; the original driver error is
    chained (`raise ... from exc`) and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
