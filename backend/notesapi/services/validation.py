"""
Notes Backend - Note Validation
===============================

What:  Field rules a note must satisfy before it is written.
How:   `validate_note()` evaluates every rule (no short-circuit) and returns
       the failures in field order: title, text, datetime.
Who:   NoteService.create and NoteService.update.

Rules:
    title     str, 1-255 characters
    text      str, any length (empty allowed)
    datetime  str in ISO 8601 form
"""

import re
from typing import Any, List

from notesapi.schemas.note import FieldError

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 255

# ISO 8601 dates: calendar (2023-01-31, 20230131, 2023-01), week (2023-W05-2),
# ordinal (2023-031), optionally followed by a time of day with fraction and
# a Z or ±hh[:mm] offset. Hour 24 is only accepted as 24:00.
_ISO8601 = re.compile(
    r"([\+-]?\d{4}(?!\d{2}\b))"
    r"((-?)("
    r"(0[1-9]|1[0-2])(\3([12]\d|0[1-9]|3[01]))?"
    r"|W([0-4]\d|5[0-3])(-?[1-7])?"
    r"|(00[1-9]|0[1-9]\d|[12]\d{2}|3([0-5]\d|6[1-6]))"
    r")"
    r"([T\s]((([01]\d|2[0-3])((:?)[0-5]\d)?|24:?00)([\.,]\d+(?!:))?)?"
    r"(\17[0-5]\d([\.,]\d+)?)?"
    r"([zZ]|([\+-])([01]\d|2[0-3]):?([0-5]\d)?)?)?)?",
    re.ASCII,
)


def is_iso8601(value: str) -> bool:
    """True if the whole of `value` is an ISO 8601 date or date-time."""
    return _ISO8601.fullmatch(value) is not None


def validate_note(title: Any, text: Any, datetime: Any) -> List[FieldError]:
    """
    Check candidate note fields.

    Args:
        title:    Candidate title (any type)
        text:     Candidate body text (any type)
        datetime: Candidate ISO 8601 timestamp (any type)

    Returns:
        List of FieldError, empty when the note is valid.
    """
    errors: List[FieldError] = []

    if not isinstance(title, str) or not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        errors.append(FieldError(
            field="title",
            message="Title must be a string of length 1 to 255 characters",
        ))

    if not isinstance(text, str):
        errors.append(FieldError(
            field="text",
            message="Text must be a string",
        ))

    if not isinstance(datetime, str) or not is_iso8601(datetime):
        errors.append(FieldError(
            field="datetime",
            message="Datetime must be a ISO 8601 date",
        ))

    return errors
