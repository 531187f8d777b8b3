"""
Notes Backend - Note Service (Data Access)
==========================================

What:  The five note operations: create, read_all, read_one, update, delete.
How:   Writes run validate → sanitize → one parameterized statement.
       Every statement runs on its own pooled connection borrowed through
       `async with engine.begin()`, so the connection is released on every
       exit path.
Who:   Called by the notes route handlers.

Result Contract:
    create / update  → NoteWriteResult (validation failures are data, not errors)
    read_all         → list of NoteResponse, storage natural order
    read_one         → NoteResponse, or None when no row matches
    delete           → True iff exactly one row was removed

Error Handling:
    Any SQLAlchemyError is logged here and re-raised as DatabaseError.
    No retries.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql import Executable

from notesapi.exceptions import DatabaseError
from notesapi.models.note import Note
from notesapi.schemas.note import NoteResponse, NoteWriteResult
from notesapi.services.sanitizer import sanitize
from notesapi.services.validation import validate_note

logger = logging.getLogger(__name__)

_NOTE_COLUMNS = (Note.id, Note.title, Note.text, Note.datetime)


@dataclass
class QueryResult:
    """Rows and affected-row count of one executed statement."""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0


class NoteService:
    """
    Data-access layer for notes.

    Holds only the engine it was constructed with; no per-request state.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def _execute(self, statement: Executable) -> QueryResult:
        """
        Run one statement on a freshly borrowed connection.

        Rows are read before the connection goes back to the pool.

        Raises:
            DatabaseError: the driver or the database rejected the statement
        """
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
                return QueryResult(rows=rows, rowcount=result.rowcount)
        except SQLAlchemyError as e:
            logger.error("Error executing query: %s", str(e), exc_info=True)
            raise DatabaseError(
                context={"error_type": type(e).__name__},
            ) from e

    @staticmethod
    def _clean(title: str, text: str, datetime: str) -> Dict[str, str]:
        return {
            "title": sanitize(title),
            "text": sanitize(text),
            "datetime": sanitize(datetime),
        }

    async def create(self, title: Any, text: Any, datetime: Any) -> NoteWriteResult:
        """
        Validate, sanitize and insert a new note.

        Returns:
            NoteWriteResult with the inserted row, or with the validation
            failures (storage untouched).
        """
        validation = validate_note(title, text, datetime)
        if validation:
            return NoteWriteResult(success=False, validation=validation, item=None)

        statement = (
            insert(Note)
            .values(**self._clean(title, text, datetime))
            .returning(*_NOTE_COLUMNS)
        )
        result = await self._execute(statement)
        item = NoteResponse(**result.rows[0])
        logger.info("Note %d created", item.id)

        return NoteWriteResult(success=True, validation=[], item=item)

    async def read_all(self) -> List[NoteResponse]:
        """All notes, in whatever order the store yields them."""
        result = await self._execute(select(*_NOTE_COLUMNS))
        return [NoteResponse(**row) for row in result.rows]

    async def read_one(self, note_id: int) -> Optional[NoteResponse]:
        """The note with `note_id`, or None if there is none."""
        result = await self._execute(
            select(*_NOTE_COLUMNS).where(Note.id == note_id)
        )
        if not result.rows:
            return None
        return NoteResponse(**result.rows[0])

    async def update(self, note_id: int, title: Any, text: Any, datetime: Any) -> NoteWriteResult:
        """
        Validate, sanitize and replace every field of an existing note.

        Returns:
            NoteWriteResult with the updated row; with the validation failures;
            or with not_found=True when no row has `note_id`.
        """
        validation = validate_note(title, text, datetime)
        if validation:
            return NoteWriteResult(success=False, validation=validation)

        statement = (
            update(Note)
            .where(Note.id == note_id)
            .values(**self._clean(title, text, datetime))
            .returning(*_NOTE_COLUMNS)
        )
        result = await self._execute(statement)

        # No returned row means no note has this id
        if not result.rows:
            return NoteWriteResult(success=False, validation=[], not_found=True)

        logger.info("Note %d updated", note_id)
        return NoteWriteResult(success=True, validation=[], item=NoteResponse(**result.rows[0]))

    async def delete(self, note_id: int) -> bool:
        """Delete the note with `note_id`. True iff exactly one row was removed."""
        result = await self._execute(delete(Note).where(Note.id == note_id))
        deleted = result.rowcount == 1
        if deleted:
            logger.info("Note %d deleted", note_id)
        return deleted
