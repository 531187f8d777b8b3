"""
Notes Backend - Note SQLAlchemy Model
=====================================

What:  ORM model representing the `notes` table.
How:   Inherits from the declarative Base; NoteService builds Core statements
       (insert/select/update/delete) against its columns.

Table Design:
    - id: Integer primary key assigned by the database
    - title: TEXT; the 1-255 rule applies to the raw title, and escaping
      can make the stored value up to five times longer ("&" → "&amp;")
    - text: TEXT, no length limit
    - datetime: TEXT holding an ISO 8601 string as submitted (after
      sanitization), not a temporal column type
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from notesapi.database import Base


class Note(Base):
    """
    A single note.

    Lifecycle:
        1. Inserted by NoteService.create (id assigned by the store)
        2. Replaced as a whole by NoteService.update
        3. Removed by NoteService.delete
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    datetime: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="ISO 8601 timestamp stored as text",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}')>"
