"""
Notes Backend - Notes Route Handlers
====================================

What:  The five notes endpoints, mounted under settings.notes_prefix.
How:   Each handler reads the request, calls one NoteService operation and
       maps its result to a status code and JSON body.

    GET    /       200 list            -
    POST   /       201 note            400 errors
    GET    /{id}   200 note            404
    PUT    /{id}   201 note            400 errors / 404
    DELETE /{id}   204 empty           404

Storage faults are not handled here; DatabaseError propagates to the global
exception handlers in main.py.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response
from fastapi.responses import JSONResponse

from notesapi.schemas.note import (
    ErrorResponse,
    FieldError,
    NoteInput,
    NoteResponse,
    NoteWriteResult,
    NotFoundResponse,
)
from notesapi.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

NOT_FOUND_MESSAGE = "Note not found"


def get_note_service(request: Request) -> NoteService:
    """FastAPI dependency: the NoteService built by create_app()."""
    return request.app.state.note_service


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})


def _validation_failed(result: NoteWriteResult) -> JSONResponse:
    logger.info("Note rejected: %s", ", ".join(e.field for e in result.validation))
    return JSONResponse(
        status_code=400,
        content=[error.model_dump() for error in result.validation],
    )


def _note_input(payload: Any) -> NoteInput:
    """Read note fields from a decoded JSON body; non-objects count as `{}`."""
    if isinstance(payload, dict):
        return NoteInput.model_validate(payload)
    return NoteInput()


@router.get(
    "/",
    response_model=List[NoteResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all notes",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return await service.read_all()


@router.post(
    "/",
    status_code=201,
    response_model=NoteResponse,
    responses={
        400: {"description": "Validation failed", "model": List[FieldError]},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: Any = Body(default=None, description="{title, text, datetime}"),
    service: NoteService = Depends(get_note_service),
):
    """
    Create a note from `{title, text, datetime}`.

    A missing body, or one that is not a JSON object, is treated as an empty
    object, so every field is reported in the 400 error array.
    """
    payload = _note_input(payload)
    result = await service.create(payload.title, payload.text, payload.datetime)

    if not result.success:
        return _validation_failed(result)

    return result.item


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        404: {"description": "Note not found", "model": NotFoundResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: int,
    service: NoteService = Depends(get_note_service),
):
    note = await service.read_one(note_id)
    if note is None:
        return _not_found()
    return note


@router.put(
    "/{note_id}",
    status_code=201,
    response_model=NoteResponse,
    responses={
        400: {"description": "Validation failed", "model": List[FieldError]},
        404: {"description": "Note not found", "model": NotFoundResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Replace a note",
)
async def update_note(
    note_id: int,
    payload: Any = Body(default=None, description="{title, text, datetime}"),
    service: NoteService = Depends(get_note_service),
):
    """
    Replace every field of a note.

    Responds 201 on success, matching POST.
    """
    payload = _note_input(payload)
    result = await service.update(note_id, payload.title, payload.text, payload.datetime)

    if not result.success and result.validation:
        return _validation_failed(result)

    if not result.success and result.not_found:
        return _not_found()

    return result.item


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={
        404: {"description": "Note not found", "model": NotFoundResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    service: NoteService = Depends(get_note_service),
):
    if not await service.delete(note_id):
        return _not_found()
    return Response(status_code=204)
