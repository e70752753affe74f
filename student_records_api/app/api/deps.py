"""
Shared FastAPI dependencies.

The record store and the summary client are created once by
``create_app`` and kept on ``app.state``; route handlers receive them
through these dependencies rather than importing module globals.
"""

import re

from fastapi import Request
from pydantic import ValidationError

from student_records_api.app.core.errors import InvalidID, InvalidInput
from student_records_api.app.schemas.student import StudentIn
from student_records_api.app.services.student_service import StudentStore
from student_records_api.app.services.summary_service import SummaryService

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN = -(2 ** 63)
_ID_MAX = 2 ** 63 - 1


def get_store(request: Request) -> StudentStore:
    return request.app.state.store


def get_summary_service(request: Request) -> SummaryService:
    return request.app.state.summary_service


def parse_student_id(raw: str) -> int:
    """Parse a path segment as a signed 64-bit student ID or raise ``InvalidID``."""
    if not _ID_PATTERN.fullmatch(raw):
        raise InvalidID()
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        raise InvalidID()
    return value


def get_student_id(student_id: str) -> int:
    return parse_student_id(student_id)


async def read_student_body(request: Request) -> StudentIn:
    """Decode the request body as a student record.

    The body is read as JSON whatever the ``Content-Type`` header says,
    so ``curl -d`` (form encoded by default) works as well as a proper
    ``application/json`` request.
    """
    body = await request.body()
    try:
        return StudentIn.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidInput() from exc
