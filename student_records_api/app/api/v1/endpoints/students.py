"""
Student endpoints for API v1.

CRUD routes over the in-memory store plus ``GET /{id}/summary``, which
forwards a student to the text-generation service.  Routes are matched
in the order they are declared here, and the order matters:

* ``""``              collection: ``GET`` lists, ``POST`` creates
* ``"/"``             bare prefix with no ID: always ``Invalid endpoint``
* ``"/{id}/summary"`` summary, checked before the plain ID route
* ``"/{id}"``         single student: ``GET``, ``PUT``, ``DELETE``
* ``"/{rest:path}"``  anything deeper cannot be an ID: ``Invalid ID``

A method not listed for a matching path is answered with 405.  The ID
and the body are both decoded by dependencies, ID first, so a request
with a bad ID is reported as ``Invalid ID`` whatever its body holds.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from student_records_api.app.api.deps import get_store, get_student_id, get_summary_service, read_student_body
from student_records_api.app.core.errors import InvalidEndpoint, InvalidID, StudentNotFound
from student_records_api.app.schemas.student import StudentIn, StudentRead, SummaryRead
from student_records_api.app.services.student_service import StudentStore
from student_records_api.app.services.summary_service import SummaryService

router = APIRouter()

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.get("", response_model=List[StudentRead])
def list_students(store: StudentStore = Depends(get_store)) -> List[StudentRead]:
    """Return every student.  Order is unspecified."""
    return store.list_students()


@router.post("", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
def create_student(
    student_in: StudentIn = Depends(read_student_body),
    store: StudentStore = Depends(get_store),
) -> StudentRead:
    """Create a student.  Any ``id`` in the body is ignored."""
    return store.create(student_in)


@router.api_route("/", methods=_ALL_METHODS, include_in_schema=False)
def missing_student_id() -> None:
    raise InvalidEndpoint()


@router.get("/{student_id}/summary", response_model=SummaryRead)
def get_student_summary(
    student_id: int = Depends(get_student_id),
    store: StudentStore = Depends(get_store),
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryRead:
    """Generate a natural-language summary of a student.

    The summary is built from the record as it was when looked up;
    changes made while the generation service is working are not
    reflected.  Returns 500 if the service fails.
    """
    student = store.get(student_id)
    if student is None:
        raise StudentNotFound()
    return SummaryRead(summary=summary_service.summarize(student))


@router.get("/{student_id}", response_model=StudentRead)
def get_student(
    student_id: int = Depends(get_student_id),
    store: StudentStore = Depends(get_store),
) -> StudentRead:
    student = store.get(student_id)
    if student is None:
        raise StudentNotFound()
    return student


@router.put("/{student_id}", response_model=StudentRead)
def update_student(
    student_id: int = Depends(get_student_id),
    student_in: StudentIn = Depends(read_student_body),
    store: StudentStore = Depends(get_store),
) -> StudentRead:
    """Replace a student.  The stored ``id`` always matches the path."""
    student = store.update(student_id, student_in)
    if student is None:
        raise StudentNotFound()
    return student


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_student(
    student_id: int = Depends(get_student_id),
    store: StudentStore = Depends(get_store),
) -> Response:
    """Delete a student.  Succeeds whether or not the student existed."""
    store.delete(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route("/{rest:path}", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
def unroutable_student_path(rest: str) -> None:
    raise InvalidID()
