"""
Student endpoints.

These routes expose a CRUD API over the in‑memory student store:

* ``GET /students`` lists every record in creation order.
* ``POST /students`` creates a record and assigns its id.
* ``GET``, ``PUT`` and ``DELETE`` on ``/students/{id}`` read, replace
  and remove a single record.

Handlers are plain functions rather than coroutines, so FastAPI runs
each request on its worker thread pool; the store's lock is a
``threading.Lock`` and must not be taken on the event loop.

Everything after ``/students/`` is the id, slashes included, and it is
parsed before the method is looked at: a bad id is a 400 whatever the
method, and only a well‑formed id can earn a 405.  Request bodies are
decoded as JSON regardless of the ``Content-Type`` header.
"""

import re
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError

from student_directory_api.app.schemas.student import StudentRead, StudentWrite
from student_directory_api.app.services.student_service import (
    StudentService,
    get_student_service,
)

router = APIRouter()

ITEM_PATH = "/students/{student_id:path}"
ITEM_METHODS = ["GET", "PUT", "DELETE"]

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def parse_student_id(student_id: str) -> int:
    """Parse the ``{id}`` path segment as a signed base‑10 integer.

    Only an optional sign followed by ASCII digits is accepted, and the
    value must fit a signed 64‑bit integer.  Anything else is a 400,
    raised before the store is touched.
    """
    if not _ID_PATTERN.fullmatch(student_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid student id")
    value = int(student_id)
    if not _ID_MIN <= value <= _ID_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid student id")
    return value


async def read_student_body(request: Request) -> StudentWrite:
    """Decode the raw request body into a ``StudentWrite``.

    The content type is not consulted.  Invalid JSON, a non‑object body
    or a wrongly typed field is a 400.
    """
    body = await request.body()
    try:
        return StudentWrite.model_validate_json(body)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed student")


@router.get("/students", response_model=List[StudentRead])
def list_students(
    service: StudentService = Depends(get_student_service),
) -> List[StudentRead]:
    """Return all students as a JSON array (empty if there are none)."""
    return service.list_students()


@router.post("/students", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
def create_student(
    student_in: StudentWrite = Depends(read_student_body),
    service: StudentService = Depends(get_student_service),
) -> StudentRead:
    """Create a new student.  Any ``id`` in the body is ignored."""
    return service.create_student(student_in)


@router.get(ITEM_PATH, response_model=StudentRead)
def get_student(
    student_id: int = Depends(parse_student_id),
    service: StudentService = Depends(get_student_service),
) -> StudentRead:
    """Retrieve a single student by id.

    Returns HTTP 404 if the record is not found.
    """
    student = service.get_student(student_id)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.put(ITEM_PATH, response_model=StudentRead)
def update_student(
    student_id: int = Depends(parse_student_id),
    student_in: StudentWrite = Depends(read_student_body),
    service: StudentService = Depends(get_student_service),
) -> StudentRead:
    """Replace the name, faculty and gender of a student."""
    student = service.update_student(student_id, student_in)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.delete(ITEM_PATH, status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int = Depends(parse_student_id),
    service: StudentService = Depends(get_student_service),
) -> Response:
    """Delete a student; HTTP 404 if there is no such record."""
    deleted = service.delete_student(student_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route(
    ITEM_PATH,
    methods=["POST", "PATCH", "HEAD", "OPTIONS", "TRACE"],
    include_in_schema=False,
)
def student_method_not_allowed(student_id: int = Depends(parse_student_id)) -> None:
    # Registered after the real item routes so it only sees the other methods.
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": ", ".join(ITEM_METHODS)},
    )
