"""
Top‑level router of the API.

This router aggregates the domain‑specific routers.  The student
routes define their full paths (``/students`` and
``/students/{student_id}``) internally, so no prefix is applied here.
"""

from fastapi import APIRouter

from .endpoints import students

router = APIRouter()

router.include_router(students.router, tags=["students"])
