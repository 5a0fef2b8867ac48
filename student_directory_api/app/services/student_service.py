"""
Service layer for student records.

This module provides CRUD operations over an in‑memory list of
students.  Records keep their insertion order and receive ids from a
counter that starts at 1 and is never rewound, so an id is never
reused after a deletion.  Nothing is persisted: all records are lost
when the process exits.

A single ``threading.Lock`` guards both the list and the counter.
Every operation holds it for its whole scan or mutation, which
serializes concurrent requests against the store.  Callers only ever
receive copies of the stored records.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from fastapi import Request

from student_directory_api.app.schemas.student import StudentRead, StudentWrite

logger = logging.getLogger(__name__)


class StudentService:
    """In‑memory store of student records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._students: List[StudentRead] = []
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def list_students(self) -> List[StudentRead]:
        """Return every student in insertion order."""
        with self._lock:
            return [student.model_copy() for student in self._students]

    def create_student(self, data: StudentWrite) -> StudentRead:
        """Append a new student and return it with its assigned id.

        Any ``id`` present in ``data`` is ignored.
        """
        with self._lock:
            student = StudentRead(
                id=self._next_id,
                name=data.name,
                faculty=data.faculty,
                gender=data.gender,
            )
            self._next_id += 1
            self._students.append(student)
            logger.info("Created student %s", student.id)
            return student.model_copy()

    def get_student(self, student_id: int) -> Optional[StudentRead]:
        """Retrieve a single student by id, or ``None`` if absent."""
        with self._lock:
            student = self._find(student_id)
            if student is None:
                return None
            return student.model_copy()

    def update_student(self, student_id: int, data: StudentWrite) -> Optional[StudentRead]:
        """Replace ``name``, ``faculty`` and ``gender`` of a student.

        The stored ``id`` is never changed, whatever ``data.id`` holds.
        Returns the updated student or ``None`` if the record does not
        exist.
        """
        with self._lock:
            student = self._find(student_id)
            if student is None:
                return None
            student.name = data.name
            student.faculty = data.faculty
            student.gender = data.gender
            logger.info("Updated student %s", student_id)
            return student.model_copy()

    def delete_student(self, student_id: int) -> bool:
        """Delete a student by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        The relative order of the remaining records is unchanged.
        """
        with self._lock:
            for index, student in enumerate(self._students):
                if student.id == student_id:
                    del self._students[index]
                    logger.info("Deleted student %s", student_id)
                    return True
            return False

    def _find(self, student_id: int) -> Optional[StudentRead]:
        # Caller must hold the lock.
        for student in self._students:
            if student.id == student_id:
                return student
        return None


def get_student_service(request: Request) -> StudentService:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.student_service
