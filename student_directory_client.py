"""Student Directory API client.

This module defines a small client wrapper around the Student
Directory REST API.  It uses the ``requests`` library internally and
exposes one method per endpoint:

* :meth:`list_students` – return every stored student.
* :meth:`get_student` – fetch a single student by its identifier.
* :meth:`create_student` – add a student and learn its assigned id.
* :meth:`update_student` – replace the fields of an existing student.
* :meth:`delete_student` – remove a student.

Methods never raise on HTTP or network failures.  Each returns a tuple
``(result, error)`` where ``error`` is ``None`` on success, or a
dictionary with keys ``status_code`` and ``message`` otherwise.  The
service sends no error bodies, so ``message`` is derived from the
status line.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StudentDirectoryAPI:
    """Client for interacting with the Student Directory API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8090",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8090``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/students``).
            json_body: JSON body to send with the request (for POST/PUT).
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty responses) and
            ``error`` is ``None``. On failure, ``data`` is ``None``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.reason if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _student_payload(name: str, faculty: str, gender: str) -> Dict[str, str]:
        return {"name": name, "faculty": faculty, "gender": gender}

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all students.

        Returns:
            A tuple ``(students, error)``. ``students`` is empty on failure.
        """
        data, error = self._request("GET", "/students")
        if error:
            return [], error
        return data or [], None

    def get_student(self, student_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single student by ID."""
        return self._request("GET", f"/students/{student_id}")

    def create_student(
        self, name: str, faculty: str, gender: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a student.

        Returns:
            A tuple ``(student, error)``; ``student`` includes the id
            assigned by the server.
        """
        return self._request("POST", "/students", json_body=self._student_payload(name, faculty, gender))

    def update_student(
        self, student_id: Any, name: str, faculty: str, gender: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the name, faculty and gender of a student."""
        return self._request(
            "PUT",
            f"/students/{student_id}",
            json_body=self._student_payload(name, faculty, gender),
        )

    def delete_student(self, student_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a student.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/students/{student_id}")
        if error:
            return False, error
        return True, None
