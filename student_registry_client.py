"""Student registry API client.

This module defines a small client wrapper around the student registry
HTTP API.  It uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`list_students` – return all students ordered by name.
* :meth:`get_student` – fetch a single student by its identifier.
* :meth:`create_student` – register a new student.
* :meth:`replace_student` – replace an existing student wholesale.
* :meth:`delete_student` – remove a student.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The message is taken
from the ``erro`` key of the server's response when present, so callers
can show it to users unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class StudentRegistryClient:
    """Client for interacting with the student registry API."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3333``.
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
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/students``).
            json_body: JSON body to send with the request.
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
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("erro") or err_json.get("mensagem") or str(err_json)
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _student_path(student_id: str) -> str:
        return f"/students/{quote(str(student_id), safe='')}"

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all students.

        Returns:
            A tuple ``(students, error)``.  ``students`` is an empty list
            when the request fails.
        """
        data, error = self._request("GET", "/students")
        return (data or []), error

    def get_student(self, student_id: str) -> Result:
        return self._request("GET", self._student_path(student_id))

    def create_student(self, student: Dict[str, Any]) -> Result:
        return self._request("POST", "/students", json_body=student)

    def replace_student(self, student_id: str, student: Dict[str, Any]) -> Result:
        """Replace the student stored under ``student_id`` with ``student``."""
        return self._request("PUT", self._student_path(student_id), json_body=student)

    def delete_student(self, student_id: str) -> Result:
        return self._request("DELETE", self._student_path(student_id))
