"""
Service layer for student records.

``StudentService`` implements the registry's business rules on top of
a :class:`StudentStore`:

* listing sorts by name, case-insensitively, without touching the
  stored order;
* create and replace check the required fields in a fixed order and
  stop at the first missing one;
* create additionally refuses an ``id`` that is already in use;
* replace stores the request body verbatim, so the stored ``id`` is
  whatever the body carries even if it differs from the path.

Failures are reported by raising the exceptions in ``core.errors``;
the API layer never inspects return values for ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from special_ed_api.app.core.errors import (
    DuplicateStudentIdError,
    SeedDataError,
    StudentNotFoundError,
    StudentValidationError,
)
from special_ed_api.app.core.storage import Student, StudentStore


logger = logging.getLogger(__name__)

# Checked in this order; the first missing field is reported.
REQUIRED_FIELDS: Tuple[str, ...] = ("id", "name", "age", "parents", "phone", "special", "status")

DELETED_MESSAGE = "Usuário deletado com sucesso."


def _sort_key(record: Student) -> str:
    return str(record.get("name", "")).lower()


class StudentService:
    """Business logic for the student collection."""

    def __init__(self, store: StudentStore) -> None:
        self.store = store
        self._check_seed()

    def _check_seed(self) -> None:
        for position, record in enumerate(self.store.all()):
            missing = self.first_missing_field(record)
            if missing is not None:
                raise SeedDataError(
                    f"Seed record at position {position} is missing required field '{missing}'"
                )

    @staticmethod
    def first_missing_field(record: Dict[str, Any]) -> Optional[str]:
        """Return the first required field that is absent or falsy."""
        for field in REQUIRED_FIELDS:
            # Empty lists and objects count as missing too.
            if not record.get(field):
                return field
        return None

    @classmethod
    def validate(cls, record: Dict[str, Any]) -> None:
        """Raise :class:`StudentValidationError` for the first missing field."""
        missing = cls.first_missing_field(record)
        if missing is not None:
            raise StudentValidationError(missing)

    async def list_students(self) -> List[Student]:
        """Return every student sorted by name (case-insensitive, stable)."""
        return sorted(self.store.all(), key=_sort_key)

    async def get_student(self, student_id: str) -> Student:
        student = self.store.find(student_id)
        if student is None:
            logger.debug("Student %s not found", student_id)
            raise StudentNotFoundError(student_id)
        return student

    async def create_student(self, payload: Optional[Dict[str, Any]]) -> Student:
        """Validate and append a new student.

        The duplicate-id check runs before the required-field checks, so
        a payload reusing an existing id is reported as a duplicate even
        if it is otherwise incomplete.
        """
        record = dict(payload or {})
        with self.store.locked():
            student_id = record.get("id")
            if student_id is not None and self.store.find_index(student_id) is not None:
                logger.info("Rejected student with duplicate id %s", student_id)
                raise DuplicateStudentIdError(student_id)
            self.validate(record)
            self.store.append(record)
        logger.info("Created student %s", record["id"])
        return record

    async def replace_student(self, student_id: str, payload: Optional[Dict[str, Any]]) -> Student:
        """Replace the student found under ``student_id`` with ``payload``.

        The body is stored as-is.  If its ``id`` differs from
        ``student_id`` the record changes identity and is no longer
        reachable under the old id.
        """
        record = dict(payload or {})
        with self.store.locked():
            index = self.store.find_index(student_id)
            if index is None:
                raise StudentNotFoundError(student_id)
            self.validate(record)
            self.store.replace(index, record)
        if record["id"] != student_id:
            logger.warning(
                "Student %s replaced by a record with id %s", student_id, record["id"]
            )
        logger.info("Replaced student %s", student_id)
        return record

    async def delete_student(self, student_id: str) -> Dict[str, str]:
        with self.store.locked():
            index = self.store.find_index(student_id)
            if index is None:
                raise StudentNotFoundError(student_id)
            self.store.remove(index)
        logger.info("Deleted student %s", student_id)
        return {"mensagem": DELETED_MESSAGE}
