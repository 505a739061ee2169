"""
Error taxonomy for the student registry.

Services raise these exceptions; the application registers a single
exception handler (see ``main.create_app``) that turns any
``StudentRegistryError`` into a JSON body of the form
``{"erro": "<mensagem>"}`` with the matching HTTP status code.  Messages
are kept in Portuguese because existing clients display them verbatim.
"""

from typing import Any, Dict, Optional

from fastapi import status


NOT_FOUND_MESSAGE = "Usuário não encontrado"

# Messages returned when a required field is missing, keyed by field.
MISSING_FIELD_MESSAGES: Dict[str, str] = {
    "id": "Usuário precisa ter um 'id'",
    "name": "Usuário precisa ter um 'name'",
    "age": "Usuário precisa ter um 'age'",
    "parents": "Usuário precisa ter 'parents'",
    "phone": "Usuário precisa ter um 'phone'",
    "special": "Usuário precisa ter um 'special'",
    "status": "Usuário precisa ter um 'status'",
}


class StudentRegistryError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"erro": self.message}
        if self.field:
            payload["campo"] = self.field
        return payload


class StudentNotFoundError(StudentRegistryError):
    """No student has the requested ``id``."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, student_id: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.student_id = student_id


class StudentValidationError(StudentRegistryError):
    """A required field is absent or falsy."""

    def __init__(self, field: str) -> None:
        message = MISSING_FIELD_MESSAGES.get(field, f"Usuário precisa ter um '{field}'")
        super().__init__(message, field=field)


class DuplicateStudentIdError(StudentRegistryError):
    """A student with the same ``id`` already exists."""

    def __init__(self, student_id: Any) -> None:
        super().__init__(
            f"O ID {student_id} já está em uso. Escolha um ID diferente.", field="id"
        )
        self.student_id = student_id


class SeedDataError(RuntimeError):
    """The seed file cannot be read or contains invalid records."""
