"""
Student endpoints.

These routes expose the CRUD API over the student collection.  Request
bodies are accepted as plain JSON objects so that extra fields pass
through untouched; the required-field rules live in
``StudentService``.  Errors raised by the service are rendered by the
application-wide exception handler as ``{"erro": ...}`` bodies.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request, status

from special_ed_api.app.schemas.student import ErrorResponse, MessageResponse, Student
from special_ed_api.app.services.student_service import StudentService

router = APIRouter()

STUDENT_EXAMPLE: Dict[str, Any] = {
    "id": "x1",
    "name": "Ana",
    "age": 7,
    "parents": "Maria e João",
    "phone": "(11) 98765-4321",
    "special": "TEA",
    "status": "ativo",
}

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Usuário não encontrado"}}
INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Erro na validação do usuário"}}


def get_student_service(request: Request) -> StudentService:
    """Return the service bound to the running application."""
    return request.app.state.student_service


@router.get("", response_model=List[Student], summary="Retorna todos os usuários")
async def list_students(service: StudentService = Depends(get_student_service)) -> List[Dict[str, Any]]:
    """Return all students ordered by name, ignoring case."""
    return await service.list_students()


@router.get(
    "/{student_id}",
    response_model=Student,
    responses=NOT_FOUND,
    summary="Retorna um usuário específico",
)
async def get_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> Dict[str, Any]:
    return await service.get_student(student_id)


@router.post(
    "",
    response_model=Student,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID,
    summary="Insere um novo usuário",
)
async def create_student(
    payload: Optional[Dict[str, Any]] = Body(None, example=STUDENT_EXAMPLE),
    service: StudentService = Depends(get_student_service),
) -> Dict[str, Any]:
    """Create a student.

    Fails with 400 when the ``id`` is already in use or when any of
    ``id``, ``name``, ``age``, ``parents``, ``phone``, ``special`` or
    ``status`` is missing.
    """
    return await service.create_student(payload)


@router.put(
    "/{student_id}",
    response_model=Student,
    responses={**NOT_FOUND, **INVALID},
    summary="Substitui um usuário existente",
)
async def replace_student(
    student_id: str,
    payload: Optional[Dict[str, Any]] = Body(None, example=STUDENT_EXAMPLE),
    service: StudentService = Depends(get_student_service),
) -> Dict[str, Any]:
    """Replace a student wholesale with the request body.

    The path id is only used for the lookup; the stored record keeps
    the ``id`` found in the body.
    """
    return await service.replace_student(student_id, payload)


@router.delete(
    "/{student_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND,
    summary="Deleta um usuário existente",
)
async def delete_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> Dict[str, str]:
    return await service.delete_student(student_id)
