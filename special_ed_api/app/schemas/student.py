"""
Pydantic schemas for student records.

Students are free-form JSON objects: the seven fields below are
required, but only their presence is checked (see
``StudentService.validate``), and any extra keys are stored and returned
untouched.  The models therefore accept any value type and allow extra
fields; they exist to describe payloads in the generated documentation
and to shape responses.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class Student(BaseModel):
    """A student record as stored and returned by the API."""

    id: Any = Field(..., description="Identificador único do aluno", example="1")
    name: Any = Field(..., description="Nome do aluno", example="Ana Souza")
    age: Any = Field(..., description="Idade", example=7)
    parents: Any = Field(..., description="Responsáveis", example="Maria e João Souza")
    phone: Any = Field(..., description="Telefone de contato", example="(11) 98765-4321")
    special: Any = Field(..., description="Necessidade especial", example="TEA")
    status: Any = Field(..., description="Situação da matrícula", example="ativo")

    model_config = {
        "extra": "allow",
    }


class ErrorResponse(BaseModel):
    """Error body returned for 400 and 404 responses."""

    erro: str = Field(..., example="Usuário não encontrado")
    campo: Optional[str] = Field(None, description="Campo que causou o erro, quando aplicável", example="name")


class MessageResponse(BaseModel):
    """Acknowledgement returned by delete operations."""

    mensagem: str = Field(..., example="Usuário deletado com sucesso.")
