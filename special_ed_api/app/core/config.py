"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
override them via environment variables (``PORT``, ``STUDENTS_DATA_FILE``
and so on).
"""

import os
from dataclasses import dataclass
from pathlib import Path


# Seed file shipped with the package.
DEFAULT_DATA_FILE = str(Path(__file__).resolve().parent.parent.parent / "data" / "students.json")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "API Gestão de Ensino Especial")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv(
        "API_DESCRIPTION", "API para gerenciar entidades de alunos, professores, etc."
    )
    # Swagger UI location.  The OpenAPI document itself stays at
    # ``/openapi.json``.
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3333"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # JSON file with the initial array of students.  Relative paths are
    # resolved against the current working directory.
    data_file: str = os.getenv("STUDENTS_DATA_FILE", DEFAULT_DATA_FILE)

    # When enabled, every successful create/replace/delete rewrites
    # ``data_file`` with the current collection.
    write_back: bool = _env_flag("STUDENTS_WRITE_BACK")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
