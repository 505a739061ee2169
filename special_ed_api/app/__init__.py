"""
Application package initializer.

The project is organised into layers: ``core`` (configuration,
logging, errors and the in-memory store), ``schemas`` (pydantic
models), ``services`` (business rules) and ``api`` (FastAPI routers).
"""

from .main import app  # noqa: F401
