"""
Main entrypoint for the special education student registry API.

This module assembles the FastAPI application: it sets up logging,
loads the seed data into a :class:`StudentStore`, wires the
:class:`StudentService` into ``app.state`` and registers the exception
handlers that turn service errors into ``{"erro": ...}`` responses.
The ``create_app`` function builds the app, which is then instantiated
at module import time as ``app``, e.g.::

    uvicorn special_ed_api.app.main:app --reload

Interactive documentation is served at ``settings.docs_url``
(``/api-docs`` by default).
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import StudentRegistryError
from .core.logging_config import setup_logging
from .core.storage import StudentStore
from .services.student_service import StudentService


logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Corpo da requisição inválido"


async def registry_error_handler(request: Request, exc: StudentRegistryError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s -> 400: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"erro": INVALID_BODY_MESSAGE})


def install_openapi(app: FastAPI) -> None:
    """Generate the OpenAPI document without FastAPI's default 422 responses.

    Body errors are answered with 400 by ``request_validation_handler``,
    so the 422 entry FastAPI adds to every operation with parameters
    would describe a status the API never sends.
    """

    def openapi() -> Dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        for operations in schema.get("paths", {}).values():
            for operation in operations.values():
                operation.get("responses", {}).pop("422", None)
        app.openapi_schema = schema
        return schema

    app.openapi = openapi


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the process-wide settings
        read from the environment; tests pass their own instance to
        point the app at a temporary seed file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that seed loading
    # below is logged.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        docs_url=settings.docs_url,
    )

    store = StudentStore.from_file(settings.data_file, write_back=settings.write_back)
    app.state.settings = settings
    app.state.student_service = StudentService(store)

    app.add_exception_handler(StudentRegistryError, registry_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router)
    install_openapi(app)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
