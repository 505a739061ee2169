"""Entry point for the student registry API.

Starts the FastAPI application with Uvicorn on the host and port taken
from the environment (``HOST`` and ``PORT``, defaults ``0.0.0.0`` and
``3333``).  Other settings such as ``STUDENTS_DATA_FILE`` or
``LOG_LEVEL`` are read by ``special_ed_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from special_ed_api.app.core.config import settings
from special_ed_api.app.main import app


logger = logging.getLogger("special_ed_api")


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Servidor rodando em http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
