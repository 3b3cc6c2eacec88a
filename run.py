"""Entry point for the employee directory service.

Serves the FastAPI application with uvicorn.  Host, port and log level
come from the environment variables read by
``employee_directory_api.app.core.config`` (``HOST``, ``PORT`` and
``LOG_LEVEL``; defaults ``0.0.0.0``, ``8000`` and ``INFO``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from employee_directory_api.app.core.config import settings
from employee_directory_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Handlers come from setup_logging, run when the app was imported.
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
