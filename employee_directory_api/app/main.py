"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging, creates
the employee repository and includes the dispatcher router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn employee_directory_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints.dispatcher import method_not_supported
from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.employee_service import EmployeeRepository

logger = logging.getLogger(__name__)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer methods the router does not accept with the plain-text 405."""
    if exc.status_code == 405:
        logger.warning("Rejected unsupported method %s %s", request.method, request.scope["path"])
        return method_not_supported()
    return await http_exception_handler(request, exc)


def create_app(repository: Optional[EmployeeRepository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[EmployeeRepository]
        Store backing the application.  When omitted a new one is
        created, seeded unless ``settings.seed_employees`` is off.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    setup_logging(settings)

    # The dispatcher owns every path, including the ones FastAPI would
    # use for its interactive docs.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    if repository is None:
        repository = EmployeeRepository() if settings.seed_employees else EmployeeRepository(seed=())
    app.state.repository = repository
    logger.info("Employee repository ready with %d records", len(repository))

    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
