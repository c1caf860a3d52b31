"""
Main entrypoint for the Volunteer Hub API.

This module assembles the FastAPI application, sets up logging,
attaches the record store and includes the v1 router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn volunteer_hub_api.app.main:app --reload

Domain errors raised by the services are turned into JSON bodies of
the form ``{"status": ..., "code": ..., "error": ...}`` here, so
endpoint functions never build error responses themselves.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.errors import DomainError, ErrorCode
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .stores.record_store import RecordStore


logger = logging.getLogger(__name__)


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Store to serve.  When omitted, the store selected by
        ``settings.storage_backend`` is built at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup code can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router)

    if store is not None:
        app.state.store = store
    else:
        @app.on_event("startup")
        async def startup_event() -> None:
            app.state.store = RecordStore.from_settings()

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON bodies are client errors like any other bad input.
        logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "status": 400,
                "code": ErrorCode.VALIDATION_ERROR.value,
                "error": "Invalid input: Request body must be a JSON object.",
            },
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
