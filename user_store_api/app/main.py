"""
Main entrypoint for the User Store API.

This module assembles the FastAPI application: it sets up logging,
opens the ``UserStore`` backed by the configured snapshot file,
registers the error handlers and includes the versioned routers.
The ``create_app`` function builds the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn user_store_api.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import PathLike
from .services.user_service import UserStore

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as HTTP 400 instead of 422."""
    logger.info("Rejected %s %s: invalid input", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(data_file: Optional[PathLike] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    data_file : Optional[PathLike]
        Snapshot path for the user store.  Defaults to
        ``settings.data_file``.

    Returns
    -------
    FastAPI
        A configured application whose store is available as
        ``app.state.user_store``.
    """
    # Logging first so that loading the snapshot below is logged.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_store = UserStore.open(data_file if data_file is not None else settings.data_file)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
