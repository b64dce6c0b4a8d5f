from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings
from ..storage import AuthorizationFailure, StorageError
from .deps import lifespan
from .routers import router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(
        title="jsondrop",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings.from_env()

    @app.exception_handler(AuthorizationFailure)
    async def authorization_failure(request: Request, exc: AuthorizationFailure) -> JSONResponse:
        return JSONResponse(status_code=401, content={"error": str(exc)})

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure", extra={"path": request.url.path, "error": str(exc)})
        return JSONResponse(status_code=500, content={"error": str(exc)})

    app.include_router(router)
    return app


# ASGI entrypoint (uvicorn jsondrop.api.run:app)
app = create_app()
