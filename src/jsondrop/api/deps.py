from __future__ import annotations

import hmac
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Depends, FastAPI, Header, Request

from ..config import Settings
from ..storage import AuthorizationFailure, DataRepository, build_blob_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    App startup/shutdown:
      - pick the storage backend once from settings
      - wrap it in the repository every request shares
    """
    settings: Settings = app.state.settings
    store = build_blob_store(settings)
    app.state.repository = DataRepository(store)
    logger.info(
        "jsondrop ready",
        extra={"storage": store.kind, "location": store.describe(), "port": settings.port},
    )
    try:
        yield
    finally:
        logger.info("jsondrop shutting down")


async def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_repository(request: Request) -> DataRepository:
    """
    Dependency to retrieve the DataRepository from app.state.
    """
    repo = getattr(request.app.state, "repository", None)
    if repo is None:
        raise RuntimeError("DataRepository not available on app.state (lifespan not initialized).")
    return repo


def _check_secret(presented: Optional[str], expected: str) -> bool:
    if presented is None:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


async def require_send_key(
    x_send_key: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not _check_secret(x_send_key, settings.send_key):
        logger.warning("Rejected append", extra={"reason": "invalid send key"})
        raise AuthorizationFailure("Invalid send key")


async def require_view_key(
    x_view_key: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not _check_secret(x_view_key, settings.view_key):
        logger.warning("Rejected list", extra={"reason": "invalid view key"})
        raise AuthorizationFailure("Invalid view key")
