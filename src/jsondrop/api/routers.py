from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from ..storage import DataRepository, loads_strict
from .deps import get_repository, require_send_key, require_view_key
from .models import AppendResponse, ErrorResponse, HealthResponse
from .viewer import VIEWER_HTML

logger = logging.getLogger(__name__)

router = APIRouter()

_ERRORS = {401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/health", response_model=HealthResponse)
async def health(repo: DataRepository = Depends(get_repository)) -> HealthResponse:
    return HealthResponse(storage=repo.store.kind)


@router.post(
    "/data",
    response_model=AppendResponse,
    responses={400: {"model": ErrorResponse}, **_ERRORS},
    dependencies=[Depends(require_send_key)],
)
async def append_data(request: Request, repo: DataRepository = Depends(get_repository)):
    """
    Append the request body as one record.

    The body is read only after the send key has been accepted. An empty body
    is stored as `{}`.
    """
    raw = await request.body()
    if not raw.strip():
        payload = {}
    else:
        try:
            payload = loads_strict(raw)
        except ValueError:
            return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

    count = await repo.append_record(payload)
    logger.info("Record appended", extra={"count": count})
    return AppendResponse(count=count)


@router.get("/data", responses=_ERRORS, dependencies=[Depends(require_view_key)])
async def list_data(repo: DataRepository = Depends(get_repository)) -> JSONResponse:
    records = await repo.load_records()
    return JSONResponse(content=records)


@router.get("/view", response_class=HTMLResponse)
async def view_page() -> HTMLResponse:
    return HTMLResponse(content=VIEWER_HTML)
