from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    ok: bool = True
    service: str = "jsondrop"
    storage: str = Field(..., description="'local' or 'gcs'")


class AppendResponse(BaseModel):
    success: bool = True
    count: int = Field(..., description="Number of records after the append")


class ErrorResponse(BaseModel):
    """
    Body of every 4xx/5xx response.

    Storage failures put the backend's message here unchanged.
    """
    error: str
