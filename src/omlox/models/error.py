"""Error payload returned by the hub alongside non-2xx statuses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Machine-readable error body, e.g. ``{"type": "not_found", "code": 404, "message": "..."}``."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str | None = None
    code: int | None = None
    message: str | None = None
