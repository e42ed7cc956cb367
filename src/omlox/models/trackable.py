"""Trackable model: an entity the hub follows through its location providers."""

from __future__ import annotations

from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, JsonValue

from omlox.geometry import Geometry


class TrackableType(StrEnum):
    OMLOX = "omlox"
    VIRTUAL = "virtual"


class Trackable(BaseModel):
    """A trackable as stored by the hub.

    ``id`` is assigned by the hub and never changes afterwards. Fields left
    as ``None`` are omitted from request bodies so partial updates do not
    overwrite server-side values.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID | None = None
    type: TrackableType
    name: str | None = None
    geometry: Geometry | None = None
    extrusion: float | None = None
    location_providers: list[str] | None = None
    fence_timeout: int | None = None
    exit_tolerance: float | None = None
    tolerance_timeout: int | None = None
    exit_delay: int | None = None
    radius: float | None = None
    properties: JsonValue | None = None
