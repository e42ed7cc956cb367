"""Location report model."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, JsonValue, field_validator

from omlox.geometry import PointGeometry


class LocationProviderType(StrEnum):
    UWB = "uwb"
    GPS = "gps"
    WIFI = "wifi"
    RFID = "rfid"
    IBEACON = "ibeacon"
    VIRTUAL = "virtual"
    UNKNOWN = "unknown"


class ElevationRefType(StrEnum):
    FLOOR = "floor"
    WGS84 = "wgs84"


class Location(BaseModel):
    """Position of a location provider and the trackables it is attached to.

    The position is a 2D point unless the report carries an elevation, in
    which case it is 3D. Timestamps are UTC and ``None`` means unknown.
    """

    model_config = ConfigDict(frozen=True)

    position: PointGeometry
    source: str
    provider_type: LocationProviderType
    provider_id: str
    trackables: list[UUID] = []
    timestamp_generated: datetime | None = None
    timestamp_sent: datetime | None = None
    crs: str | None = None
    associated: bool | None = None
    accuracy: float | None = None
    floor: float | None = None
    true_heading: float | None = None
    magnetic_heading: float | None = None
    heading_accuracy: float | None = None
    elevation_ref: ElevationRefType | None = None
    speed: float | None = None
    course: float | None = None
    properties: JsonValue | None = None

    @field_validator("timestamp_generated", "timestamp_sent")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
