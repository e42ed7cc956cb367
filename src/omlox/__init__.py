"""omlox — Typed async Python client for the omlox hub API."""

from omlox.client import OmloxClient
from omlox.config import OmloxSettings
from omlox.exceptions import (
    MalformedGeometryError,
    OmloxAPIError,
    OmloxCancelledError,
    OmloxConfigError,
    OmloxConnectionError,
    OmloxError,
    OmloxInvalidError,
    OmloxNotFoundError,
    OmloxTimeoutError,
    OmloxValidationError,
)
from omlox.geometry import decode_geometry, encode_geometry
from omlox.loader import ResourceLoader
from omlox.models import (
    ElevationRefType,
    ErrorResponse,
    Location,
    LocationProviderType,
    Trackable,
    TrackableType,
)

__all__ = [
    "ElevationRefType",
    "ErrorResponse",
    "Location",
    "LocationProviderType",
    "MalformedGeometryError",
    "OmloxAPIError",
    "OmloxCancelledError",
    "OmloxClient",
    "OmloxConfigError",
    "OmloxConnectionError",
    "OmloxError",
    "OmloxInvalidError",
    "OmloxNotFoundError",
    "OmloxSettings",
    "OmloxTimeoutError",
    "OmloxValidationError",
    "ResourceLoader",
    "Trackable",
    "TrackableType",
    "decode_geometry",
    "encode_geometry",
]

__version__ = "0.1.0"
