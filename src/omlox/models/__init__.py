"""omlox hub data models."""

from omlox.models.error import ErrorResponse
from omlox.models.location import ElevationRefType, Location, LocationProviderType
from omlox.models.trackable import Trackable, TrackableType

__all__ = [
    "ElevationRefType",
    "ErrorResponse",
    "Location",
    "LocationProviderType",
    "Trackable",
    "TrackableType",
]
