"""Custom exceptions for the omlox client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from omlox.models.error import ErrorResponse


class OmloxError(Exception):
    """Base exception for all omlox client errors."""


class OmloxConfigError(OmloxError):
    """Raised when connection settings are invalid."""


class OmloxConnectionError(OmloxError):
    """Raised when the client cannot reach the hub (DNS, refused, TLS)."""


class OmloxCancelledError(OmloxError):
    """Raised when a request is cancelled before or while it is in flight."""


class OmloxTimeoutError(OmloxCancelledError):
    """Raised when a request deadline expires."""


class OmloxAPIError(OmloxError):
    """Raised when the hub answers with an unexpected status code."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        error: ErrorResponse | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        detail = error.message if error is not None and error.message else body
        message = f"HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class OmloxNotFoundError(OmloxAPIError):
    """Raised on 404: the resource (or its location) does not exist."""


class OmloxInvalidError(OmloxAPIError):
    """Raised on 400: the hub rejected the request body."""


class OmloxValidationError(OmloxError):
    """Raised when a body cannot be (de)serialized into the domain shape."""


class MalformedGeometryError(OmloxValidationError, ValueError):
    """Raised when a GeoJSON geometry is malformed or unsupported.

    Also a ``ValueError`` so pydantic reports it as a field validation
    failure while decoding a model.
    """
