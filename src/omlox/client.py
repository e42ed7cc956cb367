"""Public client class for the omlox hub API."""

from __future__ import annotations

import asyncio
from collections.abc import Collection, Mapping
from functools import cache
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter

from omlox._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport
from omlox.config import OmloxSettings
from omlox.exceptions import OmloxError, OmloxValidationError
from omlox.trackables import TrackablesAPI


@cache
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or str(response_type)


def _validate(response_type: Any, content: bytes) -> Any:
    """Validate a JSON response body against a model or a ``list[...]`` alias."""
    try:
        return _adapter(response_type).validate_json(content)
    except (OmloxError, ValueError) as exc:
        raise OmloxValidationError(
            f"Failed to validate {_type_name(response_type)} response: {exc}"
        ) from exc


def _serialize(body: BaseModel) -> bytes:
    """Serialize a request body, leaving unset fields off the wire."""
    try:
        return body.model_dump_json(exclude_none=True).encode()
    except (OmloxError, ValueError) as exc:
        raise OmloxValidationError(
            f"Failed to serialize {type(body).__name__} request: {exc}"
        ) from exc


class OmloxClient:
    """Asynchronous client for the omlox hub API.

    Usage:
        async with OmloxClient("http://localhost:8081/v2") as hub:
            trackables = await hub.trackables.list()

        # Requests can be aborted through an event:
        cancel = asyncio.Event()
        location = await hub.trackables.get_location(trackable_id, cancel=cancel)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout, headers=headers)
        self.trackables = TrackablesAPI(self)

    @classmethod
    def from_settings(cls, settings: OmloxSettings) -> OmloxClient:
        return cls(base_url=settings.addr, timeout=settings.timeout, headers=settings.headers)

    async def __aenter__(self) -> OmloxClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._transport.close()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: BaseModel | None = None,
        expected: Collection[int] = (httpx.codes.OK,),
        response_type: Any = None,
        cancel: asyncio.Event | None = None,
    ) -> Any:
        """Perform one request against a resource path.

        Returns the decoded ``response_type`` value, or ``None`` when no
        response body is expected. Every failure raises; nothing partially
        decoded is ever returned.
        """
        content = _serialize(body) if body is not None else None
        response = await self._transport.request(
            method, path, content=content, expected=expected, cancel=cancel
        )
        if response_type is None:
            return None
        return _validate(response_type, response.content)
