"""Trackables endpoints of the omlox hub API."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING
from uuid import UUID

import httpx

from omlox.exceptions import OmloxValidationError
from omlox.models.location import Location
from omlox.models.trackable import Trackable

if TYPE_CHECKING:
    from omlox.client import OmloxClient


def _path(trackable_id: UUID | str, *sub: str) -> str:
    try:
        trackable_id = UUID(str(trackable_id))
    except ValueError as exc:
        raise OmloxValidationError(f"invalid trackable id {trackable_id!r}") from exc
    return "/".join(["/trackables", str(trackable_id), *sub])


class TrackablesAPI:
    """Trackable operations, reachable as ``OmloxClient.trackables``.

    Every method is a thin wrapper over the client's generic request and
    accepts an optional ``cancel`` event that aborts the request when set.
    Errors from the client are passed through unchanged.
    """

    def __init__(self, client: OmloxClient) -> None:
        self._client = client

    async def list(self, *, cancel: asyncio.Event | None = None) -> list[Trackable]:
        """Get every trackable with all of its fields."""
        return await self._client._request(
            "GET", "/trackables/summary", response_type=list[Trackable], cancel=cancel
        )

    async def ids(self, *, cancel: asyncio.Event | None = None) -> list[UUID]:
        """Get the ids of every trackable."""
        return await self._client._request(
            "GET", "/trackables", response_type=list[UUID], cancel=cancel
        )

    async def create(self, trackable: Trackable, *, cancel: asyncio.Event | None = None) -> Trackable:
        """Create a trackable and return it as stored by the hub."""
        return await self._client._request(
            "POST",
            "/trackables",
            body=trackable,
            expected=(httpx.codes.CREATED,),
            response_type=Trackable,
            cancel=cancel,
        )

    async def get(self, trackable_id: UUID | str, *, cancel: asyncio.Event | None = None) -> Trackable:
        """Get a trackable by id; raises ``OmloxNotFoundError`` if it does not exist."""
        return await self._client._request(
            "GET", _path(trackable_id), response_type=Trackable, cancel=cancel
        )

    async def update(
        self,
        trackable: Trackable,
        trackable_id: UUID | str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> None:
        """Replace the trackable stored under ``trackable_id``."""
        await self._client._request("PUT", _path(trackable_id), body=trackable, cancel=cancel)

    async def delete(self, trackable_id: UUID | str, *, cancel: asyncio.Event | None = None) -> None:
        await self._client._request("DELETE", _path(trackable_id), cancel=cancel)

    async def delete_all(self, *, cancel: asyncio.Event | None = None) -> None:
        await self._client._request("DELETE", "/trackables", cancel=cancel)

    async def get_location(
        self, trackable_id: UUID | str, *, cancel: asyncio.Event | None = None
    ) -> Location:
        """Get the most recent location of a trackable.

        The hub answers 404 both for unknown trackables and for trackables
        without a location yet; both raise ``OmloxNotFoundError``.
        """
        return await self._client._request(
            "GET", _path(trackable_id, "location"), response_type=Location, cancel=cancel
        )
