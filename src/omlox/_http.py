"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Collection, Mapping

import httpx
from pydantic import ValidationError

from omlox.exceptions import (
    OmloxAPIError,
    OmloxCancelledError,
    OmloxConfigError,
    OmloxConnectionError,
    OmloxInvalidError,
    OmloxNotFoundError,
    OmloxTimeoutError,
    OmloxValidationError,
)
from omlox.models.error import ErrorResponse

_logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8081/v2"
DEFAULT_TIMEOUT = 30.0

_STATUS_ERRORS: dict[int, type[OmloxAPIError]] = {
    httpx.codes.NOT_FOUND: OmloxNotFoundError,
    httpx.codes.BAD_REQUEST: OmloxInvalidError,
}


def _error_payload(response: httpx.Response) -> ErrorResponse | None:
    try:
        return ErrorResponse.model_validate_json(response.content)
    except ValidationError:
        return None


def _handle_response(response: httpx.Response, expected: Collection[int]) -> httpx.Response:
    """Raise the matching API error unless the status is one of ``expected``."""
    if response.status_code in expected:
        return response
    error_type = _STATUS_ERRORS.get(response.status_code, OmloxAPIError)
    raise error_type(
        status_code=response.status_code,
        body=response.text,
        error=_error_payload(response),
    )


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient.

    The underlying connection pool is shared by all requests and is safe
    for concurrent use; no per-request state is kept on the transport.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        try:
            self._client = httpx.AsyncClient(
                base_url=base_url,
                timeout=timeout,
                headers={"Accept": "application/json", **(headers or {})},
            )
        except httpx.InvalidURL as exc:
            raise OmloxConfigError(f"invalid hub address {base_url!r}: {exc}") from exc

    async def request(
        self,
        method: str,
        path: str,
        *,
        content: bytes | None = None,
        expected: Collection[int] = (httpx.codes.OK,),
        cancel: asyncio.Event | None = None,
    ) -> httpx.Response:
        """Send one request and return the response if its status is expected.

        Setting ``cancel`` aborts the request: before transmission if it is
        already set, or by cancelling the in-flight send otherwise. Either
        way ``OmloxCancelledError`` is raised.
        """
        headers = {"Content-Type": "application/json"} if content is not None else None
        request = self._client.build_request(method, path, content=content, headers=headers)

        try:
            response = await self._send(request, cancel)
        except httpx.TimeoutException as exc:
            raise OmloxTimeoutError(f"context deadline exceeded: {exc}") from exc
        except httpx.DecodingError as exc:
            raise OmloxValidationError(f"Failed to decode response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise OmloxConnectionError(str(exc)) from exc

        _logger.debug("%s %s -> %d", method, request.url, response.status_code)
        return _handle_response(response, expected)

    async def _send(self, request: httpx.Request, cancel: asyncio.Event | None) -> httpx.Response:
        if cancel is None:
            return await self._client.send(request)
        if cancel.is_set():
            raise OmloxCancelledError("context canceled")

        send = asyncio.ensure_future(self._client.send(request))
        cancelled = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({send, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancelled.cancel()
            if not send.done():
                send.cancel()
                await asyncio.gather(send, return_exceptions=True)

        if send.cancelled():
            _logger.debug("%s %s cancelled in flight", request.method, request.url)
            raise OmloxCancelledError("context canceled")
        return send.result()

    async def close(self) -> None:
        await self._client.aclose()
