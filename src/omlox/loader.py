"""Batch loading of resources from JSON documents."""

from __future__ import annotations

from typing import IO, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from omlox.exceptions import OmloxValidationError


T = TypeVar("T")


class ResourceLoader(Generic[T]):
    """Accumulate resources of one type from one or more JSON array documents.

    Usage:
        loader = ResourceLoader(Trackable)
        for path in paths:
            with open(path, "rb") as f:
                loader.load_json(f)
        trackables = loader.resources

    Each document is all-or-nothing: a malformed one raises without
    appending anything, and resources from earlier documents are kept.
    Order is preserved within and across documents.
    """

    def __init__(self, model: type[T]) -> None:
        self._model = model
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[model])
        self._resources: list[T] = []

    def __len__(self) -> int:
        return len(self._resources)

    @property
    def resources(self) -> list[T]:
        return list(self._resources)

    def load_json(self, stream: IO[bytes] | IO[str]) -> None:
        """Decode one JSON array from ``stream`` and append its elements."""
        try:
            loaded = self._adapter.validate_json(stream.read())
        except ValidationError as exc:
            raise OmloxValidationError(
                f"Failed to load {self._model.__name__} resources: {exc}"
            ) from exc
        self._resources.extend(loaded)
