"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

BASE_URL = "http://hub.test/v2"

TRACKABLE_ID = "9b59961e-2a6a-4712-86e7-aba5a3e8be1f"
OTHER_TRACKABLE_ID = "550e8400-e29b-41d4-a716-446655440000"


SAMPLE_TRACKABLE = {
    "id": TRACKABLE_ID,
    "type": "omlox",
    "name": "Test Trackable",
    "geometry": {
        "type": "Polygon",
        "coordinates": [
            [
                [7.815694, 48.13021599999995],
                [7.815724999999997, 48.13031],
                [7.816582, 48.13018799999995],
                [7.816551, 48.13009399999996],
                [7.815694, 48.13021599999995],
            ]
        ],
    },
    "location_providers": ["ac:23:3f:ac:a3:55"],
    "properties": {"test": "value"},
}

SAMPLE_TRACKABLE_SUMMARY = {
    "id": TRACKABLE_ID,
    "type": "omlox",
    "name": "Test Trackable",
}

SAMPLE_LOCATION = {
    "position": {"type": "Point", "coordinates": [7.815694, 48.13021599999995, 1.5]},
    "source": "test-source",
    "provider_type": "uwb",
    "provider_id": "ac:23:3f:ac:a3:55",
    "trackables": [TRACKABLE_ID],
    "timestamp_generated": "2024-05-01T10:00:00Z",
    "timestamp_sent": "2024-05-01T10:00:00.250Z",
}

SAMPLE_ERROR = {
    "type": "not_found",
    "code": 404,
    "message": "trackable not found",
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep OMLOX_* variables of the developer's shell out of the tests."""
    for name in ("OMLOX_ADDR", "OMLOX_TIMEOUT", "OMLOX_TOKEN", "OMLOX_DEBUG"):
        monkeypatch.delenv(name, raising=False)
