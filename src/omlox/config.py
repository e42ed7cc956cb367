"""Connection settings for the omlox client."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from omlox._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from omlox.exceptions import OmloxConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def parse_header(raw: str) -> tuple[str, str]:
    """Split a ``Key=Value`` header override."""
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise OmloxConfigError(f"invalid header {raw!r}, expected KEY=VALUE")
    return key.strip(), value.strip()


@dataclasses.dataclass(frozen=True)
class OmloxSettings:
    """Client connection settings.

    Parameters
    ----------
    addr : str
        Hub API base URL, including the version prefix.
    timeout : float
        Request deadline in seconds.
    headers : Mapping[str, str]
        Extra headers sent with every request (credentials, tenant ids).
    debug : bool
        Log every request at DEBUG level.
    """

    addr: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    debug: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> OmloxSettings:
        """Create settings from ``OMLOX_*`` environment variables.

        Reads ``OMLOX_ADDR``, ``OMLOX_TIMEOUT``, ``OMLOX_TOKEN`` (sent as a
        bearer ``Authorization`` header) and ``OMLOX_DEBUG``. Explicit
        keyword arguments override environment values; ``None`` overrides
        are ignored.
        """
        env = os.environ
        overrides = {k: v for k, v in overrides.items() if v is not None}
        kwargs: dict[str, Any] = {}

        addr = env.get("OMLOX_ADDR")
        if addr:
            kwargs["addr"] = addr

        timeout_env = env.get("OMLOX_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            try:
                kwargs["timeout"] = float(timeout_env)
            except ValueError as exc:
                raise OmloxConfigError(f"OMLOX_TIMEOUT is not a number: {timeout_env!r}") from exc

        headers: dict[str, str] = {}
        token = env.get("OMLOX_TOKEN")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        headers.update(overrides.pop("headers", {}))
        kwargs["headers"] = headers

        if "debug" not in overrides:
            kwargs["debug"] = _env_bool(env.get("OMLOX_DEBUG"), False)

        kwargs.update(overrides)
        return cls(**kwargs)
