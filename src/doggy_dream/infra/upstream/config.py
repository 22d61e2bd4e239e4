from __future__ import annotations

import os

DEFAULT_BASE_URL = "https://frontend-take-home-service.fetch.com"
DEFAULT_TIMEOUT_SECONDS = 10.0


def upstream_base_url() -> str:
    url = os.getenv("DOGS_API_BASE_URL") or DEFAULT_BASE_URL

    return url.rstrip("/")


def upstream_timeout_seconds() -> float:
    raw = os.getenv("DOGS_API_TIMEOUT_SECONDS")

    if not raw:
        return DEFAULT_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"DOGS_API_TIMEOUT_SECONDS must be a number, got {raw!r}") from None

    if timeout <= 0:
        raise RuntimeError("DOGS_API_TIMEOUT_SECONDS must be > 0")

    return timeout
