from __future__ import annotations

import logging
import os
from dataclasses import dataclass


_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})


def _env_str(name: str) -> str:
    """The stripped value of `name`, or "" when unset."""
    return (os.getenv(name) or "").strip()


def env_bool(name: str, default: bool = False) -> bool:
    raw = _env_str(name).lower()
    return raw in _TRUTHY if raw else default


def env_int(name: str, default: int) -> int:
    raw = _env_str(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """
    Runtime knobs for the rendering API, read from the environment.

    - `FORM_RENDER_HTTP_LOG=1` enables the request/response logging middleware
    - `FORM_RENDER_HTTP_LOG_HEADERS=1` logs request/response headers (redacted)
    - `FORM_RENDER_HTTP_LOG_BODY_MAX_BYTES=4096` caps body bytes captured per request/response
    - `FORM_RENDER_MAX_FIELDS=200` caps the number of fields one render request may carry
    - `FORM_RENDER_LOG_LEVEL=INFO` level for the `api` loggers
    """

    http_log: bool = False
    http_log_headers: bool = False
    http_log_body_max_bytes: int = 4096
    max_fields: int = 200
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        level = _env_str("FORM_RENDER_LOG_LEVEL").upper() or "INFO"
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
        return cls(
            http_log=env_bool("FORM_RENDER_HTTP_LOG", default=False),
            http_log_headers=env_bool("FORM_RENDER_HTTP_LOG_HEADERS", default=False),
            http_log_body_max_bytes=max(0, env_int("FORM_RENDER_HTTP_LOG_BODY_MAX_BYTES", default=4096)),
            max_fields=max(1, env_int("FORM_RENDER_MAX_FIELDS", default=200)),
            log_level=level,
        )
