# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for sesmail."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

import httpx

from .errors import ConfigurationError
from .log import LogSink, wrap_logger
from .version import __version__

DEFAULT_USER_AGENT = f"sesmail/{__version__} python-httpx/{httpx.__version__}"
REGION_REQUIRED_MESSAGE = "Region is a required option for SES clients"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP transport defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    max_workers: int = 4

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_workers = _int_env("SESMAIL_MAX_WORKERS", cls.max_workers)
        if max_workers <= 0:
            max_workers = cls.max_workers
        return cls(
            timeout=_float_env("SESMAIL_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("SESMAIL_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("SESMAIL_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_workers=max_workers,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration captured by an SES client.

    `credentials` is a botocore ``Credentials`` object; when omitted the default
    botocore credential chain is consulted at signing time.
    """

    region: str
    logger: LogSink = field(default_factory=LogSink)
    endpoint_url: str | None = None
    credentials: Any = None
    http_settings: HttpSettings = field(default_factory=load_http_settings)

    def __post_init__(self) -> None:
        if not self.region:
            raise ConfigurationError(REGION_REQUIRED_MESSAGE)
        # frozen: normalize the logger in place once
        object.__setattr__(self, "logger", wrap_logger(self.logger))

    @property
    def host(self) -> str:
        return f"email.{self.region}.amazonaws.com"

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | ClientConfig | None = None, **overrides: Any) -> ClientConfig:
        """
        Build a config from a caller-supplied mapping (or an existing config) plus keyword overrides.

        Unknown keys are ignored; the caller's mapping is copied, never mutated.
        """
        if isinstance(options, ClientConfig):
            merged: dict[str, Any] = {f.name: getattr(options, f.name) for f in fields(cls)}
        else:
            merged = dict(options or {})
        merged.update(overrides)

        if not merged.get("region"):
            raise ConfigurationError(REGION_REQUIRED_MESSAGE)

        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in merged.items() if key in known}
        if kwargs.get("http_settings") is None:
            kwargs.pop("http_settings", None)
        return cls(**kwargs)


__all__ = [
    "ClientConfig",
    "DEFAULT_USER_AGENT",
    "HttpSettings",
    "REGION_REQUIRED_MESSAGE",
    "load_http_settings",
]
