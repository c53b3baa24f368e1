# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport seam between the SES send pipeline and an HTTP library."""

from __future__ import annotations

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Posts one signed SES request and reports what happened.

    Implementations must not raise for network failures: they return an
    `HttpResponse` with `ok=False` and the underlying error message, and leave
    status-code interpretation to the caller. `request` may be called from
    several worker threads at once.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """Build the httpx transport used when a client is created without one."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings())
