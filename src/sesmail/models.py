# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Send outcome models."""

from __future__ import annotations

from dataclasses import dataclass, field

from .http.models import Headers, HttpResponse


@dataclass
class SendEmailResult:
    """Successful SES response; `data` is the raw body exactly as received."""

    status_code: int
    status_message: str = ""
    data: bytes = b""
    headers: Headers = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")

    @classmethod
    def from_response(cls, response: HttpResponse) -> SendEmailResult:
        return cls(
            status_code=int(response.status_code or 0),
            status_message=response.reason,
            data=response.content,
            headers=dict(response.headers),
        )


__all__ = ["SendEmailResult"]
