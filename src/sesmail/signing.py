# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request descriptor construction and AWS Signature Version 4 signing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import urlsplit

import botocore.session
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.exceptions import BotoCoreError

from .config import ClientConfig
from .errors import SigningError
from .http.models import Headers, HttpRequest

logger = logging.getLogger(__name__)

SERVICE_NAME = "email"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class SignedRequest:
    """HTTP request descriptor for one SES call; headers gain the signature once signed."""

    region: str
    host: str
    body: str
    service: str = SERVICE_NAME
    method: str = "POST"
    protocol: str = "https:"
    path: str = "/"
    headers: Headers = field(default_factory=lambda: {"Content-Type": FORM_CONTENT_TYPE})

    @property
    def url(self) -> str:
        return f"{self.protocol}//{self.host}{self.path}"

    @property
    def is_signed(self) -> bool:
        return any(name.lower() == "authorization" for name in self.headers)

    def to_http_request(self, timeout: float | None = None) -> HttpRequest:
        return HttpRequest(
            url=self.url,
            method=self.method,
            headers=dict(self.headers),
            body=self.body.encode("utf-8"),
            timeout=timeout,
        )


def build_request(config: ClientConfig, body: str) -> SignedRequest:
    """Describe the POST for an encoded body; `endpoint_url` overrides protocol and host."""
    if config.endpoint_url:
        parts = urlsplit(config.endpoint_url)
        return SignedRequest(
            region=config.region,
            host=parts.netloc,
            body=body,
            protocol=f"{parts.scheme or 'https'}:",
        )
    return SignedRequest(region=config.region, host=config.host, body=body)


def create_session() -> botocore.session.Session:
    """Botocore session whose credential chain is resolved once and then cached."""
    return botocore.session.get_session()


def resolve_credentials(credentials: Any = None, session: botocore.session.Session | None = None) -> Any:
    """
    Return explicit credentials or the session chain's, frozen for this request.

    Without a session a fresh one is created, so callers signing repeatedly should
    pass a long-lived session to keep botocore's credential cache and refresh.
    """
    if credentials is None:
        credentials = (session or create_session()).get_credentials()
    if credentials is None:
        raise SigningError("Unable to locate AWS credentials")
    if hasattr(credentials, "get_frozen_credentials"):
        credentials = credentials.get_frozen_credentials()
    if not getattr(credentials, "access_key", None) or not getattr(credentials, "secret_key", None):
        raise SigningError("AWS credentials are missing an access key or secret key")
    return credentials


def sign_request(
    request: SignedRequest,
    credentials: Any = None,
    session: botocore.session.Session | None = None,
) -> SignedRequest:
    """Compute the SigV4 signature over the descriptor and return a signed copy."""
    try:
        frozen = resolve_credentials(credentials, session)
        aws_request = AWSRequest(
            method=request.method,
            url=request.url,
            data=request.body.encode("utf-8"),
            headers=dict(request.headers),
        )
        SigV4Auth(frozen, request.service, request.region).add_auth(aws_request)
    except SigningError:
        raise
    except (BotoCoreError, TypeError, ValueError, AttributeError) as exc:
        raise SigningError(str(exc)) from exc

    headers = {name: str(value) for name, value in aws_request.headers.items()}
    logger.debug("Signed %s %s for %s/%s", request.method, request.url, request.service, request.region)
    return replace(request, headers=headers)


__all__ = [
    "FORM_CONTENT_TYPE",
    "SERVICE_NAME",
    "SignedRequest",
    "build_request",
    "create_session",
    "resolve_credentials",
    "sign_request",
]
