# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx

SERVICE_ERROR_TEMPLATE = "Amazon SES service returned status code: {status_code}"


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class SESError(Exception):
    """Base class for every error raised or delivered by sesmail."""


class ConfigurationError(SESError, ValueError):
    """Client construction options are unusable."""


class ValidationError(SESError, ValueError):
    """An email request is missing a required property."""


class EncodingError(SESError):
    """A request value cannot be serialized into the form body."""


class SigningError(SESError):
    """The request could not be signed (typically missing credentials)."""


class TransportError(SESError):
    """The HTTP exchange failed before a status code was received."""

    def __init__(self, message: str, *, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR, error_type: str | None = None):
        super().__init__(message)
        self.category = category
        self.error_type = error_type


class ServiceError(SESError):
    """SES answered with an HTTP status code of 400 or above."""

    def __init__(self, status_code: int):
        super().__init__(SERVICE_ERROR_TEMPLATE.format(status_code=status_code))
        self.status_code = status_code


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    # ssl/dns causes are wrapped by httpx.ConnectError, check the cause first
    cause = exc.__cause__ or exc.__context__
    for candidate in (exc, cause):
        if isinstance(candidate, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(candidate, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "ConfigurationError",
    "EncodingError",
    "ErrorCategory",
    "SERVICE_ERROR_TEMPLATE",
    "SESError",
    "ServiceError",
    "SigningError",
    "TransportError",
    "ValidationError",
    "categorize_exception",
]
