# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
sesmail package entrypoint.

A small client for sending transactional email through the Amazon SES query
API: requests are validated, form-encoded, SigV4-signed and posted over HTTPS.
HTTP behavior is abstracted behind an injectable client interface, and results
are delivered through a Future or a callback.
"""

from .client import SesClient, make_client
from .config import ClientConfig, HttpSettings, load_http_settings
from .encoding import encode_body, form_urlencode
from .errors import (
    ConfigurationError,
    EncodingError,
    ErrorCategory,
    SESError,
    ServiceError,
    SigningError,
    TransportError,
    ValidationError,
)
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, StubHttpClient
from .log import LogSink, setup_logging, wrap_logger
from .models import SendEmailResult
from .validation import validate_params
from .version import __version__

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "EncodingError",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "LogSink",
    "SESError",
    "SendEmailResult",
    "ServiceError",
    "SesClient",
    "SigningError",
    "StubHttpClient",
    "TransportError",
    "ValidationError",
    "encode_body",
    "form_urlencode",
    "load_http_settings",
    "make_client",
    "setup_logging",
    "validate_params",
    "wrap_logger",
    "__version__",
]
