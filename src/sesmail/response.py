# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Classification of transport outcomes into results or typed errors."""

from __future__ import annotations

from .errors import ErrorCategory, ServiceError, TransportError
from .http.models import HttpResponse
from .log import LogSink, wrap_logger
from .models import SendEmailResult

ERROR_STATUS_THRESHOLD = 400


def _category(response: HttpResponse) -> ErrorCategory:
    try:
        return ErrorCategory(response.error_category or ErrorCategory.UNKNOWN_ERROR.value)
    except ValueError:
        return ErrorCategory.UNKNOWN_ERROR


def interpret_response(response: HttpResponse, logger: LogSink | None = None) -> SendEmailResult:
    """
    Turn a transport response into a SendEmailResult.

    Raises TransportError when the exchange itself failed (the transport's message
    is kept verbatim) and ServiceError for status codes of 400 and above, whose
    body is logged but not surfaced.
    """
    log = wrap_logger(logger)

    if not response.ok:
        raise TransportError(
            response.error_message or "Request to Amazon SES failed",
            category=_category(response),
            error_type=response.error_type,
        )

    status_code = int(response.status_code or 0)
    if status_code >= ERROR_STATUS_THRESHOLD:
        log.error("SES: ", status_code, response.text)
        raise ServiceError(status_code)

    return SendEmailResult.from_response(response)


def log_completion(result: SendEmailResult, logger: LogSink | None = None) -> None:
    log = wrap_logger(logger)
    log.info("SES: finished", result.status_code, result.status_message)
    log.info("SES: data", result.text)


__all__ = ["ERROR_STATUS_THRESHOLD", "interpret_response", "log_completion"]
