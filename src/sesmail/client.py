# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SES client factory and the signed send pipeline.

`send_email` validates, encodes and signs eagerly on the calling thread, then
hands the HTTP exchange to a worker thread. Every failure after construction
is delivered through the returned Future or the callback, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import suppress
from functools import partial
from typing import Any

from .config import ClientConfig
from .encoding import encode_body
from .http.client import HttpClient, create_default_http_client
from .models import SendEmailResult
from .response import interpret_response, log_completion
from .signing import SignedRequest, build_request, create_session, sign_request

logger = logging.getLogger(__name__)

SendCallback = Callable[..., Any]


def _failed(exc: BaseException) -> Future[SendEmailResult]:
    future: Future[SendEmailResult] = Future()
    future.set_exception(exc)
    return future


def _deliver_to_callback(callback: SendCallback, future: Future[SendEmailResult]) -> None:
    error = future.exception()
    if error is not None:
        callback(error)
    else:
        callback(None, future.result())


class SesClient:
    """
    Client bound to one immutable ClientConfig.

    The HTTP client and the worker pool are shared by all sends; use the client
    as a context manager (or call `close`) to release them.
    """

    def __init__(self, config: ClientConfig, http_client: HttpClient | None = None):
        self.config = config
        self.http_client = http_client or create_default_http_client(config.http_settings)
        # reused by every send; botocore caches resolved credentials on it
        self._session = create_session() if config.credentials is None else None
        self._executor = ThreadPoolExecutor(
            max_workers=config.http_settings.max_workers,
            thread_name_prefix="sesmail",
        )

    def send_email(
        self,
        request: Mapping[str, Any],
        callback: SendCallback | None = None,
    ) -> Future[SendEmailResult] | None:
        """
        Send one email.

        Without a callback, return a Future resolving to a SendEmailResult (wrap it
        with `asyncio.wrap_future` to await it). With a callback, invoke
        `callback(None, result)` or `callback(error)` exactly once and return None.

        Validation, encoding and signing failures are known before `send_email`
        returns, so their callback runs synchronously on the calling thread.
        Transport and service outcomes invoke the callback later, on a worker thread.
        """
        outcome = self._dispatch(request, log_finished=callback is None)
        if callback is None:
            return outcome
        outcome.add_done_callback(partial(_deliver_to_callback, callback))
        return None

    def _dispatch(self, request: Mapping[str, Any], *, log_finished: bool) -> Future[SendEmailResult]:
        log = self.config.logger
        try:
            log.info("SES: starting send", request)
            body = encode_body(request, log)
            signed = sign_request(build_request(self.config, body), self.config.credentials, self._session)
            return self._executor.submit(self._transmit, signed, log_finished)
        except Exception as exc:  # noqa: BLE001
            log.error("SES: ", exc)
            return _failed(exc)

    def _transmit(self, signed: SignedRequest, log_finished: bool) -> SendEmailResult:
        logger.debug("Dispatching SES request to %s", signed.url)
        response = self.http_client.request(signed.to_http_request(self.config.http_settings.timeout))
        result = interpret_response(response, self.config.logger)
        if log_finished:
            log_completion(result, self.config.logger)
        return result

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> SesClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


def make_client(
    options: Mapping[str, Any] | ClientConfig | None = None,
    *,
    http_client: HttpClient | None = None,
    **overrides: Any,
) -> SesClient:
    """
    Create an SES client.

    `options` (or keyword overrides) must provide a non-empty `region`; `logger`,
    `endpoint_url`, `credentials` and `http_settings` are optional. Raises
    ConfigurationError immediately when the region is missing.
    """
    config = ClientConfig.from_options(options, **overrides)
    return SesClient(config, http_client=http_client)


__all__ = ["SendCallback", "SesClient", "make_client"]
