# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
AWS query-style form encoding for SES request bodies.

Nested mappings flatten to dotted keys and sequences to ``<key>.member.<n>``:

    {"Destination": {"ToAddresses": ["a@example.com"]}}
    -> Destination.ToAddresses.member.1=a%40example.com
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import quote

from .errors import EncodingError
from .log import wrap_logger
from .validation import validate_params

SEND_EMAIL_ACTION = "SendEmail"
_UNRESERVED = "-_.~"


def _scalar(value: Any, key: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise EncodingError(f'Cannot encode value of type {type(value).__name__} for "{key}"')


def _flatten(value: Any, prefix: str) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, child in value.items():
            yield from _flatten(child, f"{prefix}.{key}" if prefix else str(key))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value, start=1):
            yield from _flatten(item, f"{prefix}.member.{index}")
    else:
        yield prefix, _scalar(value, prefix)


def form_urlencode(params: Mapping[str, Any]) -> str:
    """Serialize a nested mapping into an RFC 3986 percent-encoded query string."""
    return "&".join(
        f"{quote(key, safe=_UNRESERVED)}={quote(value, safe=_UNRESERVED)}" for key, value in _flatten(params, "")
    )


def encode_body(params: Mapping[str, Any], logger: Any = None) -> str:
    """Validate an email request and encode it, with its Action tag, as a form body."""
    log = wrap_logger(logger)
    log.info("SES: validating params", params)
    validate_params(params)
    log.info("SES: params validated")

    body = form_urlencode({**params, "Action": SEND_EMAIL_ACTION})
    log.info("SES: body encoded", body)
    return body


__all__ = [
    "SEND_EMAIL_ACTION",
    "encode_body",
    "form_urlencode",
]
