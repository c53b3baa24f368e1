# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Structural validation of SendEmail requests.

Checks run in a fixed order and the first failure wins. A property counts as
missing when it is absent, None, False, an empty string or zero; empty
containers are present (``{"Source": {}}`` satisfies the Source check).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import ValidationError

REQUIRED_EMAIL_PARAMS = ("Source", "Destination", "Message")
REQUIRED_TEMPLATE_PARAMS = ("Source", "Destination", "TemplateData")


def _is_present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value == value and value != 0  # NaN is missing too
    return True


def _get(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(key)
    return None


def _require(value: Any, path: str, suffix: str = "") -> None:
    if not _is_present(value):
        raise ValidationError(f'The "{path}" property is required{suffix}')


def is_template_request(params: Mapping[str, Any]) -> bool:
    return "Template" in params


def validate_params(params: Mapping[str, Any]) -> None:
    """Raise ValidationError for the first missing property of an email request."""
    if not isinstance(params, Mapping):
        raise ValidationError('The "Source" property is required')

    if is_template_request(params):
        for prop in REQUIRED_TEMPLATE_PARAMS:
            _require(params.get(prop), prop)
        return

    for prop in REQUIRED_EMAIL_PARAMS:
        _require(params.get(prop), prop)

    message = params["Message"]
    body = _get(message, "Body")
    subject = _get(message, "Subject")
    _require(body, "Message.Body")
    _require(subject, "Message.Subject")
    _require(_get(subject, "Data"), "Message.Subject.Data")

    # key existence decides the branch, not truthiness
    if isinstance(body, Mapping) and "Html" in body:
        _require(_get(body["Html"], "Data"), "Message.Body.Html.Data", " when using Html")
    elif isinstance(body, Mapping) and "Text" in body:
        _require(_get(body["Text"], "Data"), "Message.Body.Text.Data", " when using Text")
    else:
        raise ValidationError('One of "Html", "Text" is required on Message.Body')


__all__ = ["REQUIRED_EMAIL_PARAMS", "REQUIRED_TEMPLATE_PARAMS", "is_template_request", "validate_params"]
