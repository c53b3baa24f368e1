# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest
from botocore.credentials import Credentials

from sesmail.config import HttpSettings
from sesmail.http.httpx_client import HttpxClient



@pytest.fixture
def credentials():
    return Credentials("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


@pytest.fixture
def valid_request():
    return {
        "Source": {},
        "Destination": {},
        "Message": {"Body": {"Html": {"Data": "Data"}}, "Subject": {"Data": "Data"}},
    }


@pytest.fixture
def mock_transport_client():
    """Build an HttpxClient whose requests are answered by `handler`."""

    def _build(handler):
        return HttpxClient(HttpSettings(), client=httpx.Client(transport=httpx.MockTransport(handler)))

    return _build
