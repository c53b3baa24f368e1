# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import copy

import pytest

from sesmail.encoding import encode_body, form_urlencode
from sesmail.errors import EncodingError, ValidationError


def test_form_urlencode_flattens_mappings_and_lists():
    body = form_urlencode(
        {
            "Source": "a@example.com",
            "Destination": {"ToAddresses": ["b@example.com", "c@example.com"]},
            "Action": "SendEmail",
        }
    )
    assert body == (
        "Source=a%40example.com"
        "&Destination.ToAddresses.member.1=b%40example.com"
        "&Destination.ToAddresses.member.2=c%40example.com"
        "&Action=SendEmail"
    )


def test_form_urlencode_percent_encodes_rfc3986():
    body = form_urlencode({"Message": {"Subject": {"Data": "Hi there! (café)*"}}})
    assert body == "Message.Subject.Data=Hi%20there%21%20%28caf%C3%A9%29%2A"


def test_form_urlencode_scalars_and_none():
    body = form_urlencode({"Flag": True, "Off": False, "Count": 3, "Skip": None, "Empty": {}})
    assert body == "Flag=true&Off=false&Count=3"


def test_form_urlencode_rejects_unsupported_values():
    with pytest.raises(EncodingError, match="bytes"):
        form_urlencode({"Source": b"raw"})


def test_encode_body_appends_action_without_mutating(valid_request):
    snapshot = copy.deepcopy(valid_request)
    body = encode_body(valid_request)
    assert body == "Message.Body.Html.Data=Data&Message.Subject.Data=Data&Action=SendEmail"
    assert valid_request == snapshot
    assert "Action" not in valid_request


def test_encode_body_tags_template_requests_with_send_email():
    body = encode_body(
        {
            "Source": "a@example.com",
            "Destination": {"ToAddresses": ["b@example.com"]},
            "Template": "welcome",
            "TemplateData": '{"name":"Ada"}',
        }
    )
    assert body.endswith("&Action=SendEmail")
    assert body.count("Action=") == 1
    assert "TemplateData=%7B%22name%22%3A%22Ada%22%7D" in body


def test_encode_body_validates_first():
    with pytest.raises(ValidationError, match='"Source"'):
        encode_body({"Destination": {}})


def test_encode_body_logs_progress(valid_request):
    seen = []
    encode_body(valid_request, {"info": lambda *values: seen.append(values[0])})
    assert seen == ["SES: validating params", "SES: params validated", "SES: body encoded"]
