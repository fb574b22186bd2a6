"""Shared fixtures for the Mailgun client tests."""

import json

import pytest
import requests

from mailgun_v3 import Credentials, EmailAddress

API_KEY = "0123456789abcdef0123456789abcdef-01234567-89abcdef"
DOMAIN = "sandbox0123456789abcdef0123456789abcdef.mailgun.org"


@pytest.fixture
def creds():
    return Credentials(API_KEY, DOMAIN)


@pytest.fixture
def sender():
    return EmailAddress(f"mailgun_v3@{DOMAIN}", name="Nick Testla")


@pytest.fixture
def make_response():
    """Factory for ``requests.Response`` objects returned by a patched session."""

    def _make(status: int = 200, payload=None, text: str | None = None) -> requests.Response:
        response = requests.Response()
        response.status_code = status
        body = json.dumps(payload) if text is None else text
        response._content = body.encode()
        response.encoding = "utf-8"
        response.headers["Content-Type"] = "application/json"
        return response

    return _make
