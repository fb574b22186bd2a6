"""Tests for address validation, blocking and asynchronous."""

import re
from unittest.mock import patch
from urllib.parse import parse_qs, urlsplit

import aiohttp
import pytest
import requests
from aioresponses import aioresponses

from mailgun_v3 import AsyncRequest, DeserializationError, HttpStatusError
from mailgun_v3.validation import (
    ValidationResponse,
    async_validate_email,
    async_validate_email_with_client,
    async_validate_email_with_request,
    validate_email,
    validate_email_with_client,
)

VALIDATE_URL = "https://api.mailgun.net/v3/address/private/validate"

VALID = {
    "address": "james.earl.jones@gmail.com",
    "did_you_mean": None,
    "is_disposable_address": False,
    "is_role_address": False,
    "is_valid": True,
    "parts": {
        "display_name": None,
        "domain": "gmail.com",
        "local_part": "james.earl.jones",
    },
    "reason": None,
}

TYPO = {
    "address": "foo@mailgnu.net",
    "did_you_mean": "foo@mailgun.net",
    "is_disposable_address": False,
    "is_role_address": False,
    "is_valid": False,
    "reason": "no MX records",
}


class TestValidateEmail:
    """Blocking validation."""

    def test_valid_address(self, creds, make_response):
        with patch.object(requests.Session, "send", return_value=make_response(200, VALID)) as mock_send:
            result = validate_email(creds, "james.earl.jones@gmail.com")

        assert result.is_valid
        assert not result.is_disposable_address
        assert not result.is_role_address
        assert result.reason is None
        assert result.parts.domain == "gmail.com"
        assert result.parts.local_part == "james.earl.jones"

        prepared = mock_send.call_args[0][0]
        assert prepared.method == "GET"
        split = urlsplit(prepared.url)
        assert f"{split.scheme}://{split.netloc}{split.path}" == VALIDATE_URL
        assert parse_qs(split.query) == {"address": ["james.earl.jones@gmail.com"]}
        assert prepared.body is None

    def test_endpoint_is_not_domain_scoped(self, creds, make_response):
        with patch.object(requests.Session, "send", return_value=make_response(200, VALID)) as mock_send:
            validate_email(creds, "james.earl.jones@gmail.com")

        assert creds.domain not in mock_send.call_args[0][0].url

    def test_suggestion_without_parts(self, creds, make_response):
        session = requests.Session()
        with patch.object(session, "send", return_value=make_response(200, TYPO)):
            result = validate_email_with_client(session, creds, "foo@mailgnu.net")

        assert result == ValidationResponse(**TYPO)
        assert result.did_you_mean == "foo@mailgun.net"
        assert result.parts is None

    def test_missing_required_field(self, creds, make_response):
        body = {"address": "foo@bar.com", "is_valid": True}
        with patch.object(requests.Session, "send", return_value=make_response(200, body)):
            with pytest.raises(DeserializationError):
                validate_email(creds, "foo@bar.com")

    def test_http_error(self, creds, make_response):
        with patch.object(requests.Session, "send", return_value=make_response(429, {"message": "slow down"})):
            with pytest.raises(HttpStatusError) as exc_info:
                validate_email(creds, "foo@bar.com")

        assert exc_info.value.status == 429


class TestAsyncValidateEmail:
    """Asynchronous validation."""

    @pytest.mark.asyncio
    async def test_valid_address(self, creds):
        with aioresponses() as m:
            m.get(re.compile(r"^https://api\.mailgun\.net/v3/address/private/validate"), payload=VALID)

            result = await async_validate_email(creds, "james.earl.jones@gmail.com")

            assert result.is_valid
            (call,) = next(iter(m.requests.values()))
            assert call.kwargs["params"] == {"address": "james.earl.jones@gmail.com"}
            assert "data" not in call.kwargs

    @pytest.mark.asyncio
    async def test_http_error(self, creds):
        with aioresponses() as m:
            m.get(re.compile(r"^https://api\.mailgun\.net/v3/address/private/validate"), status=401)

            with pytest.raises(HttpStatusError) as exc_info:
                await async_validate_email(creds, "foo@bar.com")

        assert exc_info.value.status == 401

    @pytest.mark.asyncio
    async def test_with_client_keeps_session_open(self, creds):
        with aioresponses() as m:
            m.get(re.compile(r"^https://api\.mailgun\.net/v3/address/private/validate"), payload=TYPO)

            async with aiohttp.ClientSession() as session:
                result = await async_validate_email_with_client(session, creds, "foo@mailgnu.net")
                assert not session.closed

        assert result.did_you_mean == "foo@mailgun.net"

    @pytest.mark.asyncio
    async def test_with_request_custom_endpoint(self, creds):
        url = "http://127.0.0.1:1234/v3/address/private/validate"

        with aioresponses() as m:
            m.get(re.compile(r"^http://127\.0\.0\.1:1234/v3/address/private/validate"), payload=VALID)

            request = AsyncRequest("GET", url)
            result = await async_validate_email_with_request(request, creds, "james.earl.jones@gmail.com")

            assert result.is_valid
            (call,) = next(iter(m.requests.values()))
            assert call.kwargs["params"] == {"address": "james.earl.jones@gmail.com"}
