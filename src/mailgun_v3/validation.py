# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Validate email addresses through Mailgun to reduce bounces and catch typos.

The validation endpoint lives at the API root, not under the sending domain.
"""

from __future__ import annotations

import aiohttp
import requests
from pydantic import BaseModel

from mailgun_v3.credentials import Credentials
from mailgun_v3.transport import AsyncRequest, async_execute, execute, parse_response

VALIDATION_ENDPOINT = "address/private/validate"


class EmailParts(BaseModel):
    """Components of a successfully parsed address."""

    domain: str
    display_name: str | None = None
    local_part: str


class ValidationResponse(BaseModel):
    """Result of an address validation."""

    address: str
    did_you_mean: str | None = None
    is_disposable_address: bool
    is_role_address: bool
    is_valid: bool
    parts: EmailParts | None = None
    reason: str | None = None


def validate_email(creds: Credentials, address: str) -> ValidationResponse:
    """Validate ``address`` using Mailgun's validation service."""
    request = requests.Request("GET", creds.api_url(VALIDATION_ENDPOINT))
    return validate_email_with_request(request, creds, address)


def validate_email_with_client(
    session: requests.Session, creds: Credentials, address: str
) -> ValidationResponse:
    """Same as ``validate_email`` with an externally managed session."""
    request = requests.Request("GET", creds.api_url(VALIDATION_ENDPOINT))
    return validate_email_with_request(request, creds, address, session=session)


def validate_email_with_request(
    request: requests.Request,
    creds: Credentials,
    address: str,
    session: requests.Session | None = None,
) -> ValidationResponse:
    """Same as ``validate_email`` with an externally built request."""
    payload = execute(request, creds, {"address": address}, session=session)
    return parse_response(ValidationResponse, payload)


async def async_validate_email(creds: Credentials, address: str) -> ValidationResponse:
    request = AsyncRequest("GET", creds.api_url(VALIDATION_ENDPOINT))
    return await async_validate_email_with_request(request, creds, address)


async def async_validate_email_with_client(
    session: aiohttp.ClientSession, creds: Credentials, address: str
) -> ValidationResponse:
    request = AsyncRequest("GET", creds.api_url(VALIDATION_ENDPOINT), session=session)
    return await async_validate_email_with_request(request, creds, address)


async def async_validate_email_with_request(
    request: AsyncRequest, creds: Credentials, address: str
) -> ValidationResponse:
    payload = await async_execute(request, creds, {"address": address})
    return parse_response(ValidationResponse, payload)
