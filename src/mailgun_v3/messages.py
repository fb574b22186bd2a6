# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Send email through Mailgun.

This module maps a ``Message`` onto the flat form parameters of the
``messages`` endpoint and dispatches it.

Body variants:
    - Html: sets ``html``
    - Text: sets ``text``
    - HtmlAndText: sets both

Send options:
    - TestMode: ``o:testmode=yes``
    - DeliveryTime: ``o:deliverytime`` as an RFC 2822 date
    - Header: ``h:<name>``
    - Tag: ``o:tag``

Example:
    Sending a plain text message::

        creds = Credentials(api_key, "mg.example.com")
        message = Message(
            to=[EmailAddress("user@example.com")],
            subject="Hello",
            body=Text("Testing some Mailgun awesomeness!"),
            options=[Tag("welcome")],
        )
        sender = EmailAddress("mailer@mg.example.com", name="Excited User")
        response = send_email(creds, sender, message)
        print(response.id)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Union

import aiohttp
import requests
from pydantic import BaseModel

from mailgun_v3.address import EmailAddress
from mailgun_v3.credentials import Credentials
from mailgun_v3.transport import AsyncRequest, async_execute, execute, parse_response

MESSAGES_ENDPOINT = "messages"


# --- Body variants ---

@dataclass(frozen=True)
class Html:
    """HTML-only body."""

    html: str

    def add_to(self, params: dict[str, str]) -> None:
        params["html"] = self.html


@dataclass(frozen=True)
class Text:
    """Plain text body."""

    text: str

    def add_to(self, params: dict[str, str]) -> None:
        params["text"] = self.text


@dataclass(frozen=True)
class HtmlAndText:
    """Body carrying both an HTML and a plain text alternative."""

    html: str
    text: str

    def add_to(self, params: dict[str, str]) -> None:
        params["html"] = self.html
        params["text"] = self.text


MessageBody = Union[Html, Text, HtmlAndText]


# --- Send options ---

@dataclass(frozen=True)
class TestMode:
    """Ask Mailgun to accept the message without delivering it."""

    __test__ = False

    def to_param(self) -> tuple[str, str]:
        return "o:testmode", "yes"


@dataclass(frozen=True)
class DeliveryTime:
    """Schedule delivery. Naive datetimes are interpreted as UTC."""

    when: datetime

    def to_param(self) -> tuple[str, str]:
        when = self.when
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        return "o:deliverytime", format_datetime(when)


@dataclass(frozen=True)
class Header:
    """Custom MIME header, e.g. ``Header("X-My-Header", "value")``."""

    name: str
    value: str

    def to_param(self) -> tuple[str, str]:
        return f"h:{self.name}", self.value


@dataclass(frozen=True)
class Tag:
    """Tag used for Mailgun analytics."""

    tag: str

    def to_param(self) -> tuple[str, str]:
        return "o:tag", self.tag


SendOption = Union[TestMode, DeliveryTime, Header, Tag]


@dataclass
class Message:
    """An email to send. Mailgun rejects it without a recipient or a body.

    Attributes:
        to: Primary recipients.
        cc: Carbon copy recipients.
        bcc: Blind carbon copy recipients.
        subject: Subject line, always sent even when empty.
        body: One of ``Html``, ``Text`` or ``HtmlAndText``.
        options: Send options applied in order; later ones win on the same key.
    """

    to: list[EmailAddress] = field(default_factory=list)
    cc: list[EmailAddress] = field(default_factory=list)
    bcc: list[EmailAddress] = field(default_factory=list)
    subject: str = ""
    body: MessageBody = field(default_factory=lambda: Text(""))
    options: list[SendOption] = field(default_factory=list)

    def to_params(self) -> dict[str, str]:
        """Build the form parameters for the messages endpoint.

        Empty recipient lists are left out of the mapping.
        """
        params: dict[str, str] = {}

        _add_recipients("to", self.to, params)
        _add_recipients("cc", self.cc, params)
        _add_recipients("bcc", self.bcc, params)

        params["subject"] = self.subject

        self.body.add_to(params)

        for option in self.options:
            key, value = option.to_param()
            params[key] = value

        return params


def _add_recipients(field_name: str, addresses: list[EmailAddress], params: dict[str, str]) -> None:
    if addresses:
        params[field_name] = ",".join(str(address) for address in addresses)


class SendResponse(BaseModel):
    """Response of the messages endpoint."""

    message: str
    id: str


def _send_params(sender: EmailAddress, message: Message) -> dict[str, str]:
    params = message.to_params()
    params["from"] = str(sender)
    return params


# --- Blocking API ---

def send_email(creds: Credentials, sender: EmailAddress, message: Message) -> SendResponse:
    """Send a single email from ``sender``.

    Raises:
        TransportError: If the request could not be sent.
        HttpStatusError: If Mailgun answered with a non-2xx status.
        DeserializationError: If the response body is unexpected.
    """
    return send_with_request(
        requests.Request("POST", creds.domain_url(MESSAGES_ENDPOINT)), creds, sender, message
    )


def send_with_client(
    session: requests.Session, creds: Credentials, sender: EmailAddress, message: Message
) -> SendResponse:
    """Same as ``send_email`` with an externally managed session."""
    request = requests.Request("POST", creds.domain_url(MESSAGES_ENDPOINT))
    return send_with_request(request, creds, sender, message, session=session)


def send_with_request(
    request: requests.Request,
    creds: Credentials,
    sender: EmailAddress,
    message: Message,
    session: requests.Session | None = None,
) -> SendResponse:
    """Same as ``send_email`` with an externally built request.

    Use this to send to a custom endpoint, e.g. a local server in tests.
    """
    payload = execute(request, creds, _send_params(sender, message), session=session)
    return parse_response(SendResponse, payload)


# --- Asynchronous API ---

async def async_send_email(creds: Credentials, sender: EmailAddress, message: Message) -> SendResponse:
    """Asynchronous ``send_email``."""
    request = AsyncRequest("POST", creds.domain_url(MESSAGES_ENDPOINT))
    return await async_send_with_request(request, creds, sender, message)


async def async_send_with_client(
    session: aiohttp.ClientSession, creds: Credentials, sender: EmailAddress, message: Message
) -> SendResponse:
    """Asynchronous ``send_with_client``."""
    request = AsyncRequest("POST", creds.domain_url(MESSAGES_ENDPOINT), session=session)
    return await async_send_with_request(request, creds, sender, message)


async def async_send_with_request(
    request: AsyncRequest, creds: Credentials, sender: EmailAddress, message: Message
) -> SendResponse:
    """Asynchronous ``send_with_request``."""
    payload = await async_execute(request, creds, _send_params(sender, message))
    return parse_response(SendResponse, payload)
