# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Client bindings for the Mailgun v3 HTTP API.

Features:
    - Sending messages with HTML/text bodies, tags, headers and scheduling
    - Address validation
    - Template creation, listing and deletion
    - Blocking (requests) and asynchronous (aiohttp) variants of every call
    - Typed responses (pydantic) and typed errors

Example::

    from mailgun_v3 import Credentials, EmailAddress
    from mailgun_v3.messages import Message, Text, send_email

    creds = Credentials(api_key, "mg.example.com")
    message = Message(
        to=[EmailAddress("user@example.com")],
        subject="Hello",
        body=Text("hello world"),
    )
    send_email(creds, EmailAddress("mailer@mg.example.com"), message)
"""

from mailgun_v3.address import EmailAddress, render_address
from mailgun_v3.credentials import DEFAULT_API_BASE, Credentials
from mailgun_v3.exceptions import (
    CredentialsError,
    DeserializationError,
    HttpStatusError,
    MailgunError,
    TransportError,
)
from mailgun_v3.transport import AsyncRequest

__all__ = [
    "AsyncRequest",
    "Credentials",
    "CredentialsError",
    "DEFAULT_API_BASE",
    "DeserializationError",
    "EmailAddress",
    "HttpStatusError",
    "MailgunError",
    "TransportError",
    "render_address",
]
