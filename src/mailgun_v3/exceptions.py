# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by the Mailgun client.

Every failure of a dispatch call surfaces as one of these types, with the
underlying library exception chained as ``__cause__``:

- ``TransportError``: the request never produced a response.
- ``HttpStatusError``: the server answered with a non-2xx status.
- ``DeserializationError``: the body is not JSON or does not match the model.
"""

from __future__ import annotations


class MailgunError(Exception):
    """Base class for all client errors."""


class CredentialsError(MailgunError, ValueError):
    """Raised when credentials do not have the expected shape."""


class TransportError(MailgunError):
    """Raised on connection, TLS or timeout failures."""


class HttpStatusError(MailgunError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status: HTTP status code.
        url: Requested URL.
        body: Response text, possibly empty.
    """

    def __init__(self, status: int, url: str, body: str = ""):
        self.status = status
        self.url = url
        self.body = body
        super().__init__(f"HTTP {status} from {url}")


class DeserializationError(MailgunError):
    """Raised when a response body cannot be parsed into the expected model."""
