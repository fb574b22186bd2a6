# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Mailgun API credentials and URL construction.

A ``Credentials`` instance is immutable and can be shared by any number of
concurrent calls, blocking or asynchronous.

Example:
    US region (default API base)::

        creds = Credentials("0123456789abcdef0123456789abcdef-01234567", "mg.example.com")

    EU region::

        creds = Credentials.with_base(
            "https://api.eu.mailgun.net/v3",
            "0123456789abcdef0123456789abcdef-01234567",
            "mg.example.com",
        )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote

from mailgun_v3.exceptions import CredentialsError

DEFAULT_API_BASE = "https://api.mailgun.net/v3"
API_USER = "api"
MIN_API_KEY_LENGTH = 35


@dataclass(frozen=True)
class Credentials:
    """Private API key, sending domain and API root.

    Attributes:
        api_key: Mailgun private API key (sent as the basic-auth password).
        domain: Sending domain, e.g. ``mg.example.com``.
        api_base: API root including the version, without trailing slash.

    Raises:
        CredentialsError: If any value does not have the expected shape.
    """

    api_key: str = field(repr=False)
    domain: str
    api_base: str = DEFAULT_API_BASE

    def __post_init__(self) -> None:
        api_base = self.api_base.rstrip("/")
        if not api_base.startswith(("http://", "https://")):
            raise CredentialsError("api_base does not start with http:// or https://")
        if "." not in api_base:
            raise CredentialsError("api_base does not contain any dots")
        if len(self.api_key) < MIN_API_KEY_LENGTH:
            raise CredentialsError("api_key is too short")
        if "." not in self.domain:
            raise CredentialsError("domain does not contain any dots")
        object.__setattr__(self, "api_base", api_base)

    @classmethod
    def with_base(cls, api_base: str, api_key: str, domain: str) -> Credentials:
        """Build credentials for a non-default API root (e.g. the EU region)."""
        return cls(api_key=api_key, domain=domain, api_base=api_base)

    @property
    def auth(self) -> tuple[str, str]:
        """Basic-auth pair: fixed user ``api`` and the API key."""
        return API_USER, self.api_key

    def api_url(self, *parts: str) -> str:
        """URL relative to the API root, outside any domain."""
        return "/".join((self.api_base, *parts))

    def domain_url(self, *parts: str) -> str:
        """URL relative to ``{api_base}/{domain}``."""
        return self.api_url(self.domain, *parts)


def path_segment(value: str) -> str:
    """Percent-encode a value used as a single URL path segment."""
    return quote(value, safe="")
