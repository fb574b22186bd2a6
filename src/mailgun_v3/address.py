# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Email address with optional display name."""

from __future__ import annotations

from dataclasses import dataclass


def render_address(name: str | None, address: str) -> str:
    """Render an address in wire format.

    Returns ``"Name <addr>"`` when a name is given, the bare address otherwise.
    Nothing is escaped or validated.
    """
    if name is None:
        return address
    return f"{name} <{address}>"


@dataclass(frozen=True)
class EmailAddress:
    """An email address, with or without a display name.

    Attributes:
        address: The mailbox, e.g. ``user@example.com``.
        name: Optional display name.
    """

    address: str
    name: str | None = None

    def __str__(self) -> str:
        return render_address(self.name, self.address)
