# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Logging utilities for the Mailgun client.

The library never installs handlers or sets levels. Applications configure
logging (for example with ``logging.basicConfig()``) in their entry point.

Example:
    Typical usage in a module::

        from mailgun_v3.logger import get_logger

        logger = get_logger("mailgun_v3.messages")
        logger.debug("Message queued")
"""

import logging


def get_logger(name: str = "mailgun_v3") -> logging.Logger:
    """Retrieve a logger instance.

    Args:
        name: The logger name. Defaults to "mailgun_v3".

    Returns:
        A ``logging.Logger`` instance bound to the given name.
    """
    return logging.getLogger(name)
