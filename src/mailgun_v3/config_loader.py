# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Configuration loader for Mailgun credentials.

This module builds ``Credentials`` from an INI-style configuration file or
environment variables. Dispatch functions never read configuration; this is
a convenience for applications.

Example:
    Configuration file format (config.ini)::

        [mailgun]
        api_key = 0123456789abcdef0123456789abcdef-01234567-89abcdef
        domain = mg.example.com
        api_base = https://api.eu.mailgun.net/v3

    Loading credentials::

        creds = load_credentials("/etc/myapp/config.ini")
"""

from __future__ import annotations

import configparser
import os
from pathlib import Path

from mailgun_v3.credentials import DEFAULT_API_BASE, Credentials
from mailgun_v3.exceptions import CredentialsError
from mailgun_v3.logger import get_logger

SECTION = "mailgun"

ENV_MAPPING = {
    "api_key": "MAILGUN_API_KEY",
    "domain": "MAILGUN_DOMAIN",
    "api_base": "MAILGUN_API_BASE",
}

logger = get_logger("mailgun_v3.config_loader")


def load_credentials(config_path: str | None = None) -> Credentials:
    """Load credentials from config file or environment.

    Priority: config file > environment variables > defaults.

    Environment variables:
        MAILGUN_API_KEY: Private API key
        MAILGUN_DOMAIN: Sending domain
        MAILGUN_API_BASE: API root (default https://api.mailgun.net/v3)

    Args:
        config_path: Optional path to config.ini file

    Returns:
        Validated Credentials.

    Raises:
        CredentialsError: If the key or the domain is missing or malformed.
    """
    config_values: dict[str, str | None] = {"api_base": DEFAULT_API_BASE}

    for key, env_var in ENV_MAPPING.items():
        env_value = os.environ.get(env_var)
        if env_value:
            config_values[key] = env_value.strip()

    if config_path and Path(config_path).exists():
        config = configparser.ConfigParser()
        config.read(config_path)

        if config.has_section(SECTION):
            for key in ENV_MAPPING:
                value = config.get(SECTION, key, fallback=None)
                if value and value.strip():
                    config_values[key] = value.strip()
        else:
            logger.warning("No [%s] section in %s", SECTION, config_path)
    elif config_path:
        logger.warning("Config file %s not found, using environment", config_path)

    for key in ("api_key", "domain"):
        if not config_values.get(key):
            raise CredentialsError(f"Missing Mailgun {key} (set {ENV_MAPPING[key]} or [{SECTION}] {key})")

    return Credentials(
        api_key=config_values["api_key"],
        domain=config_values["domain"],
        api_base=config_values["api_base"],
    )
