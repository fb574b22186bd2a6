# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Request execution shared by every Mailgun operation.

Both execution modes go through this module so that authentication,
parameter encoding and error mapping are identical:

- blocking calls use ``requests`` and take a ``requests.Request``;
- asynchronous calls use ``aiohttp`` and take an ``AsyncRequest``.

Parameters are sent as the query string for GET and DELETE requests and as
``application/x-www-form-urlencoded`` fields otherwise.

Example:
    Redirecting a send to a local test server::

        request = requests.Request("POST", "http://127.0.0.1:8025/mg.example.com/messages")
        send_with_request(request, creds, sender, message)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, TypeVar

import aiohttp
import requests
from pydantic import BaseModel, ValidationError
from requests.auth import HTTPBasicAuth

from mailgun_v3.credentials import Credentials
from mailgun_v3.exceptions import DeserializationError, HttpStatusError, TransportError
from mailgun_v3.logger import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

QUERY_METHODS = frozenset({"GET", "DELETE", "HEAD"})

logger = get_logger("mailgun_v3.transport")


@dataclass
class AsyncRequest:
    """A partially built asynchronous request.

    Attributes:
        method: HTTP method.
        url: Target URL.
        session: Session to use. When None, a session is created for the call
            and closed afterwards.
        headers: Extra headers sent with the request.
    """

    method: str
    url: str
    session: aiohttp.ClientSession | None = None
    headers: dict[str, str] = field(default_factory=dict)


def _is_success(status: int) -> bool:
    return 200 <= status < 300


def _build_request(
    request: requests.Request, creds: Credentials, params: dict[str, str] | None
) -> requests.Request:
    """Copy ``request`` with auth and ``params`` applied, leaving it untouched."""
    query = dict(request.params or {})
    form = dict(request.data or {})
    if params:
        if request.method.upper() in QUERY_METHODS:
            query.update(params)
        else:
            form.update(params)
    return requests.Request(
        method=request.method,
        url=request.url,
        headers=dict(request.headers or {}),
        files=request.files,
        data=form,
        params=query,
        auth=HTTPBasicAuth(*creds.auth),
        cookies=request.cookies,
        hooks=request.hooks,
        json=request.json,
    )


def execute(
    request: requests.Request,
    creds: Credentials,
    params: dict[str, str] | None = None,
    session: requests.Session | None = None,
) -> Any:
    """Send a blocking request and return the decoded JSON body.

    The caller's ``request`` is never modified, so it can be reused.

    Args:
        request: Request with at least method and URL set.
        creds: Credentials providing the basic-auth password.
        params: Form fields or query parameters to add.
        session: Session to send with. When None, a session is created for
            this call and closed afterwards.

    Raises:
        TransportError: If no response was received.
        HttpStatusError: If the status is not 2xx.
        DeserializationError: If the body is not JSON.
    """
    outgoing = _build_request(request, creds, params)
    method = outgoing.method.upper()

    owned = session is None
    if owned:
        session = requests.Session()
    try:
        prepared = session.prepare_request(outgoing)
        logger.debug("%s %s", method, request.url)
        response = session.send(prepared)
    except requests.RequestException as exc:
        raise TransportError(f"{method} {request.url} failed: {exc}") from exc
    finally:
        if owned:
            session.close()

    if not _is_success(response.status_code):
        logger.warning("%s %s returned HTTP %d", method, request.url, response.status_code)
        raise HttpStatusError(response.status_code, request.url, response.text)

    try:
        return response.json()
    except ValueError as exc:
        raise DeserializationError(f"Response from {request.url} is not JSON") from exc


async def async_execute(
    request: AsyncRequest,
    creds: Credentials,
    params: dict[str, str] | None = None,
) -> Any:
    """Send an asynchronous request and return the decoded JSON body.

    Same contract as ``execute``.
    """
    method = request.method.upper()
    kwargs: dict[str, Any] = {
        "auth": aiohttp.BasicAuth(*creds.auth),
        "headers": request.headers,
    }
    if params:
        kwargs["params" if method in QUERY_METHODS else "data"] = params

    owned = request.session is None
    session = aiohttp.ClientSession() if owned else request.session
    logger.debug("%s %s", method, request.url)
    try:
        async with session.request(method, request.url, **kwargs) as response:
            if not _is_success(response.status):
                body = await response.text()
                logger.warning("%s %s returned HTTP %d", method, request.url, response.status)
                raise HttpStatusError(response.status, request.url, body)
            try:
                return await response.json(content_type=None)
            except ValueError as exc:
                raise DeserializationError(f"Response from {request.url} is not JSON") from exc
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        raise TransportError(f"{method} {request.url} failed: {exc}") from exc
    finally:
        if owned:
            await session.close()


def parse_response(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a decoded JSON body against a response model.

    Raises:
        DeserializationError: If the payload does not match ``model``.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DeserializationError(f"Unexpected {model.__name__} body: {exc}") from exc
