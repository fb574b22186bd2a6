# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Manage stored templates.

Endpoints, relative to ``{api_base}/{domain}``:
    - POST templates: create a template (and its first version)
    - GET templates: list all templates
    - GET templates/{name}: one template with its active version
    - GET templates/{name}/versions: one template with all its versions
    - DELETE templates/{name}: delete a template and all its versions

Listing always returns ``GetTemplatesResponse`` so callers handle a single
shape whichever endpoint was hit.

Example:
    Creating a handlebars template::

        template = Template(
            name="welcome",
            description="Welcome email",
            template="Hello {{fname}} {{lname}}",
            engine="handlebars",
        )
        created = create_template(creds, template)
        listing = get_templates(creds, "welcome", fetch_versions=True)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any

import aiohttp
import requests
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mailgun_v3.credentials import Credentials, path_segment
from mailgun_v3.transport import AsyncRequest, async_execute, execute, parse_response

TEMPLATES_ENDPOINT = "templates"
TEMPLATE_VERSIONS_ENDPOINT = "versions"


@dataclass
class Template:
    """Template to create.

    Attributes:
        name: Template name, unique within the domain.
        description: Human-readable description.
        template: Content of the initial version.
        tag: Tag of the initial version.
        engine: Template engine, e.g. ``handlebars``.
        comment: Comment of the initial version.
    """

    name: str
    description: str
    template: str | None = None
    tag: str | None = None
    engine: str | None = None
    comment: str | None = None

    def to_params(self) -> dict[str, str]:
        params = {"name": self.name, "description": self.description}
        for key in ("template", "tag", "engine", "comment"):
            value = getattr(self, key)
            if value is not None:
                params[key] = value
        return params


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VersionResponse(_CamelModel):
    """One version of a template."""

    created_at: Annotated[str, Field(description="Creation date (RFC 2822)")]
    engine: str
    tag: str
    comment: str
    mjml: str
    template: str | None = None
    id: str | None = None
    active: bool


class TemplateResponse(_CamelModel):
    """Template metadata, with the active version or the version list."""

    created_at: Annotated[str, Field(description="Creation date (RFC 2822)")]
    created_by: str
    description: str
    name: str
    id: str
    version: Annotated[
        VersionResponse | None,
        Field(default=None, description="Active version (single template lookup)")
    ]
    versions: Annotated[
        list[VersionResponse] | None,
        Field(default=None, description="All versions (versions lookup)")
    ]


class CreateTemplateResponse(_CamelModel):
    message: str
    template: TemplateResponse


class GetTemplatesResponse(_CamelModel):
    """Uniform listing result."""

    items: list[TemplateResponse]
    paging: Annotated[
        dict[str, Any] | None,
        Field(default=None, description="Pagination links of the list-all endpoint")
    ]


class GetSingleTemplateResponse(_CamelModel):
    template: TemplateResponse


class DeletedTemplate(_CamelModel):
    name: str


class DeleteTemplateResponse(_CamelModel):
    message: str
    template: DeletedTemplate


def templates_url(
    creds: Credentials, template_name: str | None = None, fetch_versions: bool = False
) -> str:
    """URL of the listing endpoint matching the lookup.

    ``fetch_versions`` only applies when a name is given.
    """
    if template_name is None:
        return creds.domain_url(TEMPLATES_ENDPOINT)
    if fetch_versions:
        return creds.domain_url(
            TEMPLATES_ENDPOINT, path_segment(template_name), TEMPLATE_VERSIONS_ENDPOINT
        )
    return creds.domain_url(TEMPLATES_ENDPOINT, path_segment(template_name))


def _listing(payload: Any, template_name: str | None) -> GetTemplatesResponse:
    if template_name is None:
        return parse_response(GetTemplatesResponse, payload)
    single = parse_response(GetSingleTemplateResponse, payload)
    return GetTemplatesResponse(items=[single.template])


# --- Create ---

def create_template(creds: Credentials, template: Template) -> CreateTemplateResponse:
    """Create a template, with its first version when content is given."""
    request = requests.Request("POST", creds.domain_url(TEMPLATES_ENDPOINT))
    return create_template_with_request(request, creds, template)


def create_template_with_client(
    session: requests.Session, creds: Credentials, template: Template
) -> CreateTemplateResponse:
    request = requests.Request("POST", creds.domain_url(TEMPLATES_ENDPOINT))
    return create_template_with_request(request, creds, template, session=session)


def create_template_with_request(
    request: requests.Request,
    creds: Credentials,
    template: Template,
    session: requests.Session | None = None,
) -> CreateTemplateResponse:
    payload = execute(request, creds, template.to_params(), session=session)
    return parse_response(CreateTemplateResponse, payload)


async def async_create_template(creds: Credentials, template: Template) -> CreateTemplateResponse:
    request = AsyncRequest("POST", creds.domain_url(TEMPLATES_ENDPOINT))
    return await async_create_template_with_request(request, creds, template)


async def async_create_template_with_client(
    session: aiohttp.ClientSession, creds: Credentials, template: Template
) -> CreateTemplateResponse:
    request = AsyncRequest("POST", creds.domain_url(TEMPLATES_ENDPOINT), session=session)
    return await async_create_template_with_request(request, creds, template)


async def async_create_template_with_request(
    request: AsyncRequest, creds: Credentials, template: Template
) -> CreateTemplateResponse:
    payload = await async_execute(request, creds, template.to_params())
    return parse_response(CreateTemplateResponse, payload)


# --- List ---

def get_templates(
    creds: Credentials, template_name: str | None = None, fetch_versions: bool = False
) -> GetTemplatesResponse:
    """List templates.

    Args:
        creds: API credentials.
        template_name: Restrict to one template. When None, every template of
            the domain is listed.
        fetch_versions: With ``template_name``, include all its versions.

    Returns:
        GetTemplatesResponse; a single-template lookup yields one item.
    """
    request = requests.Request("GET", templates_url(creds, template_name, fetch_versions))
    return get_templates_with_request(request, creds, template_name)


def get_templates_with_client(
    session: requests.Session,
    creds: Credentials,
    template_name: str | None = None,
    fetch_versions: bool = False,
) -> GetTemplatesResponse:
    request = requests.Request("GET", templates_url(creds, template_name, fetch_versions))
    return get_templates_with_request(request, creds, template_name, session=session)


def get_templates_with_request(
    request: requests.Request,
    creds: Credentials,
    template_name: str | None = None,
    session: requests.Session | None = None,
) -> GetTemplatesResponse:
    """List templates with an externally built request.

    ``template_name`` only selects how the body is parsed; the request URL
    must already point at the matching endpoint.
    """
    payload = execute(request, creds, session=session)
    return _listing(payload, template_name)


async def async_get_templates(
    creds: Credentials, template_name: str | None = None, fetch_versions: bool = False
) -> GetTemplatesResponse:
    request = AsyncRequest("GET", templates_url(creds, template_name, fetch_versions))
    return await async_get_templates_with_request(request, creds, template_name)


async def async_get_templates_with_client(
    session: aiohttp.ClientSession,
    creds: Credentials,
    template_name: str | None = None,
    fetch_versions: bool = False,
) -> GetTemplatesResponse:
    request = AsyncRequest(
        "GET", templates_url(creds, template_name, fetch_versions), session=session
    )
    return await async_get_templates_with_request(request, creds, template_name)


async def async_get_templates_with_request(
    request: AsyncRequest, creds: Credentials, template_name: str | None = None
) -> GetTemplatesResponse:
    payload = await async_execute(request, creds)
    return _listing(payload, template_name)


# --- Delete ---

def delete_template(creds: Credentials, template_name: str) -> DeleteTemplateResponse:
    """Delete a template and all of its versions."""
    request = requests.Request("DELETE", templates_url(creds, template_name))
    return delete_template_with_request(request, creds)


def delete_template_with_client(
    session: requests.Session, creds: Credentials, template_name: str
) -> DeleteTemplateResponse:
    request = requests.Request("DELETE", templates_url(creds, template_name))
    return delete_template_with_request(request, creds, session=session)


def delete_template_with_request(
    request: requests.Request, creds: Credentials, session: requests.Session | None = None
) -> DeleteTemplateResponse:
    payload = execute(request, creds, session=session)
    return parse_response(DeleteTemplateResponse, payload)


async def async_delete_template(creds: Credentials, template_name: str) -> DeleteTemplateResponse:
    request = AsyncRequest("DELETE", templates_url(creds, template_name))
    return await async_delete_template_with_request(request, creds)


async def async_delete_template_with_client(
    session: aiohttp.ClientSession, creds: Credentials, template_name: str
) -> DeleteTemplateResponse:
    request = AsyncRequest("DELETE", templates_url(creds, template_name), session=session)
    return await async_delete_template_with_request(request, creds)


async def async_delete_template_with_request(
    request: AsyncRequest, creds: Credentials
) -> DeleteTemplateResponse:
    payload = await async_execute(request, creds)
    return parse_response(DeleteTemplateResponse, payload)
