"""Assemble a sample request from an operation document.

The operation document is the JSON description of a single endpoint as
returned by :meth:`~apisample.lookup.base.OperationLookup.get_api_operation_details`.
Only these fields are consulted:

* ``servers`` -- the first entry's ``url`` becomes the base URL.
* ``path`` -- URL template with ``{name}`` placeholders.
* ``parameters`` -- ``path``, ``query`` and ``header`` parameters, in order.
* ``requestBody.content["application/json"]`` -- the JSON body.

:func:`assemble_request` produces a :class:`~apisample.models.RequestRepresentation`
and :func:`render_curl` turns it into the textual ``curl`` form other tooling
depends on::

    curl -X POST 'https://api.example.com/payments/string?verbose=true' -H 'X-Auth: string' -H 'Content-Type: application/json' -d '{"amount":0}'

The document is read-only input; every call builds a fresh representation.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from apisample.exceptions import MalformedOperationDocument
from apisample.models import DEFAULT_SERVER_URL, RequestRepresentation
from apisample.sampling.formatting import (
    encode_uri_component,
    to_compact_json,
    to_display_string,
)
from apisample.sampling.synthesizer import generate_example

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def parse_operation_document(text: str) -> dict[str, Any]:
    """Decode the operation detail text returned by a lookup.

    Args:
        text: Raw JSON text.

    Returns:
        The decoded operation document.

    Raises:
        MalformedOperationDocument: If *text* is not valid JSON or does not
            decode to a JSON object.
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise MalformedOperationDocument(
            "Invalid operation details returned by API"
        ) from exc

    if not isinstance(document, dict):
        raise MalformedOperationDocument(
            "Invalid operation details returned by API "
            f"(expected a JSON object, got {type(document).__name__})"
        )
    return document


def assemble_request(
    document: Mapping[str, Any],
    method: str,
    path: str,
    fallback_server_url: str = DEFAULT_SERVER_URL,
) -> RequestRepresentation:
    """Build a sample request for one operation.

    Args:
        document: The decoded operation document.
        method: HTTP method; uppercased in the result.
        path: Caller-supplied path, used when the document has no ``path``.
        fallback_server_url: Base URL used when the document declares no
            servers.

    Returns:
        The assembled :class:`~apisample.models.RequestRepresentation`.
    """
    url_path = str(document.get("path") or path)
    query_params: list[str] = []
    headers: list[str] = []

    parameters = document.get("parameters")
    if isinstance(parameters, list):
        for param in parameters:
            if not isinstance(param, Mapping):
                continue
            name = str(param.get("name", ""))
            value = param.get("example")
            if value is None:
                value = generate_example(param.get("schema"))

            location = param.get("in")
            if location == "path":
                # Only the first occurrence; unmatched names are dropped.
                url_path = url_path.replace(
                    "{" + name + "}", encode_uri_component(value), 1
                )
            elif location == "query":
                query_params.append(
                    f"{encode_uri_component(name)}={encode_uri_component(value)}"
                )
            elif location == "header":
                headers.append(f"{name}: {to_display_string(value)}")

    body: Any = None
    has_body = False
    json_content = _json_content(document)
    if json_content is not None:
        body = json_content.get("example")
        if body is None:
            body = generate_example(json_content.get("schema"))
        has_body = True
        headers.append(f"Content-Type: {JSON_MEDIA_TYPE}")

    url = f"{_server_url(document, fallback_server_url)}{url_path}"
    if query_params:
        url += "?" + "&".join(query_params)

    logger.debug("Assembled %s %s with %d header(s)", method.upper(), url, len(headers))
    return RequestRepresentation(
        method=method.upper(),
        url=url,
        headers=headers,
        body=body,
        has_body=has_body,
    )


def render_curl(request: RequestRepresentation) -> str:
    """Render *request* as a single-line ``curl`` command.

    Header values are interpolated as-is; a value containing a single quote
    produces a command that needs manual quoting.
    """
    command = f"curl -X {request.method} '{request.url}'"
    for header in request.headers:
        command += f" -H '{header}'"
    if request.has_body:
        command += f" -d '{to_compact_json(request.body)}'"
    return command


def build_sample_request(
    details_text: str,
    method: str,
    path: str,
    fallback_server_url: str = DEFAULT_SERVER_URL,
) -> str:
    """Parse operation detail text and render the sample ``curl`` command.

    Raises:
        MalformedOperationDocument: If *details_text* is not a JSON object.
    """
    document = parse_operation_document(details_text)
    request = assemble_request(document, method, path, fallback_server_url)
    return render_curl(request)


def _server_url(document: Mapping[str, Any], fallback: str) -> str:
    """Return the first server's ``url`` (even if empty), or *fallback*."""
    servers = document.get("servers")
    if isinstance(servers, list) and servers:
        first = servers[0]
        if isinstance(first, Mapping) and first.get("url") is not None:
            return str(first["url"])
    return fallback


def _json_content(document: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """Return ``requestBody.content["application/json"]`` if declared."""
    request_body = document.get("requestBody")
    if not isinstance(request_body, Mapping):
        return None
    content = request_body.get("content")
    if not isinstance(content, Mapping):
        return None
    json_content = content.get(JSON_MEDIA_TYPE)
    if not isinstance(json_content, Mapping):
        return None
    return json_content
