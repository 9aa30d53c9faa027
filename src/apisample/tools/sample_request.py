"""The ``generate-api-sample-request`` tool.

Fetches one operation from the lookup, synthesises example values for its
parameters and JSON body, and returns the sample request as a ``curl``
command. See :mod:`apisample.sampling` for the assembly rules.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from apisample.lookup.base import OperationLookup
from apisample.models import (
    SampleRequestParams,
    SampleRequestParamsWithSpec,
    ToolContext,
)
from apisample.sampling import build_sample_request
from apisample.tools.base import Tool

logger = logging.getLogger(__name__)

_BASE_DESCRIPTION = """Generates a sample API request snippet (cURL) for a specific API operation
using example values for parameters and request body derived from the API specification."""

_METHOD_ARG = "- method (str): The HTTP method of the operation (e.g., GET, POST, PUT, DELETE)"
_PATH_ARG = (
    "- path (str): The API endpoint path from the specification "
    "(e.g., /payments, /accounts/{id})"
)
_SPEC_ARG = (
    "- apiSpecificationPath (str): The path to the API specification file "
    "(e.g., /open-banking-us/swagger/openbanking-us.yaml)"
)


def get_description(context: ToolContext) -> str:
    """Describe the tool, mentioning the preconfigured spec if there is one."""
    if context.api_specification_path:
        return (
            f"{_BASE_DESCRIPTION}\n\n"
            f"Uses the configured API specification: {context.api_specification_path}\n\n"
            f"It takes two arguments:\n{_METHOD_ARG}\n{_PATH_ARG}"
        )
    return (
        f"{_BASE_DESCRIPTION}\n\n"
        f"It takes three arguments:\n{_SPEC_ARG}\n{_METHOD_ARG}\n{_PATH_ARG}"
    )


def get_parameters(context: ToolContext) -> type[BaseModel]:
    """Pick the argument model: the spec path is only asked for when unset."""
    if context.api_specification_path:
        return SampleRequestParams
    return SampleRequestParamsWithSpec


async def execute(
    context: ToolContext,
    lookup: OperationLookup,
    params: BaseModel,
) -> str:
    """Fetch the operation and render its sample ``curl`` command.

    Raises:
        MalformedOperationDocument: If the lookup returns non-JSON details.
        UpstreamLookupFailure: If the lookup fails.
    """
    spec_path = context.api_specification_path or getattr(
        params, "apiSpecificationPath", None
    )
    method = params.method.upper()
    path = params.path

    logger.debug("Generating sample request for %s %s in %s", method, path, spec_path)
    details = await lookup.get_api_operation_details(spec_path, method, path)
    return build_sample_request(
        details, method, path, fallback_server_url=context.fallback_server_url
    )


def generate_api_sample_request(context: ToolContext, lookup: OperationLookup) -> Tool:
    """Build the sample-request tool for *context*."""

    async def run(params: BaseModel) -> str:
        return await execute(context, lookup, params)

    return Tool(
        method="generate-api-sample-request",
        name="Generate API Sample Request",
        description=get_description(context),
        parameters=get_parameters(context),
        run=run,
    )
