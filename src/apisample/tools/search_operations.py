"""The ``search-api-operations`` tool.

Fetches a specification's operation list and filters it by free text and an
optional tag (see :mod:`apisample.search`). If the lookup answers with text
that is not JSON, that text is returned unchanged so callers can read it.
"""

from __future__ import annotations

import json
import logging

from pydantic import BaseModel

from apisample.lookup.base import OperationLookup
from apisample.models import (
    SearchOperationsParams,
    SearchOperationsParamsWithSpec,
    ToolContext,
)
from apisample.search import filter_operations, normalize_operations, render_search_results
from apisample.tools.base import Tool

logger = logging.getLogger(__name__)

_BASE_DESCRIPTION = (
    "Searches API operations within a specification by keyword and optional tag, "
    "filtering by matches in summary, description, or tags."
)

_QUERY_ARG = (
    "- query (str): The search query to match against operation summary, "
    "description, or tags"
)
_TAG_ARG = "- tag (str, optional): A tag name to filter operations"
_SPEC_ARG = (
    "- apiSpecificationPath (str): The path to the API specification file "
    "(e.g., /open-banking-us/swagger/openbanking-us.yaml)"
)


def get_description(context: ToolContext) -> str:
    if context.api_specification_path:
        return (
            f"{_BASE_DESCRIPTION}\n\n"
            f"Uses the configured API specification: {context.api_specification_path}\n\n"
            f"It takes two arguments:\n{_QUERY_ARG}\n{_TAG_ARG}"
        )
    return (
        f"{_BASE_DESCRIPTION}\n\n"
        f"It takes three arguments:\n{_SPEC_ARG}\n{_QUERY_ARG}\n{_TAG_ARG}"
    )


def get_parameters(context: ToolContext) -> type[BaseModel]:
    if context.api_specification_path:
        return SearchOperationsParams
    return SearchOperationsParamsWithSpec


async def execute(
    context: ToolContext,
    lookup: OperationLookup,
    params: BaseModel,
) -> str:
    """Fetch and filter operations, returning pretty-printed JSON.

    Raises:
        UpstreamLookupFailure: If the lookup fails.
    """
    spec_path = context.api_specification_path or getattr(
        params, "apiSpecificationPath", None
    )
    response = await lookup.get_api_operations(spec_path)

    try:
        parsed = json.loads(response)
    except (json.JSONDecodeError, TypeError):
        logger.debug("Lookup returned non-JSON operations; passing through")
        return response

    operations = normalize_operations(parsed)
    matches = filter_operations(operations, params.query, params.tag)
    logger.debug("%d of %d operations match %r", len(matches), len(operations), params.query)
    return render_search_results(matches)


def search_api_operations(context: ToolContext, lookup: OperationLookup) -> Tool:
    """Build the search tool for *context*."""

    async def run(params: BaseModel) -> str:
        return await execute(context, lookup, params)

    return Tool(
        method="search-api-operations",
        name="Search API Operations",
        description=get_description(context),
        parameters=get_parameters(context),
        run=run,
    )
