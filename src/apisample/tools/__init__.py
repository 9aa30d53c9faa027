"""Tools exposing operation search and sample-request generation.

Each tool is built from a :class:`~apisample.models.ToolContext` and an
:class:`~apisample.lookup.base.OperationLookup`::

    from apisample.tools import get_tools

    tools = get_tools(ToolContext(api_specification_path="openapi.yaml"), lookup)
    result = await tools["search-api-operations"].execute({"query": "payment"})

Sub-modules:

* :mod:`~apisample.tools.base` -- the :class:`Tool` descriptor.
* :mod:`~apisample.tools.sample_request` -- ``generate-api-sample-request``.
* :mod:`~apisample.tools.search_operations` -- ``search-api-operations``.
"""

from __future__ import annotations

from apisample.lookup.base import OperationLookup
from apisample.models import ToolContext
from apisample.tools.base import Tool
from apisample.tools.sample_request import generate_api_sample_request
from apisample.tools.search_operations import search_api_operations


def get_tools(context: ToolContext, lookup: OperationLookup) -> dict[str, Tool]:
    """Build every tool, keyed by its ``method`` identifier."""
    tools = [
        search_api_operations(context, lookup),
        generate_api_sample_request(context, lookup),
    ]
    return {tool.method: tool for tool in tools}


__all__ = [
    "Tool",
    "generate_api_sample_request",
    "get_tools",
    "search_api_operations",
]
