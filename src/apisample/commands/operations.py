"""Operation commands -- search a specification and generate sample requests.

Each command resolves the effective configuration, builds the tools for it
(see :func:`apisample.tools.get_tools`), and runs one tool to completion on
a fresh event loop. Tool errors are reported on stderr and mapped to the
error's exit code.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import typer

from apisample.exceptions import ApisampleError, InvalidUsageError
from apisample.models import ToolContext
from apisample.output import debug, error, format_response, print_data, print_table


def _run_tool(ctx: typer.Context, method: str, params: dict[str, Any]) -> str:
    """Resolve config, build the tool *method*, and execute it with *params*."""
    from apisample.config import resolve_config
    from apisample.lookup import create_lookup
    from apisample.tools import get_tools

    obj = ctx.obj or {}
    try:
        config = resolve_config(cli_spec=obj.get("spec"), cli_lookup_url=obj.get("lookup_url"))
        if not config.api_specification_path:
            raise InvalidUsageError(
                "No API specification configured. Pass --spec or set APISAMPLE_SPEC."
            )
        context = ToolContext(
            api_specification_path=config.api_specification_path,
            fallback_server_url=config.fallback_server_url,
        )
        tool = get_tools(context, create_lookup(config))[method]
        debug(f"Running {tool.method} against {context.api_specification_path}")
        return asyncio.run(tool.execute(params))
    except ApisampleError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def search_command(
    ctx: typer.Context,
    query: str = typer.Argument(
        help="Text to match against operation summary, description, or tags."
    ),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Only operations with this tag."),
) -> None:
    """Search the specification's operations.

    Prints the matching operations as a JSON array. If the lookup answers
    with text that is not JSON, the text is printed as-is.

    Example::

        apisample --spec openapi.yaml search payment
        apisample --spec openapi.yaml search account --tag Finance
    """
    params: dict[str, Any] = {"query": query}
    if tag is not None:
        params["tag"] = tag
    format_response(_run_tool(ctx, "search-api-operations", params))


def sample_command(
    ctx: typer.Context,
    method: str = typer.Argument(help="HTTP method (GET, POST, PUT, DELETE, ...)."),
    path: str = typer.Argument(help="Path template, e.g. /accounts/{id}."),
) -> None:
    """Print a sample curl command for one operation.

    Example::

        apisample --spec openapi.yaml sample POST '/payments/{paymentId}'
    """
    print_data(
        _run_tool(ctx, "generate-api-sample-request", {"method": method, "path": path})
    )


def tools_command(ctx: typer.Context) -> None:
    """List the available tools and their arguments.

    Without a configured specification, each tool also asks for
    ``apiSpecificationPath``.
    """
    from apisample.config import resolve_config
    from apisample.lookup import create_lookup
    from apisample.tools import get_tools

    obj = ctx.obj or {}
    try:
        config = resolve_config(cli_spec=obj.get("spec"), cli_lookup_url=obj.get("lookup_url"))
    except ApisampleError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    context = ToolContext(api_specification_path=config.api_specification_path)
    tools = get_tools(context, create_lookup(config))
    rows = [
        [tool.method, tool.name, ", ".join(tool.parameter_names)]
        for tool in tools.values()
    ]
    print_table(["Method", "Name", "Arguments"], rows, title="Tools")
