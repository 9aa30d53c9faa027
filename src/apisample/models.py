"""Canonical Pydantic models shared across all apisample modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into three groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`LookupConfig`, :class:`OutputConfig`, and :class:`GlobalConfig`.

**Tool models** -- the context a tool is constructed with and the two
parameter-schema variants of each tool:
    :class:`ToolContext`, :class:`SampleRequestParams`,
    :class:`SampleRequestParamsWithSpec`, :class:`SearchOperationsParams`,
    and :class:`SearchOperationsParamsWithSpec`.

**Assembly output** -- :class:`RequestRepresentation`, the fully resolved
sample request produced by :mod:`apisample.sampling.assembler`.

Operation documents and schema nodes are deliberately *not* modelled here:
they arrive as partial, sometimes malformed JSON and are walked as plain
dicts so that synthesis never fails on an incomplete specification.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SERVER_URL = "https://api.mastercard.com"
"""Base URL used when an operation document declares no ``servers``."""


# --- Config ---


class LookupConfig(BaseModel):
    """Where operation data comes from.

    When ``url`` is set, operations are fetched from a remote lookup service
    over HTTP. Otherwise the specification path is treated as a local file
    or spec URL and read directly.
    """

    url: Optional[str] = Field(
        default=None, description="Base URL of a remote operation lookup service"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/apisample/config.json``.

    Loaded and saved by :func:`~apisample.config.load_global_config` and
    :func:`~apisample.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by project config, environment
    variables, or CLI flags. See :func:`~apisample.config.resolve_config`
    for the full precedence chain.
    """

    api_specification_path: Optional[str] = Field(
        default=None, description="Specification used when none is passed explicitly"
    )
    fallback_server_url: str = Field(
        default=DEFAULT_SERVER_URL,
        description="Base URL for operations that declare no servers",
    )
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# --- Tools ---


class ToolContext(BaseModel):
    """Construction-time context shared by every tool.

    When ``api_specification_path`` is set, tools are built with the
    parameter-schema variant that omits ``apiSpecificationPath``.
    """

    api_specification_path: Optional[str] = None
    fallback_server_url: str = DEFAULT_SERVER_URL


class SampleRequestParams(BaseModel):
    """Arguments of the sample-request tool when the spec is preconfigured."""

    model_config = ConfigDict(extra="forbid")

    method: str = Field(
        description="The HTTP method of the operation (e.g., GET, POST, PUT, DELETE)"
    )
    path: str = Field(
        description="The API endpoint path from the specification "
        "(e.g., /payments, /accounts/{id})"
    )


class SampleRequestParamsWithSpec(BaseModel):
    """Arguments of the sample-request tool when the caller names the spec."""

    model_config = ConfigDict(extra="forbid")

    apiSpecificationPath: str = Field(
        description="The path to the API specification "
        "(e.g., /open-banking-us/swagger/openbanking-us.yaml)"
    )
    method: str = Field(
        description="The HTTP method of the operation (e.g., GET, POST, PUT, DELETE)"
    )
    path: str = Field(
        description="The API endpoint path from the specification "
        "(e.g., /payments, /accounts/{id})"
    )


class SearchOperationsParams(BaseModel):
    """Arguments of the search tool when the spec is preconfigured."""

    model_config = ConfigDict(extra="forbid")

    query: str = Field(
        description="The search query to match against operation summary, "
        "description, or tags"
    )
    tag: Optional[str] = Field(default=None, description="A tag name to filter operations")


class SearchOperationsParamsWithSpec(BaseModel):
    """Arguments of the search tool when the caller names the spec."""

    model_config = ConfigDict(extra="forbid")

    apiSpecificationPath: str = Field(
        description="The path to the API specification file "
        "(e.g., /open-banking-us/swagger/openbanking-us.yaml)"
    )
    query: str = Field(
        description="The search query to match against operation summary, "
        "description, or tags"
    )
    tag: Optional[str] = Field(default=None, description="A tag name to filter operations")


# --- Assembly output ---


class RequestRepresentation(BaseModel):
    """A fully resolved sample request.

    ``headers`` holds ``"name: value"`` lines in declaration order, followed
    by any body-derived headers. ``body`` is ``None`` when the operation
    declares no JSON request body; ``has_body`` distinguishes that case from
    a body whose synthesised value is itself ``None``.
    """

    method: str
    url: str
    headers: list[str] = Field(default_factory=list)
    body: Any = None
    has_body: bool = False
