"""Operation lookup that reads an OpenAPI document directly.

:class:`LocalSpecLookup` treats the specification path as a local file, an
http(s) URL, or ``-`` for stdin, loads it with
:func:`~apisample.parser.loader.load_spec`, and answers both lookup calls from
the parsed document. Documents are re-read on every call.

Loading is blocking I/O, so it runs in a worker thread via
:func:`asyncio.to_thread`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from apisample.exceptions import SpecParseError, UpstreamLookupFailure
from apisample.lookup.base import OperationLookup
from apisample.parser import (
    extract_operation_document,
    extract_operation_summaries,
    load_spec,
    validate_openapi_version,
)

logger = logging.getLogger(__name__)


class LocalSpecLookup(OperationLookup):
    """Answer lookups from an OpenAPI document on disk or at a URL.

    Args:
        timeout: Timeout in seconds when the specification path is a URL.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self._timeout = timeout

    async def get_api_operations(self, api_specification_path: str) -> str:
        spec = await self._load(api_specification_path)
        operations = extract_operation_summaries(spec)
        logger.debug("Found %d operations in %s", len(operations), api_specification_path)
        return json.dumps({"operations": operations}, ensure_ascii=False)

    async def get_api_operation_details(
        self,
        api_specification_path: str,
        method: str,
        path: str,
    ) -> str:
        spec = await self._load(api_specification_path)
        document = extract_operation_document(spec, method, path)
        if document is None:
            raise UpstreamLookupFailure(
                f"Operation {method.upper()} {path} not found in {api_specification_path}"
            )
        return json.dumps(document, ensure_ascii=False)

    async def _load(self, source: str) -> dict[str, Any]:
        try:
            spec = await asyncio.to_thread(load_spec, source, self._timeout)
            validate_openapi_version(spec)
        except SpecParseError as exc:
            raise UpstreamLookupFailure(str(exc)) from exc
        return spec
