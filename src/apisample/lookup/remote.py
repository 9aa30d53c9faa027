"""Operation lookup backed by a remote lookup service.

:class:`HttpOperationLookup` issues one ``GET`` per call with
:class:`httpx.AsyncClient`:

* ``{base_url}/operations?apiSpecificationPath=...``
* ``{base_url}/operations/detail?apiSpecificationPath=...&method=...&path=...``

Response bodies are returned verbatim. There is no retry; network errors and
HTTP error statuses surface as :class:`~apisample.exceptions.UpstreamLookupFailure`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from apisample.exceptions import UpstreamLookupFailure
from apisample.lookup.base import OperationLookup

logger = logging.getLogger(__name__)


class HttpOperationLookup(OperationLookup):
    """Fetch operation data from a remote lookup service.

    Args:
        base_url: Root URL of the lookup service.
        timeout: Per-request timeout in seconds.
        verify_ssl: Verify the service's TLS certificate.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests.

    Example::

        lookup = HttpOperationLookup("https://lookup.example.com/api")
        text = await lookup.get_api_operations("/payments/openapi.yaml")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._transport = transport

    async def get_api_operations(self, api_specification_path: str) -> str:
        return await self._get(
            "/operations",
            {"apiSpecificationPath": api_specification_path},
        )

    async def get_api_operation_details(
        self,
        api_specification_path: str,
        method: str,
        path: str,
    ) -> str:
        return await self._get(
            "/operations/detail",
            {
                "apiSpecificationPath": api_specification_path,
                "method": method,
                "path": path,
            },
        )

    async def _get(self, endpoint: str, params: dict[str, Any]) -> str:
        """GET *endpoint* and return the response text, mapping failures."""
        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify_ssl,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
        except httpx.RequestError as exc:
            raise UpstreamLookupFailure(f"Failed to reach lookup service at {url}: {exc}") from exc

        status = response.status_code
        if status >= 400:
            detail = response.text[:200] if response.text else ""
            prefix = "not found" if status == 404 else f"HTTP {status}"
            message = f"Lookup {prefix}: {detail}" if detail else f"Lookup {prefix}"
            raise UpstreamLookupFailure(message, status_code=status)
        return response.text
