"""Abstract operation lookup -- the contract every lookup backend fulfils.

A lookup answers two questions about a specification, identified by the
path under which it is published (for example
``/open-banking-us/swagger/openbanking-us.yaml``):

* which operations does it declare? (:meth:`OperationLookup.get_api_operations`)
* what does one operation look like? (:meth:`OperationLookup.get_api_operation_details`)

Both return *raw text* rather than decoded data. Callers decide how strictly
to parse it: search passes non-JSON text through verbatim, while sample
generation treats it as a fatal :class:`~apisample.exceptions.MalformedOperationDocument`.
Failures to obtain the text at all raise
:class:`~apisample.exceptions.UpstreamLookupFailure`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class OperationLookup(ABC):
    """Base class for operation lookup backends."""

    @abstractmethod
    async def get_api_operations(self, api_specification_path: str) -> str:
        """Return the operation list of a specification.

        The text is usually a JSON object with an ``operations`` array or a
        bare JSON array, but may be any diagnostic text.

        Raises:
            UpstreamLookupFailure: If the operations cannot be fetched.
        """

    @abstractmethod
    async def get_api_operation_details(
        self,
        api_specification_path: str,
        method: str,
        path: str,
    ) -> str:
        """Return the JSON-encoded operation document for ``method path``.

        Raises:
            UpstreamLookupFailure: If the operation cannot be fetched.
        """
