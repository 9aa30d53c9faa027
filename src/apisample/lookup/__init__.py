"""Operation lookup backends.

Tools never read specifications themselves; they ask an
:class:`~apisample.lookup.base.OperationLookup` for raw operation data.

* :class:`~apisample.lookup.remote.HttpOperationLookup` -- a remote lookup
  service, used when ``lookup.url`` is configured.
* :class:`~apisample.lookup.local.LocalSpecLookup` -- reads the OpenAPI
  document named by the specification path.
"""

from __future__ import annotations

from apisample.lookup.base import OperationLookup
from apisample.lookup.remote import HttpOperationLookup
from apisample.lookup.local import LocalSpecLookup
from apisample.models import GlobalConfig


def create_lookup(config: GlobalConfig) -> OperationLookup:
    """Build the lookup backend selected by *config*."""
    if config.lookup.url:
        return HttpOperationLookup(
            config.lookup.url,
            timeout=config.lookup.timeout,
            verify_ssl=config.lookup.verify_ssl,
        )
    return LocalSpecLookup(timeout=config.lookup.timeout)


__all__ = [
    "HttpOperationLookup",
    "LocalSpecLookup",
    "OperationLookup",
    "create_lookup",
]
