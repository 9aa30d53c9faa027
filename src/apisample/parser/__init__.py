"""OpenAPI spec parser -- load documents and extract operation data.

This sub-package backs :class:`~apisample.lookup.local.LocalSpecLookup`: it
turns a raw OpenAPI 3.x document (JSON or YAML, local file or remote URL)
into the operation summaries and operation documents the tools consume.

Typical usage::

    from apisample.parser import load_spec, validate_openapi_version
    from apisample.parser import extract_operation_document

    raw = load_spec("openapi.yaml")
    validate_openapi_version(raw)
    document = extract_operation_document(raw, "POST", "/payments")

Sub-modules:

* :mod:`~apisample.parser.loader` -- I/O layer (URL, file, stdin) plus format
  detection and OpenAPI version validation.
* :mod:`~apisample.parser.extractor` -- Walks the ``paths`` object and builds
  operation summaries and per-operation documents.

``$ref`` pointers are passed through unresolved.
"""

from apisample.parser.extractor import (
    extract_operation_document,
    extract_operation_summaries,
)
from apisample.parser.loader import load_spec, validate_openapi_version

__all__ = [
    "extract_operation_document",
    "extract_operation_summaries",
    "load_spec",
    "validate_openapi_version",
]
