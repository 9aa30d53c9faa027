"""Sample request generation -- synthesise example values and assemble requests.

This sub-package is the engine behind the sample-request tool: it turns an
operation document (as returned by an operation lookup) into a runnable
``curl`` command.

Typical usage::

    from apisample.sampling import build_sample_request

    command = build_sample_request(details_text, "POST", "/payments/{paymentId}")

Sub-modules:

* :mod:`~apisample.sampling.synthesizer` -- Recursive, type-driven example
  value generation for schema nodes.
* :mod:`~apisample.sampling.formatting` -- String coercion, URI component
  encoding, and compact JSON helpers shared by the assembler.
* :mod:`~apisample.sampling.assembler` -- Path/query/header/body composition
  and ``curl`` rendering.
"""

from apisample.sampling.assembler import (
    assemble_request,
    build_sample_request,
    parse_operation_document,
    render_curl,
)
from apisample.sampling.synthesizer import generate_example

__all__ = [
    "assemble_request",
    "build_sample_request",
    "generate_example",
    "parse_operation_document",
    "render_curl",
]
