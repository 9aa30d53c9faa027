"""apisample -- Sample requests and operation search for OpenAPI specifications.

This package turns the operations described by an OpenAPI specification into
ready-to-run sample requests. Given a specification and an operation
(HTTP method + path), it synthesises example values for every declared
parameter and the JSON request body and renders the result as a ``curl``
command. It also searches a specification's operations by free text and tag.

Typical workflow::

    apisample --spec openapi.yaml search payment --tag Payments
    apisample --spec openapi.yaml sample POST /payments/{paymentId}

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: XDG-aware configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    sampling: Example synthesis and request assembly.
    search: Free-text and tag filtering of operation lists.
    lookup: Collaborators that fetch operation data for a specification.
    tools: Tool descriptors exposing search and sample generation.
"""

__version__ = "0.1.0"
