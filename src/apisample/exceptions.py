"""Exception hierarchy for apisample.

All exceptions inherit from :class:`ApisampleError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`apisample.exit_codes`.
The top-level error handler in :func:`apisample.app.main` catches
``ApisampleError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    ApisampleError (exit 1)
    +-- InvalidUsageError           (exit 2)
    +-- UpstreamLookupFailure       (exit 6)
    +-- MalformedOperationDocument  (exit 7)
    +-- SpecParseError              (exit 7)
    +-- ConfigError                 (exit 1)
"""

from __future__ import annotations

from apisample.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_LOOKUP_FAILURE,
    EXIT_MALFORMED_DOCUMENT,
)


class ApisampleError(Exception):
    """Base exception for all apisample errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`apisample.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ApisampleError):
    """Raised for invalid tool arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class UpstreamLookupFailure(ApisampleError):
    """Raised when operation data cannot be fetched from the lookup collaborator.

    Args:
        message: Human-readable error description.
        status_code: HTTP status returned by a remote lookup service, if any.
    """

    exit_code = EXIT_LOOKUP_FAILURE

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedOperationDocument(ApisampleError):
    """Raised when an operation detail document is not a JSON object."""

    exit_code = EXIT_MALFORMED_DOCUMENT


class SpecParseError(ApisampleError):
    """Raised when an OpenAPI spec cannot be parsed or fails validation."""

    exit_code = EXIT_MALFORMED_DOCUMENT


class ConfigError(ApisampleError):
    """Raised for configuration problems (invalid JSON, failed validation)."""

    exit_code = EXIT_GENERIC_FAILURE
