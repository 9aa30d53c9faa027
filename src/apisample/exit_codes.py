"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~apisample.exceptions.ApisampleError` subclass.
Shell wrappers can inspect the exit code to tell a bad invocation from an
unreachable lookup service without parsing stderr.

Example::

    $ apisample sample GET /accounts
    $ echo $?
    6   # EXIT_LOOKUP_FAILURE -- the operation could not be fetched
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_LOOKUP_FAILURE = 6
"""Operation data could not be fetched (network error, HTTP error, unknown operation)."""

EXIT_MALFORMED_DOCUMENT = 7
"""A specification or operation document could not be parsed."""
