"""Typer application factory and CLI entry point for apisample.

This module wires together the top-level Typer application, resolves the
effective configuration in the root callback, and registers the built-in
commands (``search``, ``sample``, ``tools``, ``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. Unhandled exceptions are written to a crash log under the
data directory.

See Also:
    :mod:`apisample.config`: Configuration precedence resolution.
    :mod:`apisample.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from apisample import __version__
from apisample.commands.config import config_app
from apisample.commands.operations import sample_command, search_command, tools_command
from apisample.exit_codes import EXIT_GENERIC_FAILURE
from apisample.output import OutputFormat

app = typer.Typer(
    name="apisample",
    help="Search OpenAPI operations and generate sample curl requests.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("search")(search_command)
app.command("sample")(sample_command)
app.command("tools")(tools_command)
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"apisample {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route library loggers to stderr through Rich when ``--verbose`` is set."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx/httpcore are noisy at DEBUG.
    logging.getLogger("httpcore").setLevel(logging.INFO)


def _configured_format() -> OutputFormat:
    """Output format from config, or ``AUTO`` if the config cannot be read.

    Commands resolve the config again and report any error themselves.
    """
    from apisample.config import resolve_config
    from apisample.exceptions import ConfigError

    try:
        return OutputFormat(resolve_config().output.format)
    except (ConfigError, ValueError):
        return OutputFormat.AUTO


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    spec: Optional[str] = typer.Option(
        None, "--spec", "-s", help="API specification path (file, URL, or lookup path)."
    ),
    lookup_url: Optional[str] = typer.Option(
        None, "--lookup-url", help="Base URL of a remote operation lookup service."
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~apisample.output.OutputManager` and stores
    the CLI overrides in ``ctx.obj`` so that sub-commands can resolve the
    effective configuration with :func:`~apisample.config.resolve_config`.
    """
    from apisample.output import OutputManager, set_output

    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        fmt = _configured_format()

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["spec"] = spec
    ctx.obj["lookup_url"] = lookup_url
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log() -> str:
    """Write the current traceback to disk and return the log file path."""
    from apisample.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``apisample`` console script.

    :class:`~apisample.exceptions.ApisampleError` instances that escape a
    command cause a clean exit with the error's ``exit_code``. All other
    exceptions produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from apisample.exceptions import ApisampleError
        from apisample.output import error

        if isinstance(exc, ApisampleError):
            error(str(exc))
            sys.exit(exc.exit_code)
        log_path = _write_crash_log()
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
