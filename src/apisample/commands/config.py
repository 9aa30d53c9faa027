"""Config commands -- view and modify global configuration.

Provides the ``apisample config`` sub-command group for reading, updating,
and resetting the user's global configuration file
(:class:`~apisample.models.GlobalConfig`).
"""

from __future__ import annotations

import typer
from pydantic import ValidationError

from apisample.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration.

    Includes project config and environment overrides on top of the global
    config file.
    """
    from apisample.config import get_config_dir, resolve_config
    from apisample.exceptions import ConfigError

    try:
        config = resolve_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    info(f"Config directory: {get_config_dir()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'lookup.url')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a global configuration value.

    Uses dot notation for nested keys. The value is validated against
    :class:`~apisample.models.GlobalConfig` before saving, so ``"false"``
    becomes a boolean and ``"10"`` a number where the field requires it.

    Example::

        apisample config set api_specification_path ./openapi.yaml
        apisample config set lookup.url https://lookup.example.com/api
        apisample config set lookup.timeout 10
    """
    from apisample.config import load_global_config, save_global_config
    from apisample.exceptions import ConfigError
    from apisample.models import GlobalConfig

    try:
        config = load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    data = config.model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if not isinstance(target.get(k), dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)
    target[final_key] = value

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValidationError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_global_config(new_config)
    success(f"Set {key} = {value}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset the global configuration to defaults."""
    from apisample.config import save_global_config
    from apisample.models import GlobalConfig

    if not force and not typer.confirm("Reset all config to defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
