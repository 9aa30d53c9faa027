"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for apisample:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.apisample/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~apisample.models.GlobalConfig`
  JSON file storing defaults (specification, lookup service, output format).
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables, project-local config, and global config into the
  final effective configuration.

Writes use a temp-file-then-rename strategy (:func:`_atomic_write`) so a
crash never leaves a half-written config behind.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from apisample.exceptions import ConfigError
from apisample.models import GlobalConfig

_APP_NAME = "apisample"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "apisample.json"

ENV_SPEC = "APISAMPLE_SPEC"
ENV_LOOKUP_URL = "APISAMPLE_LOOKUP_URL"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _xdg_dir(env_var: str, default_segments: tuple[str, ...], fallback: str) -> Path:
    """Resolve ``<xdg base>/apisample`` or ``~/.apisample/<fallback>``, creating it."""
    if _is_xdg_platform():
        env_value = os.environ.get(env_var, "")
        base = Path(env_value) if env_value else Path.home().joinpath(*default_segments)
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
        if fallback:
            path = path / fallback
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/apisample/`` (default ``~/.config/apisample/``).
    On macOS/Windows: ``~/.apisample/``.
    """
    return _xdg_dir("XDG_CONFIG_HOME", (".config",), "")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/apisample/`` (default ``~/.local/share/apisample/``).
    On macOS/Windows: ``~/.apisample/logs/``.
    """
    return _xdg_dir("XDG_DATA_HOME", (".local", "share"), "logs")


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file lives in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. The temp file is
    removed on any failure.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = tempfile.NamedTemporaryFile(
        mode="w",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
        encoding="utf-8",
    )
    try:
        with tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp.name, path)
    except BaseException:
        try:
            os.unlink(tmp.name)
        except OSError:
            pass
        raise


# --- Global config ---


def _global_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~apisample.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    _atomic_write(_global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./apisample.json``.

    The file uses the same keys as the global config; any subset may be
    given. A repository typically pins ``api_specification_path`` here.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


# --- Precedence resolution ---


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_config(
    cli_spec: Optional[str] = None,
    cli_lookup_url: Optional[str] = None,
    cli_format: Optional[str] = None,
) -> GlobalConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_spec``, ``cli_lookup_url``, ``cli_format``)
        2. Environment variables (``APISAMPLE_SPEC``, ``APISAMPLE_LOOKUP_URL``)
        3. Project config (``./apisample.json``)
        4. User config (``~/.config/apisample/config.json``)
        5. Defaults

    Returns:
        The effective :class:`~apisample.models.GlobalConfig`.

    Raises:
        ConfigError: If any config file is invalid.
    """
    config = load_global_config()

    project = load_project_config()
    if project is not None:
        merged = _deep_merge(config.model_dump(mode="json"), project)
        try:
            config = GlobalConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid project config: {exc}") from exc

    env_spec = os.environ.get(ENV_SPEC)
    if env_spec:
        config.api_specification_path = env_spec
    env_lookup_url = os.environ.get(ENV_LOOKUP_URL)
    if env_lookup_url:
        config.lookup.url = env_lookup_url

    if cli_spec is not None:
        config.api_specification_path = cli_spec
    if cli_lookup_url is not None:
        config.lookup.url = cli_lookup_url
    if cli_format is not None:
        config.output.format = cli_format

    return config
