"""Read-only configuration with XDG paths and precedence resolution.

This module handles the optional user configuration for watsoncli:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.watson/`` on macOS and Windows. See :func:`get_config_dir`.
* **Global config** -- A single :class:`~watsoncli.models.GlobalConfig`
  JSON file storing defaults (output format, request timeout, SSL
  verification). ``$WATSON_CONFIG`` points at an alternative file.
* **Precedence resolution** -- :func:`resolve_output_format` merges the
  CLI flag, the ``WATSON_OUTPUT`` environment variable, the config file
  and the built-in default.

The tool never writes configuration: a missing file simply yields the
defaults, and no directory is created as a side effect of reading.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Optional

from watsoncli.exceptions import ConfigError
from watsoncli.models import GlobalConfig, OutputChoice

_APP_NAME = "watson"
_CONFIG_FILENAME = "config.json"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory.

    On Linux/BSD: ``$XDG_CONFIG_HOME/watson/`` (default ``~/.config/watson/``).
    On macOS/Windows: ``~/.watson/``.

    Returns:
        Absolute path to the configuration directory. It may not exist.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file, honouring ``$WATSON_CONFIG``."""
    override = os.environ.get("WATSON_CONFIG")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration.

    Returns:
        The deserialised :class:`~watsoncli.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but cannot be read, contains invalid
            JSON, or fails Pydantic validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
        return GlobalConfig.model_validate(data)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc


# --- Precedence resolution ---


def resolve_output_format(
    cli_format: Optional[str],
    config: GlobalConfig,
) -> OutputChoice:
    """Resolve the effective ``--output`` value.

    Precedence (high to low):
        1. The ``--output`` flag, when the user supplied it
        2. ``WATSON_OUTPUT`` environment variable
        3. ``output.format`` in the config file
        4. ``table``

    Args:
        cli_format: The flag value, or ``None`` when the flag was not given.
        config: The loaded global configuration.

    Returns:
        The resolved :class:`~watsoncli.models.OutputChoice`.

    Raises:
        ConfigError: If the environment or config file names an unknown
            format.
    """
    if cli_format is not None:
        return OutputChoice(cli_format)

    env_format = os.environ.get("WATSON_OUTPUT")
    candidate, origin = (
        (env_format, "WATSON_OUTPUT") if env_format else (config.output.format, "config")
    )
    try:
        return OutputChoice(candidate.lower())
    except ValueError as exc:
        choices = ", ".join(c.value for c in OutputChoice)
        raise ConfigError(
            f"Unknown output format '{candidate}' from {origin} (choose from {choices})"
        ) from exc
