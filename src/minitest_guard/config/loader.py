#
# config/loader.py
#
"""
Loads minitest_guard configuration from a TOML file.
"""

import tomllib
from pathlib import Path
from typing import Any

import structlog

from minitest_guard.exceptions import ConfigurationError
from minitest_guard.telemetry import StructLogger

from .models import GlobalConfig, GuardConfig
from .options import normalize_options

log: StructLogger = structlog.get_logger("config.loader")

DEFAULT_CONFIG_PATH = Path("minitest_guard.conf")


def _table(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"Section [{name}] must be a table", path=str(path))
    return value


def build_config(data: dict[str, Any], path: Path, cwd: Path | None = None) -> GuardConfig:
    """Builds a GuardConfig from already-parsed TOML data."""
    from minitest_guard.ui.notifier import NOTIFIER_MAP

    global_table = _table(data, "global", path)
    try:
        global_config = GlobalConfig(**global_table)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid [global] section: {e}", path=str(path)) from e

    if global_config.notifier.lower() not in NOTIFIER_MAP:
        raise ConfigurationError(
            f"Unsupported notifier: '{global_config.notifier}'. "
            f"Available notifiers: {list(NOTIFIER_MAP.keys())}",
            path=str(path),
        )

    runner_options, deprecations = normalize_options(_table(data, "runner", path), cwd=cwd)
    return GuardConfig(runner=runner_options, global_config=global_config, deprecations=deprecations)


def load_config(config_path: Path | None = None, cwd: Path | None = None) -> GuardConfig:
    """
    Loads and validates the configuration file.

    With no path, the default file is read when present; otherwise the
    built-in defaults are returned.

    Raises:
        ConfigurationError: the file is missing, unreadable, or invalid.
    """
    if config_path is None:
        candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_PATH
        if not candidate.is_file():
            log.debug("No config file found, using defaults", looked_for=str(candidate))
            options, deprecations = normalize_options({}, cwd=cwd)
            return GuardConfig(runner=options, deprecations=deprecations)
        config_path = candidate

    log.debug("Loading configuration", path=str(config_path), emoji_key="load")
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError("Config file not found", path=str(config_path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML: {e}", path=str(config_path)) from e
    except OSError as e:
        raise ConfigurationError(f"Could not read config file: {e}", path=str(config_path)) from e

    config = build_config(data, config_path, cwd=cwd)
    log.info("Configuration loaded", path=str(config_path), deprecated_keys=len(config.deprecations))
    return config


# 🔼⚙️
