# src/minitest_guard/cli/utils.py

import logging
from pathlib import Path

import click
import structlog

from minitest_guard.config import GuardConfig, load_config
from minitest_guard.exceptions import ConfigurationError
from minitest_guard.runner import Runner
from minitest_guard.telemetry.logger import setup_logging as core_setup_logging
from minitest_guard.ui import get_notifier

log = structlog.get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="MINITEST_GUARD_LOG_LEVEL",
        help="Set the logging level (overrides config file).",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="MINITEST_GUARD_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="MINITEST_GUARD_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def config_option(f):
    """Decorator adding the config file option."""
    return click.option(
        "-c",
        "--config-path",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
        default=None,
        envvar="MINITEST_GUARD_CONF",
        help="Path to the configuration file (default: ./minitest_guard.conf if present).",
        show_envvar=True,
    )(f)


def setup_logging_from_context(
    ctx: click.Context,
    local_log_level: str | None = None,
    local_log_file: str | None = None,
    local_json_logs: bool | None = None,
    config_log_level: str | None = None,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using context values, allowing local overrides.

    Level precedence: command option > group option > config file > default.
    """
    log_level_str = local_log_level or ctx.obj.get("LOG_LEVEL") or config_log_level or default_log_level
    log_file_path = local_log_file or ctx.obj.get("LOG_FILE")
    use_json_logs = local_json_logs if local_json_logs is not None else ctx.obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
        log_level_str = "INFO"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )


def build_runner(config: GuardConfig) -> Runner:
    """Creates a Runner wired to the configured notifier and reports deprecated keys."""
    runner = Runner(config.runner, notifier=get_notifier(config.global_config.notifier))
    runner.report_deprecations(config.deprecations)
    return runner


def load_config_or_exit(ctx: click.Context, config_path: Path | None) -> GuardConfig:
    try:
        return load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem: {e}", err=True)
        ctx.exit(1)


def prepare_command(ctx: click.Context, config_path: Path | None, options: dict) -> GuardConfig:
    """
    Sets up logging, loads the config, then applies its `log_level` unless
    a level was given on the command line.
    """
    logging_kwargs = {
        "local_log_level": options.get("log_level"),
        "local_log_file": options.get("log_file"),
        "local_json_logs": options.get("json_logs"),
    }
    setup_logging_from_context(ctx, **logging_kwargs)
    config = load_config_or_exit(ctx, config_path)
    setup_logging_from_context(ctx, config_log_level=config.global_config.log_level, **logging_kwargs)
    return config

# ⚙️🛠️
