# src/minitest_guard/cli/run_cmds.py

from collections.abc import Callable
from pathlib import Path

import click
import structlog

from minitest_guard.cli.utils import (
    build_runner,
    config_option,
    logging_options,
    prepare_command,
)
from minitest_guard.exceptions import MinitestGuardError
from minitest_guard.runner.commands import to_command_line
from minitest_guard.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")


def _run_and_exit(ctx: click.Context, run: Callable[[], bool]) -> None:
    """Exit 0 on a passing run, 1 on a failing run, 2 when the run itself broke."""
    try:
        status = run()
    except MinitestGuardError as e:
        log.error("Test run could not be executed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(2)
    except Exception as e:
        log.critical("An unexpected error occurred during the test run", error=str(e), exc_info=True)
        click.echo(f"Error: An unexpected issue occurred: {e}", err=True)
        ctx.exit(2)

    log.info("Run finished", success=status)
    ctx.exit(0 if status else 1)


@click.command(name="run")
@click.argument("paths", nargs=-1)
@config_option
@logging_options
@click.pass_context
def run_cli(ctx: click.Context, paths: tuple[str, ...], config_path: Path | None, **kwargs):
    """Run the tests among PATHS (directories expand to their test files)."""
    config = prepare_command(ctx, config_path, kwargs)
    runner = build_runner(config)
    _run_and_exit(ctx, lambda: runner.run_on_modifications(paths))


@click.command(name="all")
@config_option
@logging_options
@click.pass_context
def all_cli(ctx: click.Context, config_path: Path | None, **kwargs):
    """Run every test file under the configured test folders."""
    config = prepare_command(ctx, config_path, kwargs)
    runner = build_runner(config)
    _run_and_exit(ctx, runner.run_all)


@click.command(name="command")
@click.argument("paths", nargs=-1)
@config_option
@logging_options
@click.pass_context
def command_cli(ctx: click.Context, paths: tuple[str, ...], config_path: Path | None, **kwargs):
    """Print the command line that would run PATHS, without running it."""
    config = prepare_command(ctx, config_path, kwargs)
    runner = build_runner(config)
    click.echo(to_command_line(runner.command_for(list(paths))))

# 🔼⚙️
