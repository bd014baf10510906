#
# src/minitest_guard/runner/commands.py
#
"""
Builds the exact command line for each backend's invocation dialect.

Tokens are joined with single spaces and handed to a shell, so a token
may carry a flag together with its argument (`-r ./test/a_test.rb`).
"""
from collections.abc import Sequence
from pathlib import Path

from .backend import DEFAULT_SPRING_COMMAND, BackendKind, ResolvedBackend

BUNDLER_PREFIX = ("bundle", "exec")
DRB_LAUNCHER = "testdrb"
ZEUS_LAUNCHER = "zeus"
SPRING_LAUNCHER = "spring"
ARGUMENT_SEPARATOR = "--"

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def legacy_shim_path() -> str:
    """Absolute path of the reporter shim required for Minitest < 5."""
    return str(_PACKAGE_ROOT / "runners" / "old_runner.rb")


def relative_paths(paths: Sequence[str]) -> list[str]:
    return [f"./{path}" for path in paths]


def include_flags(folders: Sequence[str]) -> list[str]:
    return [f'-I"{folder}"' for folder in folders]


def ruby_command(
    backend: ResolvedBackend,
    paths: Sequence[str],
    cli_options: Sequence[str],
    test_folders: Sequence[str],
    include_folders: Sequence[str],
    legacy_shim: bool,
) -> list[str]:
    parts = ["ruby"]
    parts.extend(include_flags([*test_folders, *include_folders]))
    if backend.rubygems:
        parts.append("-r rubygems")
    if backend.bundler:
        parts.append("-r bundler/setup")
    parts.append("-r minitest/autorun")
    parts.extend(f"-r ./{path}" for path in paths)
    if legacy_shim:
        parts.append(f"-r {legacy_shim_path()}")
    # Everything happens through minitest/autorun and the required files;
    # the empty script keeps ruby from reading stdin.
    parts.append('-e ""')
    parts.append(ARGUMENT_SEPARATOR)
    parts.extend(cli_options)
    return parts


def drb_command(paths: Sequence[str]) -> list[str]:
    return [DRB_LAUNCHER, *relative_paths(paths)]


def zeus_command(backend: ResolvedBackend, paths: Sequence[str]) -> list[str]:
    return [ZEUS_LAUNCHER, backend.subcommand or "test", *relative_paths(paths)]


def spring_command(
    backend: ResolvedBackend,
    paths: Sequence[str],
    cli_options: Sequence[str],
    legacy_shim: bool,
) -> list[str]:
    command = backend.subcommand or DEFAULT_SPRING_COMMAND
    parts = [SPRING_LAUNCHER, command]
    # Custom spring commands never get the shim, whatever the Minitest version.
    if legacy_shim and command == DEFAULT_SPRING_COMMAND:
        parts.append(legacy_shim_path())
    if cli_options:
        return [*parts, *paths, ARGUMENT_SEPARATOR, *cli_options]
    return [*parts, *(f"TEST={path}" for path in paths)]


def build_command(
    backend: ResolvedBackend,
    paths: Sequence[str],
    cli_options: Sequence[str] = (),
    *,
    test_folders: Sequence[str] = (),
    include_folders: Sequence[str] = (),
    legacy_shim: bool = False,
) -> list[str]:
    """
    Synthesizes the command tokens for one run.

    Args:
        backend: The resolved backend and its wrappers.
        paths: Test files to run, relative to the working directory.
        cli_options: Passthrough arguments for the test process.
        test_folders: Folders added to the load path (plain ruby only).
        include_folders: Extra load path folders (plain ruby only).
        legacy_shim: Whether the installed Minitest predates version 5.

    Returns:
        The ordered command tokens. Identical inputs give identical tokens.
    """
    if backend.kind is BackendKind.DRB:
        command = drb_command(paths)
    elif backend.kind is BackendKind.ZEUS:
        command = zeus_command(backend, paths)
    elif backend.kind is BackendKind.SPRING:
        command = spring_command(backend, paths, cli_options, legacy_shim)
    else:
        command = ruby_command(backend, paths, cli_options, test_folders, include_folders, legacy_shim)

    if backend.bundler:
        return [*BUNDLER_PREFIX, *command]
    return command


def to_command_line(command: Sequence[str]) -> str:
    return " ".join(command)

# 🔼⚙️
