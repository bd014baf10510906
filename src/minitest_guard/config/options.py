#
# config/options.py
#
"""
Turns a raw option mapping into finalized RunnerOptions.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .models import DEFAULT_TEST_FILE_PATTERNS, DEFAULT_TEST_FOLDERS, RunnerOptions

DEPRECATED_CLI_KEYS = ("seed", "verbose")

NOTIFY_DEPRECATION = (
    "DEPRECATION WARNING: The :notify option is deprecated. "
    "Guard notification configuration is used."
)


def _cli_deprecation(key: str) -> str:
    return (
        f"DEPRECATION WARNING: The :{key} option is deprecated. "
        f'Pass standard command line argument "--{key}" to Minitest with the :cli option.'
    )


def as_list(value: Any) -> list[Any]:
    """Wraps a scalar in a list; None becomes an empty list."""
    if value is None:
        return []
    if isinstance(value, str | bytes) or not isinstance(value, Iterable):
        return [value]
    return list(value)


def _unique_present(values: Any) -> list[str]:
    """De-duplicates in order, dropping None and empty entries."""
    return list(dict.fromkeys(v for v in as_list(values) if v is not None and v != ""))


def default_bundler(cwd: Path | None = None) -> bool:
    """Bundler is on by default when a Gemfile sits in the working directory."""
    return ((cwd or Path.cwd()) / "Gemfile").exists()


def normalize_options(
    raw: Mapping[str, Any] | None = None,
    cwd: Path | None = None,
) -> tuple[RunnerOptions, list[str]]:
    """
    Applies defaults and migrates deprecated keys.

    `seed` and `verbose` are removed and appended to the cli passthrough as
    `--seed <value>` / `--verbose` (the value is omitted when it is a
    boolean). A false or missing value is dropped silently. `notify` is kept
    as an unused key but reported.

    Returns:
        The finalized options and the deprecation messages, in the order
        the keys were migrated. Nothing is logged here.
    """
    values = dict(raw or {})
    deprecations: list[str] = []

    if "notify" in values:
        deprecations.append(NOTIFY_DEPRECATION)

    cli = [str(token) for token in as_list(values.pop("cli", None))]
    for key in DEPRECATED_CLI_KEYS:
        value = values.pop(key, None)
        if value is None or value is False:
            continue
        flag = f"--{key}"
        if not isinstance(value, bool):
            flag += f" {value}"
        cli.append(flag)
        deprecations.append(_cli_deprecation(key))

    bundler = values.pop("bundler", None)
    options = RunnerOptions(
        all_after_pass=values.pop("all_after_pass", False),
        bundler=default_bundler(cwd) if bundler is None else bundler,
        rubygems=values.pop("rubygems", False),
        drb=values.pop("drb", False),
        zeus=values.pop("zeus", False),
        spring=values.pop("spring", False),
        include=as_list(values.pop("include", None)),
        test_folders=_unique_present(values.pop("test_folders", DEFAULT_TEST_FOLDERS)),
        test_file_patterns=_unique_present(values.pop("test_file_patterns", DEFAULT_TEST_FILE_PATTERNS)),
        cli=cli,
        extra=values,
    )
    return options, deprecations


# 🔼⚙️
