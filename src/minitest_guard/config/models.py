#
# config/models.py
#
"""
Attrs-based data models for minitest_guard configuration.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeAlias

from attrs import define, field

# drb/zeus/spring accept a boolean or a sub-command name.
LauncherOption: TypeAlias = bool | str

DEFAULT_TEST_FOLDERS = ("test", "spec")
DEFAULT_TEST_FILE_PATTERNS = ("*_test.rb", "test_*.rb", "*_spec.rb")
DEFAULT_NOTIFIER = "console"


def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


@define(frozen=True, slots=True)
class RunnerOptions:
    """
    Finalized options of a Runner.

    Built by `normalize_options`, which applies defaults and migrates
    deprecated keys. `cli` holds the passthrough tokens after migration.
    """

    all_after_pass: bool = field(default=False)
    bundler: bool = field(default=False)
    rubygems: bool = field(default=False)
    drb: LauncherOption = field(default=False)
    zeus: LauncherOption = field(default=False)
    spring: LauncherOption = field(default=False)
    include: tuple[str, ...] = field(default=(), converter=tuple)
    test_folders: tuple[str, ...] = field(default=DEFAULT_TEST_FOLDERS, converter=tuple)
    test_file_patterns: tuple[str, ...] = field(default=DEFAULT_TEST_FILE_PATTERNS, converter=tuple)
    cli: tuple[str, ...] = field(default=(), converter=tuple)
    # Unrecognized keys are kept so they survive a round trip but are never read.
    extra: Mapping[str, Any] = field(factory=dict)


@define(frozen=True, slots=True)
class GlobalConfig:
    """Process-wide settings for minitest_guard."""

    log_level: str = field(default="WARNING", validator=_validate_log_level)
    notifier: str = field(default=DEFAULT_NOTIFIER)


@define(frozen=True, slots=True)
class GuardConfig:
    """Root configuration object loaded from a config file."""

    runner: RunnerOptions = field(factory=RunnerOptions)
    global_config: GlobalConfig = field(factory=GlobalConfig, metadata={"toml_name": "global"})
    deprecations: tuple[str, ...] = field(default=(), converter=tuple)


# 🔼⚙️
