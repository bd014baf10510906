#
# tests/unit/test_config_loader.py
#
"""Tests for loading configuration files."""

from pathlib import Path

import pytest

from minitest_guard.config import GuardConfig, RunnerOptions, load_config
from minitest_guard.exceptions import ConfigurationError


def write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "minitest_guard.conf"
    path.write_text(content)
    return path


class TestLoadConfig:
    def test_full_config(self, tmp_path: Path):
        path = write_config(
            tmp_path,
            """
[global]
log_level = "DEBUG"
notifier = "log"

[runner]
bundler = false
all_after_pass = true
spring = "rake test"
test_folders = ["test", "test"]
include = ["lib"]
cli = "--pride"
verbose = true
""",
        )

        config = load_config(path, cwd=tmp_path)

        assert config.global_config.log_level == "DEBUG"
        assert config.global_config.notifier == "log"
        assert config.runner == RunnerOptions(
            bundler=False,
            all_after_pass=True,
            spring="rake test",
            test_folders=("test",),
            include=("lib",),
            cli=("--pride", "--verbose"),
        )
        assert len(config.deprecations) == 1

    def test_missing_default_file_uses_defaults(self, tmp_path: Path):
        config = load_config(None, cwd=tmp_path)
        assert config == GuardConfig()

    def test_default_file_is_picked_up(self, tmp_path: Path):
        write_config(tmp_path, "[runner]\ndrb = true\n")
        assert load_config(None, cwd=tmp_path).runner.drb is True

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "nope.conf")

    def test_invalid_toml(self, tmp_path: Path):
        path = write_config(tmp_path, "[runner\nbundler = ")
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_log_level(self, tmp_path: Path):
        path = write_config(tmp_path, '[global]\nlog_level = "LOUD"\n')
        with pytest.raises(ConfigurationError, match="log_level"):
            load_config(path)

    def test_unknown_global_key(self, tmp_path: Path):
        path = write_config(tmp_path, '[global]\ncolour = "blue"\n')
        with pytest.raises(ConfigurationError, match=r"\[global\]"):
            load_config(path)

    def test_unknown_notifier(self, tmp_path: Path):
        path = write_config(tmp_path, '[global]\nnotifier = "growl"\n')
        with pytest.raises(ConfigurationError, match="Unsupported notifier"):
            load_config(path)

    def test_runner_must_be_table(self, tmp_path: Path):
        path = write_config(tmp_path, 'runner = "fast"\n')
        with pytest.raises(ConfigurationError, match="must be a table"):
            load_config(path)
