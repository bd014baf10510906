#
# src/minitest_guard/execution/version.py
#
"""
Answers whether the installed Minitest is version 5 or newer.
"""
import subprocess
from collections.abc import Sequence

import structlog

from minitest_guard.protocols import VersionProbe
from minitest_guard.telemetry import StructLogger

log: StructLogger = structlog.get_logger("execution.version")

# Minitest 4 ships no minitest.rb and keeps its version on MiniTest::Unit.
VERSION_SCRIPT = (
    "begin; require 'minitest'; rescue LoadError; require 'minitest/unit'; end; "
    "print(defined?(Minitest::VERSION) ? Minitest::VERSION : MiniTest::Unit::VERSION)"
)


def parse_major(version: str) -> int:
    return int(version.strip().split(".", 1)[0])


class MinitestVersionProbe(VersionProbe):
    """
    Asks Ruby for the Minitest version once and caches the answer.

    When the version cannot be determined the probe assumes a modern
    Minitest, so no legacy shim is injected.
    """

    def __init__(self, bundler: bool = False, ruby: Sequence[str] = ("ruby",)):
        self.command = [*(("bundle", "exec") if bundler else ()), *ruby, "-e", VERSION_SCRIPT]
        self._major: int | None = None
        self._probed = False

    def _query_major(self) -> int | None:
        try:
            completed = subprocess.run(self.command, capture_output=True, text=True, check=False)
        except OSError as e:
            log.warning("Could not run ruby to detect Minitest version", error=str(e))
            return None
        if completed.returncode != 0:
            log.warning(
                "Minitest version query failed",
                exit_code=completed.returncode,
                stderr=completed.stderr.strip(),
            )
            return None
        try:
            return parse_major(completed.stdout)
        except ValueError:
            log.warning("Unrecognized Minitest version", output=completed.stdout)
            return None

    @property
    def major(self) -> int | None:
        if not self._probed:
            self._major = self._query_major()
            self._probed = True
            log.debug("Detected Minitest major version", major=self._major)
        return self._major

    def minitest_version_gte_5(self) -> bool:
        major = self.major
        return major is None or major >= 5


class StaticVersionProbe(VersionProbe):
    """A probe with a fixed answer, for hosts that already know the version."""

    def __init__(self, gte_5: bool = True):
        self.gte_5 = gte_5

    def minitest_version_gte_5(self) -> bool:
        return self.gte_5

# 🔼⚙️
