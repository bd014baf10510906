#
# src/minitest_guard/execution/isolation.py
#
"""
Strategies for preparing the environment a test process is spawned in.
"""
import os
from collections.abc import Callable, MutableMapping

import structlog

from minitest_guard.protocols import EnvironmentIsolation
from minitest_guard.telemetry import StructLogger

log: StructLogger = structlog.get_logger("execution.isolation")

BUNDLER_ENV_PREFIXES = ("BUNDLE_", "BUNDLER_")
BUNDLER_SETUP_FLAG = "-rbundler/setup"


class NoIsolation(EnvironmentIsolation):
    """Runs the callable in the current environment."""

    def __call__(self, run: Callable[[], bool]) -> bool:
        return run()


class BundlerCleanEnvironment(EnvironmentIsolation):
    """
    Runs the callable with the host's Bundler settings removed.

    A host started through `bundle exec` leaks its Gemfile into every
    child; the test process must resolve gems on its own. The environment
    is restored once the callable returns or raises.
    """

    def __init__(self, environ: MutableMapping[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    @staticmethod
    def clean(environ: MutableMapping[str, str]) -> dict[str, str]:
        cleaned = {
            key: value
            for key, value in environ.items()
            if not key.startswith(BUNDLER_ENV_PREFIXES)
        }
        rubyopt = cleaned.pop("RUBYOPT", None)
        if rubyopt is not None:
            flags = [flag for flag in rubyopt.split() if not flag.startswith(BUNDLER_SETUP_FLAG)]
            if flags:
                cleaned["RUBYOPT"] = " ".join(flags)
        return cleaned

    def __call__(self, run: Callable[[], bool]) -> bool:
        saved = dict(self._environ)
        cleaned = self.clean(saved)
        log.debug("Running with clean Bundler environment", removed=sorted(set(saved) - set(cleaned)))
        self._environ.clear()
        self._environ.update(cleaned)
        try:
            return run()
        finally:
            self._environ.clear()
            self._environ.update(saved)


def detect_isolation(environ: MutableMapping[str, str] | None = None) -> EnvironmentIsolation:
    """Picks the Bundler cleaner when this process itself runs under Bundler."""
    environ = os.environ if environ is None else environ
    if environ.get("BUNDLE_GEMFILE"):
        return BundlerCleanEnvironment(environ)
    return NoIsolation()

# 🔼⚙️
