#
# src/minitest_guard/runner/runner.py
#
"""
Runs Minitest for a set of paths and interprets the outcome.
"""
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import structlog

from minitest_guard.config import RunnerOptions, normalize_options
from minitest_guard.execution import MinitestVersionProbe, SubprocessExecutor, detect_isolation
from minitest_guard.inspector import FileInspector
from minitest_guard.protocols import (
    CommandExecutor,
    EnvironmentIsolation,
    Inspector,
    MessageSink,
    Notifier,
    VersionProbe,
)
from minitest_guard.telemetry import StructLogger
from minitest_guard.ui import ConsoleNotifier, ConsoleUI

from .backend import DEFAULT_SPRING_COMMAND, BackendKind, ResolvedBackend, is_enabled, resolve_backend
from .commands import build_command

log: StructLogger = structlog.get_logger("runner")

NOTIFICATION_TITLE = "Minitest results"


class Runner:
    """
    Decides how to run tests for a set of paths, runs them, and reports.

    The backend is resolved once from the (immutable) options. Runs are
    strictly sequential: each call blocks until the test process exits, and
    the re-run triggered by `all_after_pass` is a plain recursive call.
    """

    def __init__(
        self,
        options: RunnerOptions | None = None,
        *,
        inspector: Inspector | None = None,
        ui: MessageSink | None = None,
        notifier: Notifier | None = None,
        executor: CommandExecutor | None = None,
        isolation: EnvironmentIsolation | None = None,
        version_probe: VersionProbe | None = None,
    ):
        self.options = options if options is not None else normalize_options()[0]
        self.backend: ResolvedBackend = resolve_backend(self.options)
        self.inspector = inspector or FileInspector(self.test_folders, self.test_file_patterns)
        self.ui = ui or ConsoleUI()
        self.notifier = notifier or ConsoleNotifier()
        self.executor = executor or SubprocessExecutor()
        self.isolation = isolation or detect_isolation()
        self.version_probe = version_probe or MinitestVersionProbe(bundler=self.backend.bundler)
        log.debug(
            "Runner initialized",
            backend=self.backend.kind.name,
            subcommand=self.backend.subcommand,
            bundler=self.backend.bundler,
            rubygems=self.backend.rubygems,
        )

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any] | None = None,
        cwd: Path | None = None,
        **collaborators: Any,
    ) -> "Runner":
        """Normalizes raw options, builds a Runner and reports deprecated keys through its UI."""
        options, deprecations = normalize_options(raw, cwd=cwd)
        runner = cls(options, **collaborators)
        runner.report_deprecations(deprecations)
        return runner

    def report_deprecations(self, deprecations: Iterable[str]) -> None:
        for message in deprecations:
            log.warning("Deprecated option used", detail=message)
            self.ui.info(message)

    # --- Option accessors ---

    @property
    def cli_options(self) -> list[str]:
        return list(self.options.cli)

    @property
    def bundler(self) -> bool:
        return self.backend.bundler

    @property
    def rubygems(self) -> bool:
        return self.backend.rubygems

    @property
    def drb(self) -> bool:
        return is_enabled(self.options.drb)

    @property
    def zeus(self) -> bool:
        return is_enabled(self.options.zeus)

    @property
    def spring(self) -> bool:
        return is_enabled(self.options.spring)

    @property
    def all_after_pass(self) -> bool:
        return bool(self.options.all_after_pass)

    @property
    def test_folders(self) -> list[str]:
        return list(self.options.test_folders)

    @property
    def include_folders(self) -> list[str]:
        return list(self.options.include)

    @property
    def test_file_patterns(self) -> list[str]:
        return list(self.options.test_file_patterns)

    # --- Command synthesis ---

    def legacy_shim_required(self) -> bool:
        """Only plain ruby and the default spring command can load the shim."""
        kind = self.backend.kind
        if kind is BackendKind.PLAIN or (
            kind is BackendKind.SPRING and self.backend.subcommand == DEFAULT_SPRING_COMMAND
        ):
            return not self.version_probe.minitest_version_gte_5()
        return False

    def command_for(self, paths: Sequence[str]) -> list[str]:
        return build_command(
            self.backend,
            paths,
            self.cli_options,
            test_folders=self.test_folders,
            include_folders=self.include_folders,
            legacy_shim=self.legacy_shim_required(),
        )

    # --- Entry points ---

    def run(self, paths: Iterable[str], all_tests: bool = False) -> bool:
        """
        Runs the given test files.

        Args:
            paths: Test files to run.
            all_tests: Whether this run covers the whole suite.

        Returns:
            True when the test process succeeded. With `all_after_pass`, a
            passing partial run returns the result of the full run instead.
        """
        paths = list(paths)
        message = f"Running: {'all tests' if all_tests else ' '.join(paths)}"
        self.ui.info(message, reset=True)

        command = self.command_for(paths)
        log.info(
            "Running tests",
            backend=self.backend.kind.name,
            path_count=len(paths),
            all_tests=all_tests,
            emoji_key="run",
        )

        if self.bundler:
            status = self.executor.execute(command)
        else:
            status = self.isolation(lambda: self.executor.execute(command))

        # Zeus and spring run the tests in another process, so only the
        # client's exit status tells success from failure.
        if self.backend.reports_out_of_process:
            self.notifier.notify(message, title=NOTIFICATION_TITLE, image="success" if status else "failed")

        if self.all_after_pass and status and not all_tests:
            log.info("Partial run passed, running all tests", emoji_key="success")
            return self.run_all()
        return status

    def run_all(self) -> bool:
        paths = self.inspector.clean_all()
        return self.run(paths, all_tests=True)

    def run_on_modifications(self, paths: Iterable[str] = ()) -> bool:
        paths = self.inspector.clean(list(paths))
        return self.run(paths, all_tests=self._all_paths(paths))

    def run_on_additions(self, paths: Iterable[str]) -> bool:
        self.inspector.clear_memoized_test_files()
        return True

    def run_on_removals(self, paths: Iterable[str]) -> Any:
        return self.inspector.clear_memoized_test_files()

    def _all_paths(self, paths: Sequence[str]) -> bool:
        return list(paths) == list(self.inspector.all_test_files())

# 🔼⚙️
