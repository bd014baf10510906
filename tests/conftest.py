from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from minitest_guard.execution import NoIsolation, StaticVersionProbe, SubprocessExecutor
from minitest_guard.inspector import FileInspector
from minitest_guard.runner import Runner
from minitest_guard.ui import ConsoleNotifier, ConsoleUI

ALL_TEST_FILES = ["test/a_test.rb", "test/b_test.rb"]


@pytest.fixture
def mock_inspector() -> MagicMock:
    """Inspector that treats every path as a test file."""
    inspector = MagicMock(spec=FileInspector)
    inspector.clean.side_effect = lambda paths: list(paths)
    inspector.clean_all.return_value = list(ALL_TEST_FILES)
    inspector.all_test_files.return_value = list(ALL_TEST_FILES)
    inspector.clear_memoized_test_files.return_value = None
    return inspector


@pytest.fixture
def mock_ui() -> MagicMock:
    return MagicMock(spec=ConsoleUI)


@pytest.fixture
def mock_notifier() -> MagicMock:
    return MagicMock(spec=ConsoleNotifier)


@pytest.fixture
def mock_executor() -> MagicMock:
    """Executor whose runs succeed unless told otherwise."""
    executor = MagicMock(spec=SubprocessExecutor)
    executor.execute.return_value = True
    return executor


@pytest.fixture
def make_runner(
    mock_inspector: MagicMock,
    mock_ui: MagicMock,
    mock_notifier: MagicMock,
    mock_executor: MagicMock,
) -> Callable[..., Runner]:
    """Builds a Runner from raw options with every collaborator mocked."""

    def _make(isolation: Any = None, gte_5: bool = True, **raw: Any) -> Runner:
        raw.setdefault("bundler", False)
        return Runner.from_mapping(
            raw,
            inspector=mock_inspector,
            ui=mock_ui,
            notifier=mock_notifier,
            executor=mock_executor,
            isolation=isolation or NoIsolation(),
            version_probe=StaticVersionProbe(gte_5),
        )

    return _make
