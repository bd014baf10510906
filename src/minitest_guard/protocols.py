#
# src/minitest_guard/protocols.py
#
"""
Defines the runtime protocols for the Runner's collaborators.
"""
from collections.abc import Callable, Sequence
from typing import Any, Literal, Protocol, TypeAlias, runtime_checkable

NotificationImage: TypeAlias = Literal["success", "failed"]


@runtime_checkable
class Inspector(Protocol):
    """
    Protocol for the component that knows which paths are test files.
    """

    def clean(self, paths: Sequence[str]) -> list[str]:
        """Returns the subset of `paths` that are test files, expanding directories."""
        ...

    def clean_all(self) -> list[str]:
        """Returns every test file under the configured test folders."""
        ...

    def all_test_files(self) -> list[str]:
        """Returns every known test file, possibly from a memoized listing."""
        ...

    def clear_memoized_test_files(self) -> Any:
        """Forgets the memoized listing so the next call re-discovers files."""
        ...


@runtime_checkable
class MessageSink(Protocol):
    """Protocol for user-facing informational messages."""

    def info(self, message: str, **options: Any) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Protocol for out-of-band result notifications."""

    def notify(self, message: str, title: str, image: NotificationImage) -> None: ...


@runtime_checkable
class CommandExecutor(Protocol):
    """
    Protocol for running a synthesized command line.
    """

    def execute(self, command: Sequence[str]) -> bool:
        """
        Runs the command synchronously in the current working directory.

        Returns:
            True when the command exited successfully.
        """
        ...


@runtime_checkable
class EnvironmentIsolation(Protocol):
    """Protocol for a strategy that runs a callable inside a prepared environment."""

    def __call__(self, run: Callable[[], bool]) -> bool: ...


@runtime_checkable
class VersionProbe(Protocol):
    """Protocol for asking which Minitest generation is installed."""

    def minitest_version_gte_5(self) -> bool: ...

# 🔼⚙️
