#
# src/minitest_guard/runner/backend.py
#
"""
Resolves runner options into the single backend used to launch tests.
"""
from enum import Enum, auto
from typing import Any

from attrs import define

from minitest_guard.config.models import RunnerOptions

DEFAULT_ZEUS_COMMAND = "test"
DEFAULT_SPRING_COMMAND = "testunit"


class BackendKind(Enum):
    """How the test process is launched."""

    DRB = auto()  # testdrb against a running DRb server
    ZEUS = auto()  # preloaded zeus process
    SPRING = auto()  # preloaded spring process
    PLAIN = auto()  # a fresh ruby interpreter


@define(frozen=True, slots=True)
class ResolvedBackend:
    """
    The launcher chosen for a run plus the wrappers applied around it.

    `subcommand` is only set for ZEUS and SPRING.
    """

    kind: BackendKind
    subcommand: str | None = None
    bundler: bool = False
    rubygems: bool = False

    @property
    def reports_out_of_process(self) -> bool:
        """True when test output happens in a detached process the host cannot see."""
        return self.kind in (BackendKind.ZEUS, BackendKind.SPRING)


def is_enabled(value: Any) -> bool:
    """A launcher option is on when it is any string (even empty) or truthy."""
    return isinstance(value, str) or bool(value)


def _subcommand(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def resolve_backend(options: RunnerOptions) -> ResolvedBackend:
    """
    Picks exactly one backend. Priority is drb, then zeus, then spring.

    Bundler wraps every backend except spring; rubygems is only required
    explicitly when bundler is not in play.
    """
    bundler = bool(options.bundler) and not is_enabled(options.spring)
    rubygems = not bundler and bool(options.rubygems)

    if is_enabled(options.drb):
        kind, subcommand = BackendKind.DRB, None
    elif is_enabled(options.zeus):
        kind, subcommand = BackendKind.ZEUS, _subcommand(options.zeus, DEFAULT_ZEUS_COMMAND)
    elif is_enabled(options.spring):
        kind, subcommand = BackendKind.SPRING, _subcommand(options.spring, DEFAULT_SPRING_COMMAND)
    else:
        kind, subcommand = BackendKind.PLAIN, None

    return ResolvedBackend(kind=kind, subcommand=subcommand, bundler=bundler, rubygems=rubygems)

# 🔼⚙️
