#
# src/minitest_guard/__init__.py
#
"""
minitest_guard: runs Minitest for changed files on behalf of a file watcher.
"""
from .config import RunnerOptions, normalize_options
from .runner import BackendKind, ResolvedBackend, Runner, build_command, resolve_backend

__all__ = [
    "BackendKind",
    "ResolvedBackend",
    "Runner",
    "RunnerOptions",
    "build_command",
    "normalize_options",
    "resolve_backend",
]

# 🔼⚙️
