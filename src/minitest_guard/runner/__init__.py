#
# src/minitest_guard/runner/__init__.py
#
"""
Backend resolution, command synthesis and run orchestration.
"""
from .backend import BackendKind, ResolvedBackend, resolve_backend
from .commands import build_command, legacy_shim_path
from .runner import NOTIFICATION_TITLE, Runner

__all__ = [
    "NOTIFICATION_TITLE",
    "BackendKind",
    "ResolvedBackend",
    "Runner",
    "build_command",
    "legacy_shim_path",
    "resolve_backend",
]

# 🔼⚙️
