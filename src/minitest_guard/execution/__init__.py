#
# src/minitest_guard/execution/__init__.py
#
"""
Process execution, environment isolation and version probing for test runs.
"""
from .isolation import BundlerCleanEnvironment, NoIsolation, detect_isolation
from .subprocess_executor import SubprocessExecutor
from .version import MinitestVersionProbe, StaticVersionProbe

__all__ = [
    "BundlerCleanEnvironment",
    "MinitestVersionProbe",
    "NoIsolation",
    "StaticVersionProbe",
    "SubprocessExecutor",
    "detect_isolation",
]

# 🔼⚙️
