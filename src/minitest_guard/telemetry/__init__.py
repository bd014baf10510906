#
# src/minitest_guard/telemetry/__init__.py
#
"""
Logging setup and shared logger types for minitest_guard.
"""
from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️
