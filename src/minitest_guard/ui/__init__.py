#
# src/minitest_guard/ui/__init__.py
#
"""
User-facing messages and result notifications.
"""
from .console import ConsoleUI
from .notifier import ConsoleNotifier, LogNotifier, NullNotifier, get_notifier

__all__ = ["ConsoleNotifier", "ConsoleUI", "LogNotifier", "NullNotifier", "get_notifier"]

# 🔼⚙️
