#
# src/minitest_guard/ui/console.py
#
"""
Rich-backed sink for informational messages shown to the user.
"""
from typing import Any

import structlog
from rich.console import Console

from minitest_guard.protocols import MessageSink
from minitest_guard.telemetry import StructLogger

log: StructLogger = structlog.get_logger("ui.console")


class ConsoleUI(MessageSink):
    """Prints messages to the terminal, optionally clearing it first."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def info(self, message: str, reset: bool = False, **options: Any) -> None:
        if reset and self.console.is_terminal:
            self.console.clear()
        self.console.print(message, markup=False, soft_wrap=True)
        log.debug("UI message", message=message, reset=reset)

# 🔼⚙️
