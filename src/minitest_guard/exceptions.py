#
# src/minitest_guard/exceptions.py
#
"""
Exception hierarchy for minitest_guard.

A failing test run is reported as a boolean result, never as one of these.
"""


class MinitestGuardError(Exception):
    """Base class for all minitest_guard errors."""

    pass


class ConfigurationError(MinitestGuardError):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        full_message = message
        if path:
            full_message += f" (Config: '{path}')"
        super().__init__(full_message)


class ExecutionError(MinitestGuardError):
    """Raised when the test command cannot be spawned at all."""

    def __init__(self, message: str, command: str | None = None, details: Exception | None = None):
        self.command = command
        self.details = details
        super().__init__(message)
        if details:
            self.add_note(f"Original error: {type(details).__name__}: {details}")


# 🔼⚙️
