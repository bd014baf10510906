#
# src/minitest_guard/execution/subprocess_executor.py
#
"""
Runs synthesized test commands through the shell, blocking until they exit.
"""
import subprocess
from collections.abc import Sequence
from pathlib import Path

import structlog

from minitest_guard.exceptions import ExecutionError
from minitest_guard.protocols import CommandExecutor
from minitest_guard.telemetry import StructLogger

log: StructLogger = structlog.get_logger("execution.subprocess")


class SubprocessExecutor(CommandExecutor):
    """
    Implements the CommandExecutor protocol with `subprocess.run`.

    The test process inherits stdout/stderr so its own reporter output
    reaches the user directly. There is no timeout: a hung test process
    blocks the caller.
    """

    def __init__(self, working_dir: Path | None = None):
        self.working_dir = working_dir

    def execute(self, command: Sequence[str]) -> bool:
        command_line = " ".join(command)
        runner_log = log.bind(
            command=command_line,
            working_dir=str(self.working_dir or Path.cwd()),
        )
        runner_log.debug("Executing test command", emoji_key="run")

        try:
            completed = subprocess.run(command_line, shell=True, cwd=self.working_dir, check=False)
        except OSError as e:
            runner_log.error("Failed to spawn test command", error=str(e))
            raise ExecutionError(
                f"Could not start test command: {command_line}", command=command_line, details=e
            ) from e

        success = completed.returncode == 0
        runner_log.info(
            "Test command finished",
            exit_code=completed.returncode,
            success=success,
            emoji_key="success" if success else "fail",
        )
        return success

# 🔼⚙️
