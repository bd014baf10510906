#
# src/minitest_guard/inspector.py
#
"""
Finds test files under the configured folders and filters changed paths.
"""
from collections.abc import Iterable, Sequence
from pathlib import Path

import structlog

from minitest_guard.protocols import Inspector
from minitest_guard.telemetry import StructLogger

log: StructLogger = structlog.get_logger("inspector")


class FileInspector(Inspector):
    """
    Filesystem-backed Inspector.

    Paths are handled as strings relative to `root` (the working directory
    by default). The full listing is memoized until
    `clear_memoized_test_files` is called.
    """

    def __init__(
        self,
        test_folders: Sequence[str],
        test_file_patterns: Sequence[str],
        root: Path | None = None,
    ):
        self.test_folders = list(test_folders)
        self.test_file_patterns = list(test_file_patterns)
        self.root = root or Path.cwd()
        self._all_test_files: list[str] | None = None

    def clean_all(self) -> list[str]:
        return self.clean(self.test_folders)

    def clean(self, paths: Iterable[str]) -> list[str]:
        """Keeps test files, expands directories, drops everything else."""
        known = set(self._test_files_for_paths())
        cleaned: list[str] = []
        for path in paths:
            if path is None:
                continue
            if (self.root / path).is_dir():
                cleaned.extend(self._test_files_for_paths([path]))
            elif Path(path).as_posix() in known:
                cleaned.append(Path(path).as_posix())
        result = list(dict.fromkeys(cleaned))
        log.debug("Cleaned paths", known_test_files=len(known), kept=len(result))
        return result

    def all_test_files(self) -> list[str]:
        if self._all_test_files is None:
            self._all_test_files = self._test_files_for_paths()
        return self._all_test_files

    def clear_memoized_test_files(self) -> None:
        self._all_test_files = None

    def _test_files_for_paths(self, paths: Iterable[str] | None = None) -> list[str]:
        folders = self.test_folders if paths is None else paths
        found: list[str] = []
        for folder in folders:
            base = self.root / folder
            if not base.is_dir():
                continue
            for pattern in self.test_file_patterns:
                for match in sorted(base.rglob(pattern)):
                    if match.is_file():
                        found.append((Path(folder) / match.relative_to(base)).as_posix())
        return list(dict.fromkeys(found))

# 🔼⚙️
