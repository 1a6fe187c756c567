"""
QML Script IntelliSense Workspace Finder.

Bounded enumeration of workspace files by glob.
Requires Python 3.11+.
"""

import asyncio
import fnmatch
import os
import time
from pathlib import Path
from typing import Sequence

from resolver.constants import DEFAULT_EXCLUDE_PATTERNS
from utils.logger import LoggerMixin


def matches_include(relative_path: str, include: str) -> bool:
    """
    Match a POSIX relative path against an include glob.

    A leading ``**/`` matches any directory depth, including none.
    """
    if include.startswith("**/"):
        return fnmatch.fnmatchcase(relative_path.rsplit("/", 1)[-1], include[3:]) or (
            fnmatch.fnmatchcase(relative_path, include)
        )
    return fnmatch.fnmatchcase(relative_path, include)


def is_excluded_dir(name: str, patterns: Sequence[str]) -> bool:
    """Check if a directory name matches any exclude pattern."""
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns)


class WorkspaceFinder(LoggerMixin):
    """
    Finds files under a workspace root.

    Excluded directories are pruned during the walk, and the walk stops
    once ``max_results`` files are found. Files past the bound are
    silently omitted. Results follow a sorted directory walk.
    """

    def __init__(
        self,
        root_path: Path | None,
        exclude_patterns: Sequence[str] = DEFAULT_EXCLUDE_PATTERNS,
    ) -> None:
        """
        Initialize the finder.

        Args:
            root_path: Workspace root; None finds nothing
            exclude_patterns: Default directory name patterns to skip
        """
        self._root_path = root_path
        self._exclude_patterns = list(exclude_patterns)

    @property
    def root_path(self) -> Path | None:
        """Workspace root."""
        return self._root_path

    def find_files_sync(
        self,
        include: str,
        exclude: Sequence[str] | None = None,
        max_results: int | None = None,
    ) -> list[str]:
        """
        Walk the workspace and collect matching files.

        Args:
            include: Glob relative to the root, e.g. ``**/*.js``
            exclude: Directory name patterns; defaults to the finder's own
            max_results: Stop after this many files

        Returns:
            Absolute file paths
        """
        if self._root_path is None or not self._root_path.is_dir():
            return []

        patterns = self._exclude_patterns if exclude is None else list(exclude)
        root = str(self._root_path.resolve())
        found: list[str] = []
        start_time = time.perf_counter()

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            dirnames[:] = sorted(d for d in dirnames if not is_excluded_dir(d, patterns))

            relative_dir = os.path.relpath(dirpath, root)
            for filename in sorted(filenames):
                relative = filename if relative_dir == "." else f"{relative_dir}/{filename}"
                relative = relative.replace(os.sep, "/")
                if not matches_include(relative, include):
                    continue

                found.append(os.path.join(dirpath, filename))
                if max_results is not None and len(found) >= max_results:
                    self.log.debug("file_search_truncated", include=include, limit=max_results)
                    return found

        self.log.debug(
            "file_search_completed",
            include=include,
            count=len(found),
            elapsed_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return found

    async def find_files(
        self,
        include: str,
        exclude: Sequence[str] | None = None,
        max_results: int | None = None,
    ) -> list[str]:
        """Async variant of find_files_sync, run in a worker thread."""
        return await asyncio.to_thread(self.find_files_sync, include, exclude, max_results)

    def _on_walk_error(self, error: OSError) -> None:
        self.log.warning("directory_walk_failed", path=error.filename, error=str(error))
