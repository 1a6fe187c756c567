"""
QML Script IntelliSense File Watcher.

Cross-platform file system monitoring using watchdog. Every change to
a script file is pushed to a callback, normally a cache invalidation.
Requires Python 3.11+.
"""

import fnmatch
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from watchdog.observers import Observer
from watchdog.events import (
    FileSystemEvent,
    FileSystemEventHandler,
    FileSystemMovedEvent,
)

from resolver.constants import SCRIPT_EXTENSION
from utils.config import get_settings
from utils.logger import LoggerMixin

ChangeCallback = Callable[[Path, str], Any]


class ScriptFileHandler(FileSystemEventHandler, LoggerMixin):
    """
    Handles file system events for script files.

    Directory events, non-script files and ignored directories are
    filtered out. A move is reported as a deletion of the source and a
    creation of the destination.
    """

    def __init__(
        self,
        on_change: ChangeCallback,
        ignore_patterns: list[str] | None = None,
    ) -> None:
        """
        Initialize the file handler.

        Args:
            on_change: Called with (path, change_type) for each relevant event
            ignore_patterns: Directory name patterns to ignore
        """
        super().__init__()
        self._on_change = on_change
        self._ignore_patterns = ignore_patterns or []

    def _should_ignore(self, path: str) -> bool:
        """Check if any directory component matches an ignore pattern."""
        parts = Path(path).parts[:-1]
        return any(
            fnmatch.fnmatch(part, pattern)
            for part in parts
            for pattern in self._ignore_patterns
        )

    def _is_script_file(self, path: str) -> bool:
        """Check if path is a script file."""
        return path.endswith(SCRIPT_EXTENSION)

    def _dispatch_change(self, path: bytes | str, change_type: str) -> None:
        path = os.fsdecode(path)
        if not self._is_script_file(path) or self._should_ignore(path):
            return

        self.log.debug("script_changed", path=path, change_type=change_type)
        try:
            self._on_change(Path(path), change_type)
        except Exception as e:
            # The observer thread must survive a failing callback
            self.log.error("change_callback_failed", path=path, error=str(e))

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation."""
        if not event.is_directory:
            self._dispatch_change(event.src_path, "created")

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification."""
        if not event.is_directory:
            self._dispatch_change(event.src_path, "modified")

    def on_deleted(self, event: FileSystemEvent) -> None:
        """Handle file deletion."""
        if not event.is_directory:
            self._dispatch_change(event.src_path, "deleted")

    def on_moved(self, event: FileSystemMovedEvent) -> None:
        """Handle file move/rename."""
        if event.is_directory:
            return
        self._dispatch_change(event.src_path, "deleted")
        self._dispatch_change(event.dest_path, "created")


class FileWatcher(LoggerMixin):
    """
    Watches a workspace for script file changes.

    Uses watchdog for cross-platform file system monitoring. Changes
    are delivered as they are observed; there is no polling.
    """

    def __init__(
        self,
        root_path: Path,
        on_change: ChangeCallback,
        ignore_patterns: list[str] | None = None,
        recursive: bool | None = None,
    ) -> None:
        """
        Initialize the file watcher.

        Args:
            root_path: Root directory to watch
            on_change: Callback for each change (path, change_type)
            ignore_patterns: Directory name patterns to ignore
            recursive: Whether to watch subdirectories
        """
        settings = get_settings()

        self._root_path = root_path
        self._recursive = settings.watcher.recursive if recursive is None else recursive
        self._ignore_patterns = ignore_patterns or settings.workspace.exclude_patterns

        self._handler = ScriptFileHandler(
            on_change=on_change,
            ignore_patterns=self._ignore_patterns,
        )

        self._observer: Observer | None = None
        self._running = False

    @property
    def handler(self) -> ScriptFileHandler:
        """The event handler scheduled on the observer."""
        return self._handler

    def start(self) -> None:
        """Start watching for file changes."""
        if self._running:
            return

        self._observer = Observer()
        self._observer.schedule(
            self._handler,
            str(self._root_path),
            recursive=self._recursive,
        )
        self._observer.start()
        self._running = True

        self.log.info(
            "file_watcher_started",
            path=str(self._root_path),
            recursive=self._recursive,
            ignore_patterns=self._ignore_patterns,
        )

    def stop(self) -> None:
        """Stop watching for file changes."""
        if not self._running:
            return

        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=5.0)
            self._observer = None

        self._running = False
        self.log.info("file_watcher_stopped")

    @property
    def is_running(self) -> bool:
        """Check if the watcher is running."""
        return self._running

    def __enter__(self) -> "FileWatcher":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.stop()
