"""
QML Script IntelliSense Session.

Owns the per-workspace state: function cache, file finder and watcher.
Requires Python 3.11+.
"""

from pathlib import Path
from typing import Any

from cache.function_cache import FunctionCache
from utils.config import Settings, get_settings
from utils.logger import LoggerMixin
from watcher.file_watcher import FileWatcher
from workspace.finder import WorkspaceFinder


class IntellisenseSession(LoggerMixin):
    """
    Per-workspace state, constructed at start and torn down at close.

    The watcher pushes every script change into ``cache.invalidate``.
    """

    def __init__(
        self,
        root_path: Path | None = None,
        settings: Settings | None = None,
        watch: bool | None = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            root_path: Workspace root; defaults to the configured root
            settings: Settings to use; defaults to the cached settings
            watch: Override for the watcher.enabled setting
        """
        self.settings = settings or get_settings()
        self.root_path = root_path or self.settings.workspace.root
        self.cache = FunctionCache()
        self.finder = WorkspaceFinder(
            self.root_path,
            exclude_patterns=self.settings.workspace.exclude_patterns,
        )

        watch_enabled = self.settings.watcher.enabled if watch is None else watch
        self.watcher: FileWatcher | None = None
        if watch_enabled and self.root_path is not None:
            self.watcher = FileWatcher(
                root_path=self.root_path,
                on_change=self._on_script_changed,
                ignore_patterns=self.settings.workspace.exclude_patterns,
                recursive=self.settings.watcher.recursive,
            )

    def _on_script_changed(self, path: Path, change_type: str) -> None:
        self.cache.invalidate(path)

    @property
    def exclude_patterns(self) -> list[str]:
        """Directory patterns skipped when enumerating the workspace."""
        return self.settings.workspace.exclude_patterns

    def start(self) -> None:
        """Start watching the workspace."""
        if self.watcher is not None and self.root_path is not None and self.root_path.is_dir():
            self.watcher.start()
        self.log.info(
            "session_started",
            root=str(self.root_path) if self.root_path else None,
            watching=self.watcher is not None and self.watcher.is_running,
        )

    def close(self) -> None:
        """Stop watching and drop cached data."""
        if self.watcher is not None:
            self.watcher.stop()
        self.cache.clear()
        self.log.info("session_closed")

    def get_stats(self) -> dict[str, Any]:
        """Cache statistics plus session details."""
        return {
            "root": str(self.root_path) if self.root_path else None,
            "watching": self.watcher is not None and self.watcher.is_running,
            **self.cache.get_cache_stats(),
        }

    def __enter__(self) -> "IntellisenseSession":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
