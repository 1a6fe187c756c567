"""
Tests for Function Cache and File Watcher.

Requires Python 3.11+.
"""

from pathlib import Path

import pytest
from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from cache.function_cache import FunctionCache
from resolver.models import FunctionInfo
from watcher.file_watcher import ScriptFileHandler
from workspace.session import IntellisenseSession


class TestFunctionCache:
    """Test cases for FunctionCache."""

    @pytest.fixture
    def cache(self) -> FunctionCache:
        """Create an empty cache."""
        return FunctionCache()

    def test_miss_then_hit(self, cache: FunctionCache, workspace: Path):
        """Test the second lookup is served from the cache."""
        path = workspace / "js" / "util.js"

        first = cache.get_functions(path)
        second = cache.get_functions(path)

        assert [f.name for f in first] == ["clamp"]
        assert second is first
        stats = cache.get_cache_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["cached_files"] == 1

    def test_missing_file_not_cached(self, cache: FunctionCache, workspace: Path):
        """Test unreadable files yield None and no entry."""
        assert cache.get_functions(workspace / "js" / "missing.js") is None
        assert len(cache) == 0

    def test_invalidate_rereads(self, cache: FunctionCache, workspace: Path):
        """Test invalidation makes the next lookup see new content."""
        path = workspace / "js" / "util.js"
        cache.get_functions(path)

        path.write_text("function lerp(a, b, t) {}\n")
        assert [f.name for f in cache.get_functions(path)] == ["clamp"]

        assert cache.invalidate(path) is True
        assert [f.name for f in cache.get_functions(path)] == ["lerp"]
        assert cache.invalidate(workspace / "js" / "other.js") is False

    def test_one_entry_per_path(self, cache: FunctionCache, workspace: Path):
        """Test equivalent spellings of a path share one entry."""
        path = workspace / "js" / "util.js"
        cache.get_functions(path)
        cache.get_functions(str(workspace / "js" / ".." / "js" / "util.js"))

        assert len(cache) == 1
        assert path in cache

    def test_last_write_wins(self, cache: FunctionCache):
        """Test put replaces the existing entry."""
        cache.put("/w/a.js", [FunctionInfo(name="old")])
        cache.put("/w/a.js", [FunctionInfo(name="new")])

        assert [f.name for f in cache.get("/w/a.js")] == ["new"]

    def test_clear(self, cache: FunctionCache, workspace: Path):
        """Test clearing drops all entries."""
        cache.get_functions(workspace / "js" / "util.js")
        cache.clear()

        assert cache.get(workspace / "js" / "util.js") is None


class TestScriptFileHandler:
    """Test cases for watcher event filtering."""

    @pytest.fixture
    def changes(self) -> list[tuple[Path, str]]:
        return []

    @pytest.fixture
    def handler(self, changes: list[tuple[Path, str]]) -> ScriptFileHandler:
        """Create a handler that records changes."""
        return ScriptFileHandler(
            on_change=lambda path, change_type: changes.append((path, change_type)),
            ignore_patterns=["node_modules", "*build-*"],
        )

    def test_script_events(self, handler: ScriptFileHandler, changes: list):
        """Test created, modified and deleted script events are forwarded."""
        handler.on_created(FileCreatedEvent("/w/js/a.js"))
        handler.on_modified(FileModifiedEvent("/w/js/a.js"))
        handler.on_deleted(FileDeletedEvent("/w/js/a.js"))

        assert changes == [
            (Path("/w/js/a.js"), "created"),
            (Path("/w/js/a.js"), "modified"),
            (Path("/w/js/a.js"), "deleted"),
        ]

    def test_move_reports_both_ends(self, handler: ScriptFileHandler, changes: list):
        """Test a rename invalidates source and destination."""
        handler.on_moved(FileMovedEvent("/w/js/a.js", "/w/js/b.js"))

        assert changes == [(Path("/w/js/a.js"), "deleted"), (Path("/w/js/b.js"), "created")]

    def test_filtered_events(self, handler: ScriptFileHandler, changes: list):
        """Test non-scripts, directories and ignored paths are dropped."""
        handler.on_modified(FileModifiedEvent("/w/qml/Main.qml"))
        handler.on_modified(DirModifiedEvent("/w/js"))
        handler.on_modified(FileModifiedEvent("/w/node_modules/pkg/x.js"))
        handler.on_modified(FileModifiedEvent("/w/app-build-debug/x.js"))

        assert changes == []

    def test_failing_callback_is_contained(self):
        """Test a raising callback does not propagate into the observer."""

        def explode(path: Path, change_type: str) -> None:
            raise RuntimeError("boom")

        handler = ScriptFileHandler(on_change=explode)
        handler.on_modified(FileModifiedEvent("/w/a.js"))


class TestSessionInvalidation:
    """Test cases for watcher-to-cache wiring."""

    def test_change_invalidates_entry(self, workspace: Path):
        """Test a change notification drops the cached script."""
        session = IntellisenseSession(workspace, watch=True)
        path = workspace / "js" / "util.js"
        session.cache.get_functions(path)

        session.watcher.handler.on_modified(FileModifiedEvent(str(path)))

        assert session.cache.get(path) is None
        session.close()

    def test_no_watcher_without_root(self):
        """Test sessions without a workspace root do not watch."""
        session = IntellisenseSession(None, watch=True)

        assert session.watcher is None
        session.close()
