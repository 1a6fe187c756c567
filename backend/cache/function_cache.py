"""
QML Script IntelliSense Function Cache.

Parsed function records per script file, invalidated by the watcher.
Requires Python 3.11+.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from resolver.content import safe_read_file
from resolver.function_extractor import parse_javascript_functions
from resolver.models import FunctionInfo
from utils.logger import LoggerMixin


def cache_key(file_path: str | Path) -> str:
    """Normalized absolute path used as the cache key."""
    return os.path.normpath(os.path.abspath(file_path))


@dataclass(slots=True)
class CacheEntry:
    """Functions parsed from one script file."""

    functions: list[FunctionInfo] = field(default_factory=list)
    parsed_at: float = 0.0


class FunctionCache(LoggerMixin):
    """
    Maps absolute script paths to their parsed functions.

    Owned by a session. There is at most one entry per path and the
    last write wins; concurrent recomputation only repeats pure work.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self._invalidations = 0

    def get(self, file_path: str | Path) -> list[FunctionInfo] | None:
        """Cached functions for a file, without reading it."""
        entry = self._entries.get(cache_key(file_path))
        return entry.functions if entry is not None else None

    def put(self, file_path: str | Path, functions: list[FunctionInfo]) -> None:
        """Store functions for a file, replacing any previous entry."""
        self._entries[cache_key(file_path)] = CacheEntry(
            functions=functions, parsed_at=time.time()
        )

    def get_functions(self, file_path: str | Path) -> list[FunctionInfo] | None:
        """
        Cached functions, reading and parsing the file on a miss.

        Args:
            file_path: Absolute path of the script

        Returns:
            Parsed functions, or None when the file cannot be read
        """
        key = cache_key(file_path)
        entry = self._entries.get(key)
        if entry is not None:
            self._hits += 1
            return entry.functions

        self._misses += 1
        content = safe_read_file(key)
        if content is None:
            return None

        functions = parse_javascript_functions(content)
        self.put(key, functions)
        self.log.debug("script_parsed", path=key, functions=len(functions))
        return functions

    def invalidate(self, file_path: str | Path) -> bool:
        """
        Drop the entry for a file.

        Returns:
            True if an entry was removed
        """
        removed = self._entries.pop(cache_key(file_path), None) is not None
        if removed:
            self._invalidations += 1
            self.log.debug("cache_invalidated", path=cache_key(file_path))
        return removed

    def clear(self) -> None:
        """Clear all cached data."""
        self._entries.clear()
        self.log.info("cache_cleared")

    def __contains__(self, file_path: object) -> bool:
        if not isinstance(file_path, (str, Path)):
            return False
        return cache_key(file_path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_cache_stats(self) -> dict[str, Any]:
        """Get statistics about the cache."""
        return {
            "cached_files": len(self._entries),
            "cached_functions": sum(len(e.functions) for e in self._entries.values()),
            "hits": self._hits,
            "misses": self._misses,
            "invalidations": self._invalidations,
        }
