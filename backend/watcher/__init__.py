"""
QML Script IntelliSense File Watcher Package.

File system monitoring for cache invalidation.
Requires Python 3.11+.
"""

from watcher.file_watcher import FileWatcher, ScriptFileHandler

__all__ = ["FileWatcher", "ScriptFileHandler"]
