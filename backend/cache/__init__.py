"""
QML Script IntelliSense Cache Package.

Session-owned cache of parsed script files.
Requires Python 3.11+.
"""

from cache.function_cache import CacheEntry, FunctionCache, cache_key

__all__ = ["CacheEntry", "FunctionCache", "cache_key"]
