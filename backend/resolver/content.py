"""
QML Script IntelliSense Content Reader.

Fault-tolerant file access: absence and IO errors both yield None.
Requires Python 3.11+.
"""

from pathlib import Path

from resolver.models import SourcePosition
from utils.logger import get_logger

logger = get_logger("resolver.content")


def safe_read_file(file_path: str | Path) -> str | None:
    """
    Read a text file, returning None if it is missing or unreadable.

    Args:
        file_path: Path to read

    Returns:
        File content, or None when the feature should be skipped
    """
    path = Path(file_path)
    if not path.is_file():
        return None

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("failed_to_read_file", path=str(path), error=str(e))
        return None


def position_from_index(content: str, index: int) -> SourcePosition:
    """Zero-based line and character of a string offset."""
    before = content[:index]
    line = before.count("\n")
    return SourcePosition(line=line, character=len(before) - (before.rfind("\n") + 1))
