"""
QML Script IntelliSense Path Resolver.

Relative module references to absolute paths and back.
Requires Python 3.11+.
"""

import os
from pathlib import PurePosixPath


def resolve_script_path(document_path: str, import_path: str) -> str:
    """
    Resolve an import path against the directory of the importing document.

    Symlinks are not followed; ``..`` segments are collapsed lexically.
    """
    document_dir = os.path.dirname(os.path.abspath(document_path))
    return os.path.normpath(os.path.join(document_dir, import_path))


def relative_import_path(document_path: str, target_path: str) -> str:
    """Path of ``target_path`` as written in an import from ``document_path``."""
    document_dir = os.path.dirname(os.path.abspath(document_path))
    relative = os.path.relpath(os.path.abspath(target_path), document_dir)
    relative = PurePosixPath(*relative.split(os.sep)).as_posix()
    return relative if relative.startswith(".") else f"./{relative}"


def same_path(first: str, second: str) -> bool:
    """Compare two paths after normalization."""
    return os.path.normcase(os.path.abspath(first)) == os.path.normcase(
        os.path.abspath(second)
    )
