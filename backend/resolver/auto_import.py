"""
QML Script IntelliSense Auto-Import Matcher.

Suggests script files for a capitalized identifier that is not yet
imported.
Requires Python 3.11+.
"""

import os
import re
from typing import Protocol, Sequence

from resolver.alias_resolver import is_alias_imported
from resolver.constants import (
    ALIAS_SUFFIX,
    DEFAULT_EXCLUDE_PATTERNS,
    MAX_JS_FILES_TO_SEARCH,
    SCRIPT_EXTENSION,
    SCRIPT_GLOB,
)
from resolver.models import ImportInsertionPoint, JsFileMatch
from resolver.paths import relative_import_path

_SEPARATORS = re.compile(r"[-_]")


class FileFinder(Protocol):
    """Workspace file enumeration."""

    async def find_files(
        self,
        include: str,
        exclude: Sequence[str] | None = None,
        max_results: int | None = None,
    ) -> list[str]:
        ...


def generate_alias_from_filename(filename: str) -> str:
    """
    Suggest an alias for a script file name.

    ``account-helper.js`` becomes ``AccountHelperJS``. Only the first
    character of each segment is changed.
    """
    base_name = filename[: -len(SCRIPT_EXTENSION)] if filename.endswith(SCRIPT_EXTENSION) else filename
    parts = _SEPARATORS.split(base_name)
    return "".join(part[:1].upper() + part[1:] for part in parts) + ALIAS_SUFFIX


def should_suggest_import(word: str, qml_content: str, min_length: int = 2) -> bool:
    """Check if a typed word should trigger auto-import suggestions."""
    if len(word) < min_length or not word[:1].isupper():
        return False
    return not is_alias_imported(qml_content, word)


def match_script_files(
    partial_identifier: str,
    document_path: str,
    script_paths: Sequence[str],
    qml_content: str = "",
) -> list[JsFileMatch]:
    """
    Keep the scripts whose suggested alias starts with the identifier.

    Comparison ignores case. Input order is kept. Scripts whose alias is
    already imported by ``qml_content`` are left out.
    """
    prefix = partial_identifier.lower()
    matches: list[JsFileMatch] = []

    for script_path in script_paths:
        alias = generate_alias_from_filename(os.path.basename(script_path))
        if alias.lower().startswith(prefix) and not is_alias_imported(qml_content, alias):
            matches.append(
                JsFileMatch(
                    path=script_path,
                    alias=alias,
                    relative_path=relative_import_path(document_path, script_path),
                )
            )

    return matches


async def find_matching_js_files(
    partial_identifier: str,
    document_path: str,
    finder: FileFinder,
    exclude: Sequence[str] = DEFAULT_EXCLUDE_PATTERNS,
    max_results: int = MAX_JS_FILES_TO_SEARCH,
    qml_content: str = "",
) -> list[JsFileMatch]:
    """Enumerate workspace scripts and match them against the identifier."""
    script_paths = await finder.find_files(SCRIPT_GLOB, exclude, max_results)
    return match_script_files(partial_identifier, document_path, script_paths, qml_content)


def build_import_statement(match: JsFileMatch, point: ImportInsertionPoint) -> str:
    """Text to insert at the start of ``point.line``."""
    statement = "\n" if point.needs_blank_line else ""
    statement += f'import "{match.relative_path}" as {match.alias}\n'
    if point.needs_trailing_blank_line:
        statement += "\n"
    return statement
