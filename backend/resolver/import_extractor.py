"""
QML Script IntelliSense Import Extractor.

Finds script imports and ordinary imports in markup source.
Requires Python 3.11+.
"""

from resolver.constants import QML_IMPORT, QML_JS_IMPORT
from resolver.models import Import


def find_javascript_imports(qml_content: str) -> list[Import]:
    """
    Find every ``import "<file>.js" as <Alias>`` in document order.

    Duplicates are preserved. Text that does not match is skipped.
    """
    return [
        Import(file=match.group(1), alias=match.group(2))
        for match in QML_JS_IMPORT.finditer(qml_content)
    ]


def is_script_import_line(line: str) -> bool:
    """Check if a line contains a script import."""
    return QML_JS_IMPORT.search(line) is not None


def is_ordinary_import_line(line: str) -> bool:
    """Check if a line is a module or directory import (not a script import)."""
    return QML_IMPORT.match(line) is not None


def get_last_qml_import_line(qml_content: str) -> int:
    """Zero-based index of the last ordinary import line, or -1."""
    last_import_line = -1
    for index, line in enumerate(qml_content.split("\n")):
        if is_ordinary_import_line(line):
            last_import_line = index
    return last_import_line


def get_last_js_import_line(qml_content: str) -> int:
    """Zero-based index of the last script import line, or -1."""
    last_import_line = -1
    for index, line in enumerate(qml_content.split("\n")):
        if is_script_import_line(line):
            last_import_line = index
    return last_import_line
