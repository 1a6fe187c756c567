"""
QML Script IntelliSense Import-Insertion Planner.

Script imports go after ordinary imports, separated by one blank line,
without doubling blank lines that are already there.
Requires Python 3.11+.
"""

from resolver.import_extractor import get_last_js_import_line, get_last_qml_import_line
from resolver.models import ImportInsertionPoint


def _is_blank(lines: list[str], index: int) -> bool:
    return index < len(lines) and lines[index].strip() == ""


def _is_separator_line(lines: list[str], index: int) -> bool:
    # The empty string after a final newline is not a line of its own
    return index < len(lines) - 1 and lines[index].strip() == ""


def get_js_import_insertion_point(qml_content: str) -> ImportInsertionPoint:
    """
    Compute where a new script import should be inserted.

    Args:
        qml_content: Full markup text

    Returns:
        Zero-based line to insert at, and which blank lines to add
    """
    lines = qml_content.split("\n")
    last_js_import = get_last_js_import_line(qml_content)
    last_qml_import = get_last_qml_import_line(qml_content)

    if last_js_import >= 0:
        insert_line = last_js_import + 1
        return ImportInsertionPoint(
            line=insert_line,
            needs_blank_line=False,
            needs_trailing_blank_line=not _is_blank(lines, insert_line),
        )

    if last_qml_import >= 0:
        has_blank_line = _is_separator_line(lines, last_qml_import + 1)
        return ImportInsertionPoint(
            line=last_qml_import + (2 if has_blank_line else 1),
            needs_blank_line=not has_blank_line,
            needs_trailing_blank_line=True,
        )

    # No imports at all
    return ImportInsertionPoint(
        line=0,
        needs_blank_line=False,
        needs_trailing_blank_line=bool(lines[0].strip()),
    )


def apply_insertion(qml_content: str, point: ImportInsertionPoint, statement: str) -> str:
    """Splice ``statement`` into the text at the start of ``point.line``."""
    lines = qml_content.split("\n")
    if point.line >= len(lines):
        prefix = qml_content if qml_content.endswith("\n") or not qml_content else qml_content + "\n"
        return prefix + statement
    offset = sum(len(line) + 1 for line in lines[: point.line])
    return qml_content[:offset] + statement + qml_content[offset:]
