"""
QML Script IntelliSense Symbol Locator.

Cursor-level lookups: qualified names under the cursor, declarations
in script text and usages in markup text.
Requires Python 3.11+.
"""

import re

from resolver.constants import ALIAS_DOT_FUNCTION, ALIAS_DOT_PREFIX, WORD
from resolver.content import position_from_index
from resolver.models import AliasReference, SourcePosition


def extract_alias_prefix(line_prefix: str) -> tuple[str, str] | None:
    """
    Match ``alias.partial`` at the end of the text before the cursor.

    Returns:
        (alias, partial function name) or None
    """
    match = ALIAS_DOT_PREFIX.search(line_prefix)
    if match is None:
        return None
    return match.group(1), match.group(2)


def extract_alias_and_function(line_text: str, character: int) -> tuple[str, str] | None:
    """
    Find the ``alias.function`` token under the cursor.

    The cursor may sit anywhere inside the token or just after it.
    """
    for match in ALIAS_DOT_FUNCTION.finditer(line_text):
        if match.start() <= character <= match.end():
            return match.group(1), match.group(2)
    return None


def get_word_at(line_text: str, character: int) -> tuple[str, int, int] | None:
    """The word containing the cursor as (word, start, end), or None."""
    for match in WORD.finditer(line_text):
        if match.start() <= character <= match.end():
            return match.group(0), match.start(), match.end()
    return None


def _declaration_pattern(function_name: str) -> re.Pattern[str]:
    return re.compile(rf"function\s+{re.escape(function_name)}\s*\(")


def find_function_definition(js_content: str, function_name: str) -> SourcePosition | None:
    """
    Position of the first ``function <name>(`` in script text.

    Unlike the function extractor this is not anchored to column zero.
    """
    match = _declaration_pattern(function_name).search(js_content)
    if match is None:
        return None
    return position_from_index(js_content, match.start())


def is_function_declaration_line(line_text: str, function_name: str) -> bool:
    """Check if a line declares ``function_name``."""
    return _declaration_pattern(function_name).search(line_text) is not None


def find_alias_usages(qml_content: str, alias: str, function_name: str) -> list[AliasReference]:
    """Every ``alias.function`` usage; spans cover the function name only."""
    usage = re.compile(rf"\b{re.escape(alias)}\.{re.escape(function_name)}\b")
    references: list[AliasReference] = []

    for line_index, line in enumerate(qml_content.split("\n")):
        for match in usage.finditer(line):
            references.append(
                AliasReference(
                    line=line_index,
                    start=match.start() + len(alias) + 1,
                    end=match.end(),
                )
            )

    return references
