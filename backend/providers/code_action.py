"""
QML Script IntelliSense Auto-Import Code Actions.

Requires Python 3.11+.
"""

import os

from resolver.alias_resolver import is_alias_imported
from resolver.auto_import import build_import_statement, find_matching_js_files
from resolver.insertion import get_js_import_insertion_point
from resolver.symbol_locator import get_word_at
from providers.document import TextDocument
from providers.models import CodeAction, Position, Range, WorkspaceTextEdit
from workspace.session import IntellisenseSession


async def provide_code_actions(
    session: IntellisenseSession, document: TextDocument, position: Position
) -> list[CodeAction]:
    """
    Import quick fixes for a capitalized word used as ``Word.something``.

    One action per matching script; the first one is preferred.
    """
    line_text = document.line_at(position.line)
    word_at = get_word_at(line_text, position.character)
    if word_at is None:
        return []

    word, _, end = word_at
    if not word[:1].isupper() or is_alias_imported(document.text, word):
        return []

    if line_text[end : end + 1] != ".":
        return []

    matches = await find_matching_js_files(
        word,
        document.path,
        session.finder,
        exclude=session.exclude_patterns,
        max_results=session.settings.workspace.max_script_files,
        qml_content=document.text,
    )

    point = get_js_import_insertion_point(document.text)
    return [
        CodeAction(
            title=f"Import '{match.alias}' from {os.path.basename(match.relative_path)}",
            is_preferred=index == 0,
            edits=[
                WorkspaceTextEdit(
                    path=document.path,
                    range=Range.empty(point.line),
                    new_text=build_import_statement(match, point),
                )
            ],
        )
        for index, match in enumerate(matches)
    ]
