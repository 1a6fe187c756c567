"""
QML Script IntelliSense Reference Provider.

From a function declaration in a script, finds ``Alias.function``
usages in every markup file that imports the script.
Requires Python 3.11+.
"""

from resolver.alias_resolver import find_import_for_script
from resolver.constants import MARKUP_GLOB
from resolver.content import safe_read_file
from resolver.symbol_locator import find_alias_usages, get_word_at, is_function_declaration_line
from providers.document import TextDocument
from providers.models import Location, Position, Range
from utils.logger import get_logger
from workspace.session import IntellisenseSession

logger = get_logger("providers.references")


def find_references_in_markup(
    qml_path: str, qml_content: str, script_path: str, function_name: str
) -> list[Location]:
    """Usages of ``function_name`` through the import of ``script_path``."""
    relevant_import = find_import_for_script(qml_content, qml_path, script_path)
    if relevant_import is None:
        return []

    return [
        Location(
            path=qml_path,
            range=Range(
                start=Position(line=ref.line, character=ref.start),
                end=Position(line=ref.line, character=ref.end),
            ),
        )
        for ref in find_alias_usages(qml_content, relevant_import.alias, function_name)
    ]


async def provide_references(
    session: IntellisenseSession, document: TextDocument, position: Position
) -> list[Location] | None:
    """
    References to the function declared under the cursor.

    Returns:
        Locations in markup files, or None when the cursor is not on a
        function declaration in a script document
    """
    if not document.is_script:
        return None

    line_text = document.line_at(position.line)
    word = get_word_at(line_text, position.character)
    if word is None:
        return None

    function_name = word[0]
    if not is_function_declaration_line(line_text, function_name):
        return None

    qml_files = await session.finder.find_files(
        MARKUP_GLOB,
        session.exclude_patterns,
        session.settings.workspace.max_markup_files,
    )

    locations: list[Location] = []
    for qml_path in qml_files:
        try:
            qml_content = safe_read_file(qml_path)
            if qml_content is None:
                continue
            locations.extend(
                find_references_in_markup(qml_path, qml_content, document.path, function_name)
            )
        except Exception as e:
            # One unreadable document must not abort the search
            logger.error("reference_search_failed", path=qml_path, error=str(e))

    logger.debug(
        "references_found",
        function=function_name,
        searched=len(qml_files),
        count=len(locations),
    )
    return locations
