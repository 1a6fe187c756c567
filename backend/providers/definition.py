"""
QML Script IntelliSense Definition Provider.

Requires Python 3.11+.
"""

from resolver.alias_resolver import find_js_file_for_alias
from resolver.content import safe_read_file
from resolver.symbol_locator import extract_alias_and_function, find_function_definition
from providers.document import TextDocument
from providers.models import Location, Position, Range


def provide_definition(document: TextDocument, position: Position) -> Location | None:
    """
    Location of the function behind ``alias.function`` under the cursor.

    The script is read fresh on each request so the reported position
    matches the file on disk.
    """
    extracted = extract_alias_and_function(document.line_at(position.line), position.character)
    if extracted is None:
        return None

    alias, function_name = extracted
    js_file_path = find_js_file_for_alias(document.text, document.path, alias)
    if js_file_path is None:
        return None

    js_content = safe_read_file(js_file_path)
    if js_content is None:
        return None

    target = find_function_definition(js_content, function_name)
    if target is None:
        return None

    return Location(path=js_file_path, range=Range.empty(target.line, target.character))
