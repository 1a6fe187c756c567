"""
QML Script IntelliSense Hover Provider.

Requires Python 3.11+.
"""

from resolver.alias_resolver import find_js_file_for_alias
from resolver.content import safe_read_file
from resolver.function_extractor import find_function, parse_javascript_functions
from resolver.models import FunctionInfo
from resolver.symbol_locator import extract_alias_and_function
from providers.document import TextDocument
from providers.models import Hover, Position


def create_function_hover_markdown(func: FunctionInfo, alias: str) -> str:
    """Markdown describing a function for hover display."""
    markdown = f"**{alias}.{func.name}**({func.signature}): {func.return_type}\n\n"

    if func.documentation:
        markdown += func.documentation + "\n\n"

    if func.param_docs:
        markdown += "**Parameters:**\n"
        for param in func.param_docs:
            markdown += f"- `{param.name}` ({param.type}): {param.description}\n"

    return markdown


def provide_hover(document: TextDocument, position: Position) -> Hover | None:
    """Hover for the ``alias.function`` under the cursor, if it resolves."""
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

    func = find_function(parse_javascript_functions(js_content), function_name)
    if func is None:
        return None

    return Hover(contents=create_function_hover_markdown(func, alias))
