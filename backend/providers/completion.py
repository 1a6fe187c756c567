"""
QML Script IntelliSense Completion Provider.

Two kinds of proposals in markup documents:

- ``Alias.`` lists the functions of the script bound to ``Alias``.
- A capitalized word that is not imported yet lists script files whose
  suggested alias starts with it; accepting one inserts the import.

Requires Python 3.11+.
"""

from resolver.alias_resolver import find_js_file_for_alias
from resolver.auto_import import (
    build_import_statement,
    find_matching_js_files,
    should_suggest_import,
)
from resolver.insertion import get_js_import_insertion_point
from resolver.models import FunctionInfo, JsFileMatch
from resolver.symbol_locator import extract_alias_prefix, get_word_at
from resolver.type_mapper import map_type
from providers.document import TextDocument
from providers.models import (
    CompletionItem,
    CompletionItemKind,
    CompletionItemLabel,
    InsertTextFormat,
    Position,
    Range,
    TextEdit,
)
from utils.logger import get_logger
from workspace.session import IntellisenseSession

logger = get_logger("providers.completion")


def format_function_documentation(func: FunctionInfo) -> str:
    """Markdown body for a function completion item."""
    parts: list[str] = []
    if func.return_type and func.return_type != "any":
        parts.append(f"**→ Returns {func.return_type}**\n")
    if func.documentation:
        parts.append(func.documentation)
    if func.param_docs:
        parts.append("\n\n**Parameters:**")
        for param in func.param_docs:
            parts.append(f"\n- `{param.name}` ({param.type}): {param.description}")
    return "".join(parts)


def create_function_completion_item(func: FunctionInfo, alias: str) -> CompletionItem:
    """Completion item for one function of an imported script."""
    return_type = map_type(func.return_type)
    if func.param_docs:
        signature = ", ".join(f"{p.name}: {map_type(p.type)}" for p in func.param_docs)
    else:
        signature = func.signature

    return CompletionItem(
        label=CompletionItemLabel(
            label=func.name,
            description=f"→ {func.return_type}",
            detail=f" {alias}",
        ),
        kind=CompletionItemKind.METHOD,
        detail=f"({signature}): {return_type}",
        documentation=format_function_documentation(func),
        insert_text=f"{func.name}($0)",
        insert_text_format=InsertTextFormat.SNIPPET,
    )


def create_import_completion_item(match: JsFileMatch, qml_content: str) -> CompletionItem:
    """Completion item that types the alias and adds its import."""
    point = get_js_import_insertion_point(qml_content)
    return CompletionItem(
        label=CompletionItemLabel(label=match.alias),
        kind=CompletionItemKind.MODULE,
        detail=f"Auto-import: {match.relative_path}",
        documentation=(
            f"Import `{match.alias}` from `{match.relative_path}`\n\n"
            "This will add the import statement automatically."
        ),
        insert_text=match.alias,
        sort_text=f"0{match.alias}",
        preselect=True,
        additional_text_edits=[
            TextEdit(range=Range.empty(point.line), new_text=build_import_statement(match, point))
        ],
    )


def complete_functions(
    session: IntellisenseSession, document: TextDocument, alias: str
) -> list[CompletionItem]:
    """Function proposals for ``alias.``; empty when the alias is unknown."""
    js_file_path = find_js_file_for_alias(document.text, document.path, alias)
    if js_file_path is None:
        return []

    functions = session.cache.get_functions(js_file_path)
    if functions is None:
        return []

    return [create_function_completion_item(func, alias) for func in functions]


async def complete_imports(
    session: IntellisenseSession, document: TextDocument, word: str
) -> list[CompletionItem]:
    """Auto-import proposals for a capitalized, unimported word."""
    workspace_settings = session.settings.workspace
    if not should_suggest_import(word, document.text, workspace_settings.min_import_prefix):
        return []

    matches = await find_matching_js_files(
        word,
        document.path,
        session.finder,
        exclude=session.exclude_patterns,
        max_results=workspace_settings.max_script_files,
        qml_content=document.text,
    )
    logger.debug("auto_import_candidates", word=word, matches=len(matches))
    return [create_import_completion_item(match, document.text) for match in matches]


async def provide_completion_items(
    session: IntellisenseSession, document: TextDocument, position: Position
) -> list[CompletionItem]:
    """
    Completion proposals at a position in a markup document.

    Args:
        session: Session owning the cache and file finder
        document: Snapshot of the markup document
        position: Cursor position

    Returns:
        Completion items, empty when nothing applies
    """
    line_prefix = document.line_at(position.line)[: position.character]

    dotted = extract_alias_prefix(line_prefix)
    if dotted is not None:
        alias, _ = dotted
        return complete_functions(session, document, alias)

    word = get_word_at(document.line_at(position.line), position.character)
    if word is None:
        return []
    return await complete_imports(session, document, word[0])
