"""
QML Script IntelliSense Alias Resolver.

Maps aliases used in markup to the script files they import.
Lookups by alias are first-match-wins.
Requires Python 3.11+.
"""

from resolver.import_extractor import find_javascript_imports
from resolver.models import Import
from resolver.paths import resolve_script_path, same_path


def find_import_for_alias(qml_content: str, alias: str) -> Import | None:
    """First import bound to ``alias``, or None."""
    return next(
        (imp for imp in find_javascript_imports(qml_content) if imp.alias == alias),
        None,
    )


def is_alias_imported(qml_content: str, alias: str) -> bool:
    """Check if an alias is already bound by a script import."""
    return find_import_for_alias(qml_content, alias) is not None


def find_js_file_for_alias(qml_content: str, document_path: str, alias: str) -> str | None:
    """
    Resolve an alias to the absolute path of the script it imports.

    Args:
        qml_content: Full markup text
        document_path: Absolute path of the markup document
        alias: Alias to look up

    Returns:
        Absolute script path, or None when the alias is not imported
    """
    js_import = find_import_for_alias(qml_content, alias)
    if js_import is None:
        return None
    return resolve_script_path(document_path, js_import.file)


def find_import_for_script(
    qml_content: str, document_path: str, script_path: str
) -> Import | None:
    """First import in a markup document that resolves to ``script_path``."""
    for imp in find_javascript_imports(qml_content):
        if same_path(resolve_script_path(document_path, imp.file), script_path):
            return imp
    return None
