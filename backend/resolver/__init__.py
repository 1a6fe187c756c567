"""
QML Script IntelliSense Resolver Package.

Cross-file symbol resolution between QML markup and the JavaScript
modules it imports. Pure functions over text snapshots.
Requires Python 3.11+.
"""

from resolver.models import (
    AliasReference,
    DocInfo,
    FunctionInfo,
    Import,
    ImportInsertionPoint,
    JsFileMatch,
    ParamDoc,
    SourcePosition,
)
from resolver.alias_resolver import (
    find_import_for_alias,
    find_import_for_script,
    find_js_file_for_alias,
    is_alias_imported,
)
from resolver.auto_import import (
    build_import_statement,
    find_matching_js_files,
    generate_alias_from_filename,
    match_script_files,
    should_suggest_import,
)
from resolver.content import position_from_index, safe_read_file
from resolver.doc_extractor import extract_jsdoc
from resolver.function_extractor import find_function, parse_javascript_functions
from resolver.import_extractor import find_javascript_imports
from resolver.insertion import get_js_import_insertion_point
from resolver.paths import relative_import_path, resolve_script_path
from resolver.type_mapper import map_type

__all__ = [
    # Data classes
    "AliasReference",
    "DocInfo",
    "FunctionInfo",
    "Import",
    "ImportInsertionPoint",
    "JsFileMatch",
    "ParamDoc",
    "SourcePosition",
    # Extraction
    "find_javascript_imports",
    "extract_jsdoc",
    "parse_javascript_functions",
    "find_function",
    # Resolution
    "find_import_for_alias",
    "find_import_for_script",
    "find_js_file_for_alias",
    "is_alias_imported",
    "resolve_script_path",
    "relative_import_path",
    # Auto-import
    "build_import_statement",
    "find_matching_js_files",
    "generate_alias_from_filename",
    "match_script_files",
    "should_suggest_import",
    "get_js_import_insertion_point",
    # Helpers
    "map_type",
    "position_from_index",
    "safe_read_file",
]
