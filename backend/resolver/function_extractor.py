"""
QML Script IntelliSense Function Extractor.

Line scanner for top-level ``function name(params)`` declarations.
Requires Python 3.11+.
"""

from resolver.constants import FUNCTION_DECLARATION
from resolver.doc_extractor import extract_jsdoc
from resolver.models import FunctionInfo


def split_params(raw_params: str) -> list[str]:
    """Split a raw parameter list on commas, dropping empty entries."""
    return [p.strip() for p in raw_params.split(",") if p.strip()]


def parse_javascript_functions(js_content: str) -> list[FunctionInfo]:
    """
    Extract top-level function declarations with their documentation.

    Only declarations that start at column zero are matched; indented
    and nested functions are skipped. Output follows declaration order
    and same-named functions are all kept.
    """
    functions: list[FunctionInfo] = []
    lines = js_content.split("\n")

    for index, line in enumerate(lines):
        match = FUNCTION_DECLARATION.match(line)
        if match is None:
            continue

        doc = extract_jsdoc(lines, index)
        functions.append(
            FunctionInfo(
                name=match.group(1),
                params=split_params(match.group(2)),
                param_docs=doc.param_docs,
                return_type=doc.return_type,
                documentation=doc.documentation,
                line=index,
            )
        )

    return functions


def find_function(functions: list[FunctionInfo], name: str) -> FunctionInfo | None:
    """First function with the given name, or None."""
    return next((f for f in functions if f.name == name), None)
