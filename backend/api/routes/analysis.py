"""
QML Script IntelliSense Analysis API Routes.

Direct access to the resolver for a text snapshot.
Requires Python 3.11+.
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.dependencies import require_session
from resolver.alias_resolver import find_js_file_for_alias
from resolver.function_extractor import parse_javascript_functions
from resolver.import_extractor import find_javascript_imports
from resolver.insertion import get_js_import_insertion_point
from workspace.session import IntellisenseSession

router = APIRouter()


class TextRequest(BaseModel):
    """Source text, optionally with the path it was read from."""

    text: str = Field(default="", description="Full source text")
    path: str | None = Field(default=None, description="Absolute path of the document")


class AliasRequest(BaseModel):
    """A markup snapshot and an alias to resolve."""

    text: str = Field(default="")
    path: str = Field(..., min_length=1)
    alias: str = Field(..., min_length=1)


@router.post("/imports")
async def analyze_imports(request: TextRequest) -> dict[str, Any]:
    """Script imports declared in markup text, in document order."""
    imports = find_javascript_imports(request.text)
    return {
        "imports": [imp.as_dict for imp in imports],
        "total": len(imports),
    }


@router.post("/functions")
async def analyze_functions(request: TextRequest) -> dict[str, Any]:
    """Top-level functions and their documentation in script text."""
    functions = parse_javascript_functions(request.text)
    return {
        "functions": [func.as_dict for func in functions],
        "total": len(functions),
    }


@router.post("/insertion-point")
async def analyze_insertion_point(request: TextRequest) -> dict[str, Any]:
    """Where a new script import would be inserted."""
    return get_js_import_insertion_point(request.text).as_dict


@router.post("/resolve-alias")
async def resolve_alias(
    request: AliasRequest,
    session: IntellisenseSession = Depends(require_session),
) -> dict[str, Any]:
    """Script file bound to an alias, with its functions when readable."""
    js_file_path = find_js_file_for_alias(request.text, request.path, request.alias)
    functions = session.cache.get_functions(js_file_path) if js_file_path else None
    return {
        "alias": request.alias,
        "path": js_file_path,
        "functions": [func.as_dict for func in functions] if functions is not None else None,
    }
