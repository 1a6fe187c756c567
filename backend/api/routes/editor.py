"""
QML Script IntelliSense Editor API Routes.

Completion, hover, definition, references and code actions for a
document snapshot sent by the editor.
Requires Python 3.11+.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.dependencies import require_session
from providers import (
    TextDocument,
    provide_code_actions,
    provide_completion_items,
    provide_definition,
    provide_hover,
    provide_references,
)
from providers.models import CodeAction, CompletionItem, Hover, Location, Position
from utils.logger import get_logger
from workspace.session import IntellisenseSession

router = APIRouter()
logger = get_logger("api.editor")


class DocumentPositionRequest(BaseModel):
    """A document snapshot plus a cursor position."""

    path: str = Field(..., min_length=1, description="Absolute path of the document")
    text: str = Field(default="", description="Full document text")
    language_id: str = Field(default="", description="Editor language id")
    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0)

    @property
    def document(self) -> TextDocument:
        return TextDocument(path=self.path, text=self.text, language_id=self.language_id)

    @property
    def position(self) -> Position:
        return Position(line=self.line, character=self.character)


class CompletionResponse(BaseModel):
    """Response model for completion."""

    items: list[CompletionItem]
    total: int


class HoverResponse(BaseModel):
    """Response model for hover."""

    hover: Hover | None = None


class DefinitionResponse(BaseModel):
    """Response model for go-to-definition."""

    location: Location | None = None


class ReferencesResponse(BaseModel):
    """Response model for find-references."""

    locations: list[Location] | None = None
    total: int = 0


class CodeActionsResponse(BaseModel):
    """Response model for code actions."""

    actions: list[CodeAction]


@router.post("/complete", response_model=CompletionResponse)
async def complete(
    request: DocumentPositionRequest,
    session: IntellisenseSession = Depends(require_session),
) -> CompletionResponse:
    """Completion items at the cursor."""
    items = await provide_completion_items(session, request.document, request.position)
    logger.debug("completion_served", path=request.path, items=len(items))
    return CompletionResponse(items=items, total=len(items))


@router.post("/hover", response_model=HoverResponse)
async def hover(
    request: DocumentPositionRequest,
    session: IntellisenseSession = Depends(require_session),
) -> HoverResponse:
    """Hover information for ``Alias.function`` under the cursor."""
    return HoverResponse(hover=provide_hover(request.document, request.position))


@router.post("/definition", response_model=DefinitionResponse)
async def definition(
    request: DocumentPositionRequest,
    session: IntellisenseSession = Depends(require_session),
) -> DefinitionResponse:
    """Declaration of ``Alias.function`` under the cursor."""
    return DefinitionResponse(location=provide_definition(request.document, request.position))


@router.post("/references", response_model=ReferencesResponse)
async def references(
    request: DocumentPositionRequest,
    session: IntellisenseSession = Depends(require_session),
) -> ReferencesResponse:
    """Usages in markup of the script function declared under the cursor."""
    locations = await provide_references(session, request.document, request.position)
    return ReferencesResponse(locations=locations, total=len(locations or []))


@router.post("/code-actions", response_model=CodeActionsResponse)
async def code_actions(
    request: DocumentPositionRequest,
    session: IntellisenseSession = Depends(require_session),
) -> CodeActionsResponse:
    """Auto-import quick fixes for the word under the cursor."""
    actions = await provide_code_actions(session, request.document, request.position)
    return CodeActionsResponse(actions=actions)
