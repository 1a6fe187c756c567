"""
QML Script IntelliSense Provider Models.

Editor-facing results: positions, ranges, edits, completion items,
hovers and code actions.
Requires Python 3.11+.
"""

from enum import Enum

from pydantic import BaseModel, Field


class CompletionItemKind(str, Enum):
    """Kinds of completion items."""

    METHOD = "method"
    MODULE = "module"


class InsertTextFormat(str, Enum):
    """How insert text is interpreted by the editor."""

    PLAIN_TEXT = "plain_text"
    SNIPPET = "snippet"


class Position(BaseModel):
    """Zero-based position in a document."""

    line: int = Field(ge=0)
    character: int = Field(ge=0)


class Range(BaseModel):
    """Half-open range between two positions."""

    start: Position
    end: Position

    @classmethod
    def empty(cls, line: int, character: int = 0) -> "Range":
        """Zero-length range, used for insertions."""
        position = Position(line=line, character=character)
        return cls(start=position, end=position)


class Location(BaseModel):
    """A range inside a file."""

    path: str
    range: Range


class TextEdit(BaseModel):
    """Replace ``range`` with ``new_text``."""

    range: Range
    new_text: str


class WorkspaceTextEdit(TextEdit):
    """A text edit targeting a specific file."""

    path: str


class CompletionItemLabel(BaseModel):
    """Label with secondary details shown beside it."""

    label: str
    description: str | None = None
    detail: str | None = None


class CompletionItem(BaseModel):
    """A completion proposal."""

    label: CompletionItemLabel
    kind: CompletionItemKind
    detail: str | None = None
    documentation: str | None = None  # Markdown
    insert_text: str | None = None
    insert_text_format: InsertTextFormat = InsertTextFormat.PLAIN_TEXT
    sort_text: str | None = None
    preselect: bool = False
    additional_text_edits: list[TextEdit] = Field(default_factory=list)


class Hover(BaseModel):
    """Markdown hover contents."""

    contents: str
    range: Range | None = None


class CodeAction(BaseModel):
    """A quick fix that applies workspace edits."""

    title: str
    kind: str = "quickfix"
    is_preferred: bool = False
    edits: list[WorkspaceTextEdit] = Field(default_factory=list)
