"""
QML Script IntelliSense Data Models.

Value types produced by the resolver. Every instance is computed fresh
from a text snapshot and never mutated after it is returned.
Requires Python 3.11+.
"""

from dataclasses import dataclass, field
from typing import Any

from resolver.constants import DEFAULT_TYPE


@dataclass(slots=True, frozen=True)
class Import:
    """A script import declared in markup: import "<file>" as <alias>."""

    file: str
    alias: str

    @property
    def statement(self) -> str:
        """Render the import declaration."""
        return f'import "{self.file}" as {self.alias}'

    @property
    def as_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"file": self.file, "alias": self.alias}


@dataclass(slots=True, frozen=True)
class ParamDoc:
    """A documented parameter from an @param tag."""

    type: str = DEFAULT_TYPE
    name: str = ""
    description: str = ""

    @property
    def as_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"type": self.type, "name": self.name, "description": self.description}


@dataclass(slots=True)
class DocInfo:
    """Documentation extracted from the block above a declaration."""

    documentation: str = ""
    return_type: str = DEFAULT_TYPE
    param_docs: list[ParamDoc] = field(default_factory=list)


@dataclass(slots=True)
class FunctionInfo:
    """
    A top-level function declaration in a script file.

    ``params`` come from the signature and ``param_docs`` from the
    documentation block. The two are never reconciled.
    """

    name: str
    params: list[str] = field(default_factory=list)
    param_docs: list[ParamDoc] = field(default_factory=list)
    return_type: str = DEFAULT_TYPE
    documentation: str = ""
    line: int = 0  # Zero-based line of the declaration

    @property
    def signature(self) -> str:
        """Raw parameter list as written in the declaration."""
        return ", ".join(self.params)

    @property
    def as_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "params": list(self.params),
            "param_docs": [p.as_dict for p in self.param_docs],
            "return_type": self.return_type,
            "documentation": self.documentation,
            "line": self.line,
        }


@dataclass(slots=True, frozen=True)
class JsFileMatch:
    """A script file proposed for auto-import."""

    path: str
    alias: str
    relative_path: str

    @property
    def as_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"path": self.path, "alias": self.alias, "relative_path": self.relative_path}


@dataclass(slots=True, frozen=True)
class ImportInsertionPoint:
    """Where and how to splice a new script import into markup."""

    line: int
    needs_blank_line: bool = False
    needs_trailing_blank_line: bool = False

    @property
    def as_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "line": self.line,
            "needs_blank_line": self.needs_blank_line,
            "needs_trailing_blank_line": self.needs_trailing_blank_line,
        }


@dataclass(slots=True, frozen=True)
class SourcePosition:
    """Zero-based line/character position."""

    line: int
    character: int


@dataclass(slots=True, frozen=True)
class AliasReference:
    """A qualified ``alias.function`` usage; the span covers the function name."""

    line: int
    start: int
    end: int
