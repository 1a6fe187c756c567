"""
QML Script IntelliSense Document Snapshot.

The editor supplies the text and path of the document being edited;
providers only ever read this snapshot.
Requires Python 3.11+.
"""

from dataclasses import dataclass, field

from resolver.constants import LANGUAGE_JAVASCRIPT, LANGUAGE_QML, SCRIPT_EXTENSION


@dataclass(slots=True, frozen=True)
class TextDocument:
    """Immutable snapshot of an open document."""

    path: str
    text: str
    language_id: str = ""
    _lines: list[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_lines", self.text.split("\n"))

    @property
    def lines(self) -> list[str]:
        return self._lines

    def line_at(self, line: int) -> str:
        """Text of a line without its newline; empty past the end."""
        if 0 <= line < len(self._lines):
            return self._lines[line].rstrip("\r")
        return ""

    @property
    def is_script(self) -> bool:
        return self.language_id == LANGUAGE_JAVASCRIPT or self.path.endswith(SCRIPT_EXTENSION)

    @property
    def is_markup(self) -> bool:
        return self.language_id == LANGUAGE_QML or not self.is_script
