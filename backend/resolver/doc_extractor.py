"""
QML Script IntelliSense Documentation Extractor.

Reads the ``/** ... */`` block immediately above a declaration.

The scan is a two-state machine walking upward from the declaration:

- NORMAL: skip non-blank lines until a block terminator appears. A blank
  line or the start of the file means there is no documentation.
- IN_DOC_BLOCK: collect lines until the ``/**`` opener (inclusive). A
  plain ``/*`` opener means the block is an ordinary comment. Reaching
  the start of the file keeps whatever was collected.

Requires Python 3.11+.
"""

from enum import Enum

from resolver.constants import (
    DEFAULT_TYPE,
    JSDOC_END,
    JSDOC_PARAM_DESCRIPTION,
    JSDOC_RETURN_TAGS,
    JSDOC_START,
    JSDOC_TYPE,
)
from resolver.models import DocInfo, ParamDoc


class ScanState(str, Enum):
    """Backward scan states."""

    NORMAL = "normal"
    IN_DOC_BLOCK = "in_doc_block"


def find_doc_block(lines: list[str], function_line_index: int) -> list[str] | None:
    """
    Collect the raw documentation block above a declaration.

    Args:
        lines: All lines of the script
        function_line_index: Zero-based index of the declaration line

    Returns:
        Block lines in file order, or None when there is no adjacent block
    """
    state = ScanState.NORMAL
    collected: list[str] = []

    for index in range(min(function_line_index, len(lines)) - 1, -1, -1):
        line = lines[index]

        if state is ScanState.NORMAL:
            if not line.strip():
                return None
            if JSDOC_END not in line:
                continue
            state = ScanState.IN_DOC_BLOCK

        collected.append(line)
        if JSDOC_START in line:
            break
        if "/*" in line:
            return None

    if state is ScanState.NORMAL:
        return None

    collected.reverse()
    return collected


def _clean_line(line: str) -> str:
    """Strip comment delimiters and the leading asterisk from a block line."""
    text = line.strip()
    if text.startswith(JSDOC_START):
        text = text[len(JSDOC_START):]
    end = text.find(JSDOC_END)
    if end >= 0:
        text = text[:end]
    text = text.strip()
    if text.startswith("*"):
        text = text[1:]
    return text.strip()


def _split_type(text: str) -> tuple[str, str]:
    """Split an optional leading ``{Type}`` annotation from the rest."""
    match = JSDOC_TYPE.match(text)
    if match is None:
        return DEFAULT_TYPE, text
    return match.group(1).strip() or DEFAULT_TYPE, text[match.end():]


def _parse_param(text: str) -> ParamDoc | None:
    param_type, rest = _split_type(text.strip())
    parts = rest.split(maxsplit=1)
    if not parts:
        return None

    description = ""
    if len(parts) > 1:
        match = JSDOC_PARAM_DESCRIPTION.match(parts[1])
        if match:
            description = match.group(1).strip()

    return ParamDoc(type=param_type, name=parts[0], description=description)


def parse_doc_block(block: list[str]) -> DocInfo:
    """
    Parse description, @param and @returns tags out of a block.

    Only the type of the first @returns/@return tag is kept. Lines after
    a tag that are not tags themselves are ignored.
    """
    result = DocInfo()
    description: list[str] = []
    in_description = True
    seen_return = False

    for raw in block:
        text = _clean_line(raw)
        if not text.startswith("@"):
            if in_description and text:
                description.append(text)
            continue

        in_description = False
        tag, *remainder = text.split(maxsplit=1)
        rest = remainder[0] if remainder else ""

        if tag == "@param":
            param = _parse_param(rest)
            if param is not None:
                result.param_docs.append(param)
        elif tag in JSDOC_RETURN_TAGS and not seen_return:
            seen_return = True
            result.return_type, _ = _split_type(rest.strip())

    result.documentation = " ".join(description).strip()
    return result


def extract_jsdoc(lines: list[str], function_line_index: int) -> DocInfo:
    """
    Extract documentation for the declaration at ``function_line_index``.

    Always returns a DocInfo; missing or detached blocks give the defaults.
    """
    block = find_doc_block(lines, function_line_index)
    if block is None:
        return DocInfo()
    return parse_doc_block(block)
