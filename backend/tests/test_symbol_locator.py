"""
Tests for Symbol Locator.

Requires Python 3.11+.
"""

from resolver.models import AliasReference, SourcePosition
from resolver.symbol_locator import (
    extract_alias_and_function,
    extract_alias_prefix,
    find_alias_usages,
    find_function_definition,
    get_word_at,
    is_function_declaration_line,
)


class TestCursorLookups:
    """Test cases for cursor-based extraction."""

    def test_alias_prefix(self):
        """Test ``Alias.`` and ``Alias.par`` before the cursor."""
        assert extract_alias_prefix("    text: UtilJS.") == ("UtilJS", "")
        assert extract_alias_prefix("    text: UtilJS.cla") == ("UtilJS", "cla")
        assert extract_alias_prefix("    text: UtilJS") is None
        assert extract_alias_prefix("UtilJS.clamp(") is None

    def test_alias_and_function_under_cursor(self):
        """Test the qualified token containing the cursor is chosen."""
        line = "x: A.one() + B.two()"

        assert extract_alias_and_function(line, 3) == ("A", "one")
        assert extract_alias_and_function(line, 8) == ("A", "one")
        assert extract_alias_and_function(line, 15) == ("B", "two")
        assert extract_alias_and_function(line, 11) is None

    def test_word_at(self):
        """Test the word containing the cursor."""
        assert get_word_at("foo UtilJ.x", 6) == ("UtilJ", 4, 9)
        assert get_word_at("foo UtilJ.x", 9) == ("UtilJ", 4, 9)
        assert get_word_at("   ", 1) is None


class TestDeclarations:
    """Test cases for declaration lookup."""

    def test_find_function_definition(self, sample_js_code: str):
        """Test the first declaration position is reported."""
        position = find_function_definition(sample_js_code, "add")
        lines = sample_js_code.split("\n")

        assert lines[position.line].startswith("function add(")
        assert position.character == 0

    def test_indented_definition_found(self, sample_js_code: str):
        """Test definition lookup is not anchored at column zero."""
        position = find_function_definition(sample_js_code, "nested")

        assert position is not None
        assert position.character == 4

    def test_missing_definition(self):
        """Test unknown names give None."""
        assert find_function_definition("function a() {}", "b") is None
        assert find_function_definition("function a() {}", "a.*") is None

    def test_definition_position(self):
        """Test the reported position is zero-based."""
        assert find_function_definition("\n\nfunction go() {}", "go") == SourcePosition(line=2, character=0)

    def test_is_function_declaration_line(self):
        """Test declaration line checks."""
        assert is_function_declaration_line("function clamp(v) {", "clamp")
        assert not is_function_declaration_line("clamp(v)", "clamp")


class TestAliasUsages:
    """Test cases for find_alias_usages."""

    def test_usages_cover_function_name(self, sample_qml_code: str):
        """Test each usage range spans the function name only."""
        refs = find_alias_usages(sample_qml_code, "AccountHelperJS", "add")
        line = sample_qml_code.split("\n")[refs[0].line]

        assert len(refs) == 1
        assert line[refs[0].start:refs[0].end] == "add"

    def test_whole_words_only(self):
        """Test longer names and other aliases are not matched."""
        text = "A.add(1) + A.addAll() + XA.add(2)\nA.add"

        assert find_alias_usages(text, "A", "add") == [
            AliasReference(line=0, start=2, end=5),
            AliasReference(line=1, start=2, end=5),
        ]
