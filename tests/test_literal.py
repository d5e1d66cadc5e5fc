"""Tests for the brace-object and literal reader."""

import pytest

from texttab.core.errors import LiteralSyntaxError
from texttab.literal import LiteralTokenizer, TokenType, read_literal, read_map, word_value


class TestTokenizer:
    """Test token stream shapes."""

    def test_brace_object_tokens(self):
        """Test braces, words and strings are told apart."""
        tokens = LiteralTokenizer('{a "b"}').tokenize()
        assert [t.type for t in tokens] == [
            TokenType.LBRACE,
            TokenType.WORD,
            TokenType.STRING,
            TokenType.RBRACE,
            TokenType.EOF,
        ]

    def test_commas_are_whitespace(self):
        """Test commas separate nothing more than spaces do."""
        tokens = LiteralTokenizer("a, b,,c").tokenize()
        assert [t.value for t in tokens if t.type == TokenType.WORD] == ["a", "b", "c"]

    def test_string_escapes(self):
        """Test backslash escapes inside strings."""
        tokens = LiteralTokenizer(r'"a\"b\\c"').tokenize()
        assert tokens[0].value == 'a"b\\c'

    def test_unterminated_string(self):
        """Test an open string is an error."""
        with pytest.raises(LiteralSyntaxError):
            LiteralTokenizer('"abc').tokenize()


class TestWordValue:
    """Test bare word conversion."""

    @pytest.mark.parametrize("word,expected", [
        ("10", 10),
        ("-2", -2),
        ("1.5", 1.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("10px", "10px"),
        ("red", "red"),
    ])
    def test_word_value(self, word, expected):
        """Test numbers become int/float and everything else stays text."""
        value = word_value(word)
        assert value == expected
        assert type(value) is type(expected)


class TestReadMap:
    """Test brace object reading."""

    def test_string_value(self):
        """Test the basic quoted form."""
        assert read_map('{x "xyz"}') == {"x": "xyz"}

    def test_mixed_values(self):
        """Test strings, numbers and bare words together."""
        assert read_map('{color "red", width 10, align left}') == {
            "color": "red",
            "width": 10,
            "align": "left",
        }

    def test_keyword_keys(self):
        """Test :key reads the same as key."""
        assert read_map('{:text-align "left"}') == {"text-align": "left"}

    def test_quoted_keys(self):
        """Test string keys."""
        assert read_map('{"background-color" "#eee"}') == {"background-color": "#eee"}

    def test_empty(self):
        """Test an empty object."""
        assert read_map("{}") == {}

    def test_keeps_declaration_order(self):
        """Test keys come back in source order."""
        assert list(read_map("{b 1 a 2 c 3}")) == ["b", "a", "c"]

    @pytest.mark.parametrize("text", [
        "{a}",
        '{a "1"',
        '{a "1}',
        "{a {b 1}}",
        "{a 1 a 2}",
        "x {a 1}",
        "{a 1} x",
        "(a 1)",
        "",
    ])
    def test_malformed(self, text):
        """Test malformed payloads raise LiteralSyntaxError."""
        with pytest.raises(LiteralSyntaxError):
            read_map(text)

    def test_none_payload(self):
        """Test a missing payload raises LiteralSyntaxError."""
        with pytest.raises(LiteralSyntaxError):
            read_map(None)

    def test_error_details(self):
        """Test the error carries the text and position."""
        with pytest.raises(LiteralSyntaxError) as exc_info:
            read_map("{a}")
        assert exc_info.value.text == "{a}"
        assert exc_info.value.pos == 2
        assert "expected a value" in exc_info.value.message


class TestReadLiteral:
    """Test single literal reading."""

    def test_string(self):
        assert read_literal('"left"') == "left"

    def test_number(self):
        assert read_literal("10") == 10

    def test_word(self):
        assert read_literal("bold") == "bold"

    @pytest.mark.parametrize("text", ["", "a b", "{a 1}", '"open'])
    def test_not_a_single_literal(self, text):
        """Test anything but one scalar raises."""
        with pytest.raises(LiteralSyntaxError):
            read_literal(text)
