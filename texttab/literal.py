"""
Literal reader for style payloads.

Style, reference and option declarations carry a brace object such as
``{color "red", width 10, :text-align left}``. Column-style rows carry
single values (``"left"``, ``10``, ``bold``). This module reads both
without evaluating anything:

- ``"..."`` - double quoted string, backslash escapes ``\\"`` ``\\\\`` ``\\n`` ``\\t``
- bare word - any run of characters other than whitespace, commas, braces
  and quotes; read as an int or float when it looks like a base-10 number
- ``{ key value ... }`` - brace object with scalar values
- commas count as whitespace

Anything else raises LiteralSyntaxError.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from .core.errors import LiteralSyntaxError

Scalar = Union[str, int, float]

INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")

_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "t": "\t", "r": "\r"}


class TokenType(Enum):
    """Literal token types."""

    LBRACE = auto()  # {
    RBRACE = auto()  # }
    STRING = auto()  # "..."
    WORD = auto()  # bare word or number
    EOF = auto()


@dataclass
class Token:
    """
    A single literal token.

    Attributes:
        type: The token type
        value: Decoded value (string contents without quotes for STRING)
        pos: Position in the source string
    """

    type: TokenType
    value: str
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, '{self.value}', pos={self.pos})"


class LiteralTokenizer:
    """Split literal text into tokens."""

    WORD_PATTERN = re.compile(r'[^\s,{}"\[\]()]+')

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the entire input text."""
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch.isspace() or ch == ",":
                self.pos += 1
            elif ch == "{":
                self.tokens.append(Token(TokenType.LBRACE, ch, self.pos))
                self.pos += 1
            elif ch == "}":
                self.tokens.append(Token(TokenType.RBRACE, ch, self.pos))
                self.pos += 1
            elif ch == '"':
                self._scan_string()
            else:
                self._scan_word()

        self.tokens.append(Token(TokenType.EOF, "", self.pos))
        return self.tokens

    def _scan_string(self) -> None:
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == '"':
                self.pos += 1
                self.tokens.append(Token(TokenType.STRING, "".join(chars), start))
                return
            if ch == "\\":
                if self.pos + 1 >= len(self.text):
                    break
                nxt = self.text[self.pos + 1]
                if nxt not in _ESCAPES:
                    raise LiteralSyntaxError(self.text, self.pos, f"unsupported escape \\{nxt}")
                chars.append(_ESCAPES[nxt])
                self.pos += 2
                continue
            chars.append(ch)
            self.pos += 1

        raise LiteralSyntaxError(self.text, start, "unterminated string")

    def _scan_word(self) -> None:
        match = self.WORD_PATTERN.match(self.text, self.pos)
        if not match:
            raise LiteralSyntaxError(self.text, self.pos, f"unexpected character {self.text[self.pos]!r}")
        self.tokens.append(Token(TokenType.WORD, match.group(0), self.pos))
        self.pos = match.end()


def word_value(word: str) -> Scalar:
    """Convert a bare word to an int, a float or leave it as a string."""
    if INT_RE.fullmatch(word):
        return int(word)
    if FLOAT_RE.fullmatch(word):
        return float(word)
    return word


def _scalar(token: Token) -> Scalar:
    if token.type == TokenType.STRING:
        return token.value
    return word_value(token.value)


def _key(token: Token) -> str:
    # Keyword-style keys (:color) read the same as bare ones
    key = str(token.value)
    if token.type == TokenType.WORD and key.startswith(":") and len(key) > 1:
        key = key[1:]
    return key


def read_literal(text: str) -> Scalar:
    """
    Read a single scalar literal.

    Args:
        text: Literal text such as ``"left"``, ``10`` or ``bold``

    Returns:
        The string or number

    Raises:
        LiteralSyntaxError: If the text is not exactly one scalar
    """
    tokens = LiteralTokenizer(text).tokenize()
    if len(tokens) != 2 or tokens[0].type not in (TokenType.STRING, TokenType.WORD):
        raise LiteralSyntaxError(text, 0, "expected a single string, word or number")
    return _scalar(tokens[0])


def read_map(text: str) -> dict[str, Scalar]:
    """
    Read a brace object into a dict.

    Args:
        text: Brace object text, e.g. ``{color "red" width 10}``

    Returns:
        Mapping of key to scalar value, in declaration order

    Raises:
        LiteralSyntaxError: On any malformed payload, odd key/value
            count, nested object or duplicate key
    """
    if text is None:
        raise LiteralSyntaxError("", 0, "missing payload")

    tokens = LiteralTokenizer(text).tokenize()
    if tokens[0].type != TokenType.LBRACE:
        raise LiteralSyntaxError(text, tokens[0].pos, "expected '{'")

    result: dict[str, Scalar] = {}
    i = 1
    while tokens[i].type in (TokenType.STRING, TokenType.WORD):
        key_token, value_token = tokens[i], tokens[i + 1]
        if value_token.type not in (TokenType.STRING, TokenType.WORD):
            raise LiteralSyntaxError(text, value_token.pos, "expected a value")
        key = _key(key_token)
        if key in result:
            raise LiteralSyntaxError(text, key_token.pos, f"duplicate key {key!r}")
        result[key] = _scalar(value_token)
        i += 2

    if tokens[i].type != TokenType.RBRACE:
        raise LiteralSyntaxError(text, tokens[i].pos, "expected '}'")
    if tokens[i + 1].type != TokenType.EOF:
        raise LiteralSyntaxError(text, tokens[i + 1].pos, "trailing text after '}'")

    return result
