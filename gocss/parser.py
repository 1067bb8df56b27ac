"""Tokenizer and parser turning stylesheet text into a map of rules."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = [
    "Rule",
    "TokenType",
    "Token",
    "CSSSyntaxError",
    "token_type",
    "tokenize",
    "parse",
    "unmarshal",
]


class CSSSyntaxError(ValueError):
    """Raised when a stylesheet cannot be parsed."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


class Rule(str):
    """Name of a CSS rule: a class, an id or a tag."""

    def type(self) -> str:
        """Return ``"class"``, ``"id"`` or ``"tag"``."""
        if self.startswith("."):
            return "class"
        if self.startswith("#"):
            return "id"
        return "tag"


class TokenType(enum.IntEnum):
    """Kind of a token as seen by the parser."""

    FIRST = -1
    BLOCK_START = 0
    BLOCK_END = 1
    RULE_NAME = 2
    VALUE = 3
    SELECTOR = 4
    STYLE_SEPARATOR = 5
    STATEMENT_END = 6

    def __str__(self) -> str:
        if self in (
            TokenType.BLOCK_START,
            TokenType.BLOCK_END,
            TokenType.STYLE_SEPARATOR,
            TokenType.STATEMENT_END,
            TokenType.SELECTOR,
        ):
            return self.name
        return "VALUE"


_TOKEN_TYPES = {
    "{": TokenType.BLOCK_START,
    "}": TokenType.BLOCK_END,
    ":": TokenType.STYLE_SEPARATOR,
    ";": TokenType.STATEMENT_END,
    ".": TokenType.SELECTOR,
    "#": TokenType.SELECTOR,
}


def token_type(value: str) -> TokenType:
    """Classify the text of a token."""
    return _TOKEN_TYPES.get(value, TokenType.VALUE)


@dataclass(frozen=True)
class Token:
    """A token and the line on which it ends."""

    value: str
    line: int

    def type(self) -> TokenType:
        """Return the kind of this token."""
        return token_type(self.value)


_WHITESPACE = re.compile(r"[ \t\n\r]*")
# Identifier rules: the first token follows ordinary identifier rules,
# a value after ':' may contain spaces, other tokens may not.
_IDENT_FIRST = re.compile(r"[^\W\d]\w*")
_IDENT_VALUE = re.compile(r"[^\n\r\t:;]+")
_IDENT_OTHER = re.compile(r"[^.#\n\r \t:;]+")
_COMMENT = re.compile(r"//[^\n]*|/\*.*?(?:\*/|\Z)", re.DOTALL)
_SPECIAL = re.compile(
    r'"(?:[^"\\\n]|\\.)*"?'
    r"|'(?:[^'\\\n]|\\.)*'?"
    r"|`[^`]*`?"
    r"|\.\d[\d_]*(?:[eE][+-]?[\d_]*)?"
    r"|0[xX][0-9A-Fa-f_]*"
    r"|\d[\d_]*(?:\.[\d_]*)?(?:[eE][+-]?[\d_]*)?"
    r"|.",
    re.DOTALL,
)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of a stylesheet."""
    pos = 0
    line = 1
    counted = 0
    ident = _IDENT_FIRST
    while True:
        pos = _WHITESPACE.match(text, pos).end()
        if pos >= len(text):
            return
        match = ident.match(text, pos)
        if match is None:
            comment = _COMMENT.match(text, pos)
            if comment is not None:
                pos = comment.end()
                continue
            match = _SPECIAL.match(text, pos)
        value = match.group()
        end = match.end()
        line += text.count("\n", counted, end)
        counted = end
        yield Token(value, line)
        ident = _IDENT_VALUE if value == ":" else _IDENT_OTHER
        pos = end


def parse(tokens: Iterable[Token]) -> dict[Rule, dict[str, str]]:
    """Build the rule map from a stream of tokens."""
    css: dict[Rule, dict[str, str]] = {}
    rules: list[str] = []
    styles: dict[str, str] = {}
    style = value = selector = ""
    in_block = False
    prev = TokenType.FIRST

    for token in tokens:
        kind = token.type()
        if kind is TokenType.VALUE:
            if prev is TokenType.SELECTOR:
                rules.append(selector + token.value)
            elif prev in (TokenType.BLOCK_START, TokenType.STATEMENT_END):
                style = token.value
            elif prev is TokenType.STYLE_SEPARATOR:
                value = token.value
            else:
                rules.append(token.value)
        elif kind is TokenType.SELECTOR:
            selector = token.value
        elif kind is TokenType.BLOCK_START:
            if prev is not TokenType.VALUE:
                raise CSSSyntaxError("block is missing rule identifier", token.line)
            in_block = True
        elif kind is TokenType.STATEMENT_END:
            if prev is not TokenType.VALUE or not style or not value:
                raise CSSSyntaxError("expected style before semicolon", token.line)
            styles[style] = value
        elif kind is TokenType.BLOCK_END:
            if not in_block:
                raise CSSSyntaxError("rule block ends without a beginning", token.line)
            for name in rules:
                for old_style, old_value in css.get(Rule(name), {}).items():
                    styles.setdefault(old_style, old_value)
            for name in rules:
                css[Rule(name)] = dict(styles)
            styles = {}
            style = value = ""
            in_block = False
            rules = []
        prev = kind

    return css


def unmarshal(data: bytes | str) -> dict[Rule, dict[str, str]]:
    """Parse stylesheet text into a map from rule to its styles."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8", errors="replace")
    return parse(tokenize(data))