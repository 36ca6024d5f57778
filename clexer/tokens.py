"""Tokenizer for a subset of C source text."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from collections.abc import Iterable


class TokenType(Enum):
    AMPER = auto()
    AND = auto()
    ARROW = auto()
    AUTO = auto()
    ASTERISK = auto()
    BACKSLASH = auto()
    BITOR = auto()
    BREAK = auto()
    CASE = auto()
    CHAR = auto()
    CHARLIT = auto()
    COLON = auto()
    COMMA = auto()
    CONST = auto()
    CONTINUE = auto()
    DEFAULT = auto()
    DECREM = auto()
    DO = auto()
    DOUBLE = auto()
    DQUOTE = auto()
    ELSE = auto()
    ENUM = auto()
    EQUALS = auto()
    EQEQ = auto()
    EXTERN = auto()
    FLOAT = auto()
    FLOATLIT = auto()
    FOR = auto()
    GE = auto()
    GOTO = auto()
    GT = auto()
    HASH = auto()
    IDENT = auto()
    IF = auto()
    INCREM = auto()
    INLINE = auto()
    INT = auto()
    INTLIT = auto()
    LBRACE = auto()
    LBRACKET = auto()
    LE = auto()
    LONG = auto()
    LPAREN = auto()
    LT = auto()
    LSHIFT = auto()
    MINUS = auto()
    NOT = auto()
    NEQ = auto()
    NOR = auto()
    OR = auto()
    PERIOD = auto()
    PLUS = auto()
    QUOTE = auto()
    QUESTION = auto()
    RBRACE = auto()
    RBRACKET = auto()
    REGISTER = auto()
    RESTRICT = auto()
    RETURN = auto()
    RPAREN = auto()
    RSHIFT = auto()
    SEMI = auto()
    SHORT = auto()
    SIGNED = auto()
    SIZEOF = auto()
    SLASH = auto()
    STATIC = auto()
    STRINGLIT = auto()
    STRUCT = auto()
    SWITCH = auto()
    TILDE = auto()
    TYPEDEF = auto()
    UNION = auto()
    UNSIGNED = auto()
    VOID = auto()
    VOLATILE = auto()
    WHILE = auto()


@dataclass(frozen=True)
class Token:
    """A token and the offset in the text where it begins."""

    type: TokenType
    start: int


class LexError(Exception):
    """Raised when the text holds something the tokenizer cannot read."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.line = line


_T = TokenType

_PAIRS = {
    "++": _T.INCREM,
    "--": _T.DECREM,
    "->": _T.ARROW,
    "==": _T.EQEQ,
    ">=": _T.GE,
    ">>": _T.RSHIFT,
    "<=": _T.LE,
    "<<": _T.LSHIFT,
    "!=": _T.NEQ,
    "&&": _T.AND,
    "||": _T.OR,
}

_SINGLES = {
    "+": _T.PLUS,
    "-": _T.MINUS,
    "*": _T.ASTERISK,
    "/": _T.SLASH,
    "{": _T.LBRACE,
    "}": _T.RBRACE,
    "[": _T.LBRACKET,
    "]": _T.RBRACKET,
    "(": _T.LPAREN,
    ")": _T.RPAREN,
    "=": _T.EQUALS,
    ";": _T.SEMI,
    ":": _T.COLON,
    ",": _T.COMMA,
    ">": _T.GT,
    "<": _T.LT,
    "!": _T.NOT,
    "~": _T.TILDE,
    ".": _T.PERIOD,
    "#": _T.HASH,
    "&": _T.AMPER,
    "|": _T.BITOR,
    "^": _T.NOR,
    "?": _T.QUESTION,
    "\\": _T.BACKSLASH,
}

_KEYWORDS = tuple(
    (t.name.lower(), t)
    for t in (
        _T.AUTO, _T.BREAK, _T.CASE, _T.CHAR, _T.CONST, _T.CONTINUE,
        _T.DEFAULT, _T.DO, _T.DOUBLE, _T.ELSE, _T.ENUM, _T.EXTERN,
        _T.FLOAT, _T.FOR, _T.GOTO, _T.IF, _T.INLINE, _T.INT, _T.LONG,
        _T.REGISTER, _T.RESTRICT, _T.RETURN, _T.SHORT, _T.SIGNED,
        _T.SIZEOF, _T.STATIC, _T.STRUCT, _T.SWITCH, _T.TYPEDEF,
        _T.UNION, _T.UNSIGNED, _T.VOID, _T.VOLATILE, _T.WHILE,
    )
)

_SPACE = frozenset(" \t\n\v\f\r")
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_WORD = _LETTERS | _DIGITS | {"_"}
_NUMBER = _DIGITS | {"."}


def line_number(text: str, pos: int) -> int:
    """Return the 1-based line of ``pos``, counting newlines up to and including it."""
    if not 0 <= pos <= len(text):
        raise IndexError("Index out of bounds.")
    return text.count("\n", 0, pos + 1) + 1


def _classify(word: str) -> TokenType:
    # A word takes the first keyword it is a prefix of, in keyword order.
    for keyword, token_type in _KEYWORDS:
        if keyword.startswith(word):
            return token_type
    return TokenType.IDENT


def _scan(text: str, start: int, allowed: frozenset) -> int:
    end = start
    while end < len(text) and text[end] in allowed:
        end += 1
    return end


def _unrecognized(text: str, pos: int) -> LexError:
    line = line_number(text, pos)
    return LexError(f"Unrecognized token {text[pos]} (line {line}).", line)


def tokenize(text: str) -> list[Token]:
    """Split C source text into tokens, raising LexError on unknown input."""
    tokens: list[Token] = []
    i = 0
    length = len(text)

    while i < length:
        ch = text[i]

        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline < 0 else newline + 1

        elif ch in _SPACE:
            i += 1

        elif ch in "\"'":
            close = text.find(ch, i + 1)
            if close < 0:
                line = line_number(text, i)
                raise LexError(f"Unterminated literal (line {line}).", line)
            kind = TokenType.STRINGLIT if ch == '"' else TokenType.CHARLIT
            tokens.append(Token(kind, i + 1))
            i = close + 1

        elif text[i:i + 2] in _PAIRS:
            tokens.append(Token(_PAIRS[text[i:i + 2]], i + 1))
            i += 2

        elif ch in _SINGLES:
            tokens.append(Token(_SINGLES[ch], i))
            i += 1

        elif ch in _LETTERS:
            end = _scan(text, i, _WORD)
            tokens.append(Token(_classify(text[i:end]), i))
            i = end

        elif ch in _DIGITS:
            end = _scan(text, i, _NUMBER)
            is_float = "." in text[i:end]
            kind = TokenType.FLOATLIT if is_float else TokenType.INTLIT
            tokens.append(Token(kind, i))
            i = end

        else:
            raise _unrecognized(text, i)

    return tokens


def dump(tokens: Iterable[Token]) -> str:
    """Render token type names, each followed by a space, ending with a blank line."""
    return "".join(f"{token.type.name} " for token in tokens) + "\n\n"