"""Best-effort C# tokenizer that keeps trivia and exact source positions."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


class TokenKind(StrEnum):
    NEWLINE = "newline"
    WHITESPACE = "whitespace"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    PREPROCESSOR = "preprocessor"
    STRING = "string"
    CHAR = "char"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    PUNCTUATION = "punctuation"


TRIVIA_KINDS = frozenset(
    {
        TokenKind.NEWLINE,
        TokenKind.WHITESPACE,
        TokenKind.LINE_COMMENT,
        TokenKind.BLOCK_COMMENT,
        TokenKind.PREPROCESSOR,
    }
)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    line: int  # indexed at 0
    column: int  # indexed at 0
    offset: int

    @property
    def end(self) -> int:
        return self.offset + len(self.text)

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA_KINDS


# Order matters: comments before punctuation, raw strings before regular ones.
# Unterminated comments and literals run to the end of the input (or line)
# so that arbitrary text still tokenizes.
_TOKEN_RE = re.compile(
    r"""
    (?P<newline>\r\n|\n|\r)
    |(?P<whitespace>[^\S\r\n]+)
    |(?P<line_comment>//[^\r\n]*)
    |(?P<block_comment>/\*(?:.*?\*/|.*\Z))
    |(?P<raw_string>\$*"{3,}.*?(?:"{3,}|\Z))
    |(?P<verbatim_string>(?:\$@|@\$|@)"(?:[^"]|"")*(?:"|\Z))
    |(?P<string>\$?"(?:[^"\\\r\n]|\\.)*"?)
    |(?P<char>'(?:[^'\\\r\n]|\\.)*'?)
    |(?P<identifier>@?[^\W\d]\w*)
    |(?P<number>\d\w*(?:\.\d\w*)?)
    |(?P<punctuation>::|.)
    """,
    re.VERBOSE | re.DOTALL,
)

_PREPROCESSOR_RE = re.compile(r"\#[^\r\n]*")

_NEWLINE_RE = re.compile(r"\r\n|\n|\r")

_GROUP_KINDS: dict[str, TokenKind] = {
    "newline": TokenKind.NEWLINE,
    "whitespace": TokenKind.WHITESPACE,
    "line_comment": TokenKind.LINE_COMMENT,
    "block_comment": TokenKind.BLOCK_COMMENT,
    "raw_string": TokenKind.STRING,
    "verbatim_string": TokenKind.STRING,
    "string": TokenKind.STRING,
    "char": TokenKind.CHAR,
    "identifier": TokenKind.IDENTIFIER,
    "number": TokenKind.NUMBER,
    "punctuation": TokenKind.PUNCTUATION,
}


def tokenize(text: str) -> Iterator[Token]:
    """Yield every token of ``text``, trivia included, in source order.

    Never raises: a character that does not start a known token becomes a
    single-character punctuation token.
    """
    pos = 0
    line = 0
    line_start = 0
    # Only whitespace seen since the last newline; decides preprocessor lines.
    at_line_start = True

    while pos < len(text):
        match = _PREPROCESSOR_RE.match(text, pos) if at_line_start else None
        if match is not None:
            kind = TokenKind.PREPROCESSOR
        else:
            match = _TOKEN_RE.match(text, pos)
            assert match is not None and match.lastgroup is not None
            kind = _GROUP_KINDS[match.lastgroup]

        value = match.group()
        yield Token(kind, value, line, pos - line_start, pos)
        pos = match.end()

        if kind is TokenKind.NEWLINE:
            line += 1
            line_start = pos
            at_line_start = True
            continue

        newlines = list(_NEWLINE_RE.finditer(value))
        if newlines:
            line += len(newlines)
            line_start = match.start() + newlines[-1].end()
        if kind is not TokenKind.WHITESPACE:
            at_line_start = False
