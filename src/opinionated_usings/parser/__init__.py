"""Lexical C# front end producing using directives with source positions."""

from opinionated_usings.parser.lexer import Token, TokenKind, tokenize
from opinionated_usings.parser.scanner import UsingScanner

__all__ = [
    "Token",
    "TokenKind",
    "UsingScanner",
    "tokenize",
]
