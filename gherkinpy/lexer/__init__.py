"""Lexer."""

from gherkinpy.lexer.lexer import Lexer, LexerCheckpoint
from gherkinpy.lexer.tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "LexerCheckpoint",
    "Token",
    "TokenKind",
]
