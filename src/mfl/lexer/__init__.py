"""
MFL Lexer
=========

Lexical analysis for MFL: turns source text into a stream of tokens.

Pipeline
--------
    text / file → CharacterSource → Scanner → Token, Token, ..., EOF

Usage
-----
>>> from mfl.lexer import scan
>>> [str(t) for t in scan("x1 mod y")]
['ID(x1)', 'MOD', 'ID(y)']
"""

from mfl.lexer.scanner import Scanner, ScannerState
from mfl.lexer.source import CharacterClass, CharacterSource, classify
from mfl.lexer.tokens import (
    COMMENT_LEXEME,
    INCOMPLETE_COMMENT_LEXEME,
    KEYWORDS,
    Token,
    TokenKind,
    keyword_kind,
)


def scan(text: str) -> list[Token]:
    """
    Tokenize a string in one call.

    Args:
        text: MFL source text

    Returns:
        Every token of the text in order, without the terminating EOF
    """
    with Scanner.from_string(text) as scanner:
        return list(scanner)


__all__ = [
    # Scanner
    "Scanner",
    "ScannerState",
    "scan",
    # Character source
    "CharacterClass",
    "CharacterSource",
    "classify",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "keyword_kind",
    "COMMENT_LEXEME",
    "INCOMPLETE_COMMENT_LEXEME",
]
