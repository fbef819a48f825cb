"""
MFL - Lexical Analyzer for a Small Expression Language
======================================================

This package provides the front end of a toy expression-oriented language
called MFL. It converts raw source text into a sequence of classified
tokens for eventual consumption by a parser.

Main Components
---------------
- **lexer**: Character source, classifier, token model and scanner
    Produces one token per call until an EOF token ends the stream

- **cli**: The ``mfl`` command
    Interactive token printer and file mode driver

Quick Start
-----------
Scan a string:
    >>> from mfl import Scanner
    >>> scanner = Scanner.from_string("val x := .5")
    >>> [str(t) for t in scanner]
    ['VAL', 'ID(x)', 'ASSIGN', 'REAL(.5)']

Scan a file:
    >>> with Scanner.from_file("program.mfl") as scanner:
    ...     for token in scanner:
    ...         print(token)

Or use the command-line tool:
    $ mfl --file program.mfl
    $ mfl                        # interactive mode

Version History
---------------
1.0.0 - Initial release with scanner and mfl command
"""

__version__ = "1.0.0"
__author__ = "MFL Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from mfl.errors import (
    MflError,
    SourceError,
    SourceNotFoundError,
    LookaheadError,
)

from mfl.lexer import (
    Scanner,
    ScannerState,
    scan,
    CharacterClass,
    CharacterSource,
    classify,
    Token,
    TokenKind,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Exception hierarchy
    "MflError",
    "SourceError",
    "SourceNotFoundError",
    "LookaheadError",
    # Lexer
    "Scanner",
    "ScannerState",
    "scan",
    "CharacterClass",
    "CharacterSource",
    "classify",
    "Token",
    "TokenKind",
]
