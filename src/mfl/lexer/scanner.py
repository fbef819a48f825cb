"""
MFL Scanner
===========

This module implements the scanning engine for MFL. Each call to
``next_token()`` consumes zero or more characters from a CharacterSource
and returns exactly one Token; once input is exhausted every further call
returns EOF.

Dispatch
--------
Whitespace is skipped, then the class of the first remaining character
selects the recognizer:

| Class  | Recognizer        | Produces                                 |
|--------|-------------------|------------------------------------------|
| LETTER | _scan_identifier  | ID, TRUE, FALSE, MOD, NOT, AND, OR, VAL  |
| DIGIT  | _scan_number      | INT, REAL, UNKNOWN ("12.")               |
| OTHER  | _scan_operator    | operators, parens, COMMENT, REAL (".5")  |
| END    | (none)            | EOF                                      |

Two-character operators (>=, <=, !=, :=) and the comment opener ``(*`` are
recognized with ``_peek_match``: read one character, keep it if it is the
expected one, otherwise push it back.

Malformed Input
---------------
Nothing in the input can make the scanner raise. A lone trailing dot, a dot
without digits, a bare ``!`` or ``:``, an unknown symbol and an unterminated
comment all come back as UNKNOWN tokens. An unterminated comment also
exhausts the scanner.

Example Usage
-------------
>>> from mfl.lexer import Scanner
>>> with Scanner.from_string("val x := 12.5 (* note *)") as scanner:
...     for token in scanner:
...         print(token)
VAL
ID(x)
ASSIGN
REAL(12.5)
COMMENT
"""

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Iterator, Union

from mfl.lexer.source import CharacterClass, CharacterSource
from mfl.lexer.tokens import (
    COMMENT_LEXEME,
    INCOMPLETE_COMMENT_LEXEME,
    Token,
    TokenKind,
    keyword_kind,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Scanner State
# =============================================================================

class ScannerState(Enum):
    """Coarse state of a Scanner between and during calls."""
    READY = auto()          # Between tokens, more input may follow
    IN_COMMENT = auto()     # Skipping the body of a (* ... *) comment
    EXHAUSTED = auto()      # Input consumed; only EOF from now on


# Operators that need no lookahead
SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "=": TokenKind.EQ,
    ")": TokenKind.RPAREN,
}

# Operators of the form <first>= and the kind produced with/without the '='
TWO_CHAR_TOKENS: dict[str, tuple[TokenKind, TokenKind]] = {
    ">": (TokenKind.GTE, TokenKind.GT),
    "<": (TokenKind.LTE, TokenKind.LT),
    "!": (TokenKind.NEQ, TokenKind.UNKNOWN),
    ":": (TokenKind.ASSIGN, TokenKind.UNKNOWN),
}


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes MFL source text.

    The scanner owns its CharacterSource and releases it when input runs
    out, when ``close()`` is called or when a ``with`` block exits.

    Usage:
        scanner = Scanner.from_string("x1 mod y")
        token = scanner.next_token()     # ID(x1)
        tokens = list(scanner)           # [MOD, ID(y)]

    Attributes:
        state: Current ScannerState
    """

    def __init__(self, source: CharacterSource):
        """
        Initialize the scanner over a character source.

        Args:
            source: The source to scan; ownership passes to the scanner
        """
        self._source = source
        self._char = ""
        self._class = CharacterClass.END
        self.state = ScannerState.READY

    @classmethod
    def from_string(cls, text: str) -> "Scanner":
        """Create a scanner over an in-memory string."""
        return cls(CharacterSource.from_string(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Scanner":
        """
        Create a scanner over a UTF-8 text file.

        Raises:
            SourceNotFoundError: If the file cannot be opened for reading
        """
        return cls(CharacterSource.from_file(path))

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def line_number(self) -> int:
        """Current 1-based line count (newlines consumed plus one)."""
        return self._source.line_number

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token; EOF (empty lexeme) once input is exhausted
        """
        if self.state is ScannerState.EXHAUSTED:
            return Token(TokenKind.EOF, "")

        self._skip_whitespace()

        if self._class is CharacterClass.LETTER:
            token = self._scan_identifier()
        elif self._class is CharacterClass.DIGIT:
            token = self._scan_number()
        elif self._class is CharacterClass.OTHER:
            token = self._scan_operator()
        else:
            self.state = ScannerState.EXHAUSTED
            token = Token(TokenKind.EOF, "")

        logger.debug(f"{self._source.name}:{self.line_number}: {token!r}")
        return token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source, ending with a single EOF.

        Yields:
            Token objects for each lexical element, then EOF
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    def __iter__(self) -> Iterator[Token]:
        """Iterate over all tokens except the terminating EOF."""
        for token in self.tokenize():
            if not token.is_eof:
                yield token

    def close(self) -> None:
        """Release the character source and stop scanning."""
        self._source.close()
        self.state = ScannerState.EXHAUSTED

    def __enter__(self) -> "Scanner":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _advance(self) -> None:
        """Read the next character (or replay a pushed-back one)."""
        self._char, self._class = self._source.next_raw()

    def _unread(self) -> None:
        """Push the current character back; it starts the next read."""
        self._source.pushback()

    def _skip_whitespace(self) -> None:
        """Advance to the first non-whitespace character."""
        self._advance()
        while self._class is CharacterClass.WHITESPACE:
            self._advance()

    def _peek_match(self, expected: str) -> bool:
        """
        Consume the next character if it matches expected.

        On a mismatch the character is pushed back for the next token.

        Returns:
            True if matched and consumed, False otherwise
        """
        self._advance()
        if self._char == expected:
            return True
        self._unread()
        return False

    def _scan_digits(self, chars: list[str]) -> None:
        """
        Append a maximal run of digits to chars, starting at the current
        character, and push back the first non-digit.
        """
        while self._class is CharacterClass.DIGIT:
            chars.append(self._char)
            self._advance()
        self._unread()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_identifier(self) -> Token:
        """
        Scan an identifier, keyword or boolean literal.

        Identifiers start with a letter and continue with letters and
        digits. "true" is recognized in any case, every other reserved
        word only in lowercase.
        """
        chars = []
        while self._class in (CharacterClass.LETTER, CharacterClass.DIGIT):
            chars.append(self._char)
            self._advance()
        self._unread()

        name = "".join(chars)
        return Token(keyword_kind(name), name)

    def _scan_number(self) -> Token:
        """
        Scan an integer or a decimal literal.

        Handles:
        - Integer: 123
        - Decimal: 12.5
        - Trailing dot: 12. (UNKNOWN, the dot is kept in the lexeme)
        """
        chars = []
        while self._class is CharacterClass.DIGIT:
            chars.append(self._char)
            self._advance()

        if self._char != ".":
            self._unread()
            return Token(TokenKind.INT, "".join(chars))

        chars.append(".")
        self._advance()

        if self._class is not CharacterClass.DIGIT:
            self._unread()
            return Token(TokenKind.UNKNOWN, "".join(chars))

        self._scan_digits(chars)
        return Token(TokenKind.REAL, "".join(chars))

    def _scan_leading_dot(self) -> Token:
        """Scan a decimal written without its integer part, e.g. .5"""
        self._advance()
        if self._class is not CharacterClass.DIGIT:
            self._unread()
            return Token(TokenKind.UNKNOWN, ".")

        chars = ["."]
        self._scan_digits(chars)
        return Token(TokenKind.REAL, "".join(chars))

    def _scan_operator(self) -> Token:
        """
        Scan an operator, delimiter or comment.

        Single-character operators need no lookahead; the rest peek at one
        character with _peek_match.
        """
        char = self._char

        if char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[char], char)

        if char in TWO_CHAR_TOKENS:
            matched, alone = TWO_CHAR_TOKENS[char]
            if self._peek_match("="):
                return Token(matched, char + "=")
            return Token(alone, char)

        if char == "(":
            if self._peek_match("*"):
                return self._skip_comment()
            return Token(TokenKind.LPAREN, "(")

        if char == ".":
            return self._scan_leading_dot()

        # Unknown character
        return Token(TokenKind.UNKNOWN, char)

    def _skip_comment(self) -> Token:
        """
        Skip the body of a (* ... *) comment. The opener is already consumed.

        Comments do not nest. After a '*' the following character is
        examined again, so "**)" closes the comment.

        Returns:
            COMMENT on a closed comment, UNKNOWN if input ends first
        """
        self.state = ScannerState.IN_COMMENT
        start_line = self.line_number

        self._advance()
        while True:
            while self._char != "*" and self._class is not CharacterClass.END:
                self._advance()

            if self._class is CharacterClass.END:
                logger.warning(
                    f"{self._source.name}:{start_line}: comment not terminated before end of input"
                )
                self.state = ScannerState.EXHAUSTED
                return Token(TokenKind.UNKNOWN, INCOMPLETE_COMMENT_LEXEME)

            self._advance()
            if self._char == ")":
                self.state = ScannerState.READY
                return Token(TokenKind.COMMENT, COMMENT_LEXEME)
