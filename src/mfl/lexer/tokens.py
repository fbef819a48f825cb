"""
MFL Token Model
===============

Token kinds and the immutable Token value produced by the scanner.

Token Categories
----------------
- Literals: INT (123), REAL (12.5, .5)
- Names: ID (x1), TRUE / FALSE (boolean literals)
- Keywords: mod, not, and, or, val
- Operators: + - * / = > >= < <= != :=
- Delimiters: ( )
- Structural: COMMENT, UNKNOWN, EOF

Equality
--------
Two tokens are equal when their lexemes are equal; the kind is not part of
the comparison. ``Token(TokenKind.ID, "x") == Token(TokenKind.UNKNOWN, "x")``
is True. Hashing follows the same rule so tokens behave consistently in
sets and dictionaries.

Rendering
---------
``str(token)`` is the printer format used by the ``mfl`` command:

    INT(123)   REAL(.5)   ID(x1)   TRUE(True)   UNKNOWN(12.)
    ADD   GTE   ASSIGN   COMMENT   EOF
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the MFL language.

    The set is closed: the scanner never produces anything else. Keywords
    are distinguished from identifiers to simplify parsing.
    """

    # === Literals ===
    INT = auto()            # 123
    REAL = auto()           # 12.5, .5
    ID = auto()             # x1
    TRUE = auto()           # true (any case)
    FALSE = auto()          # false (lowercase only)

    # === Arithmetic Operators ===
    ADD = auto()            # +
    SUB = auto()            # -
    MULT = auto()           # *
    DIV = auto()            # /
    MOD = auto()            # mod

    # === Logical Operators ===
    NOT = auto()            # not
    AND = auto()            # and
    OR = auto()             # or

    # === Comparison Operators ===
    GT = auto()             # >
    GTE = auto()            # >=
    LT = auto()             # <
    LTE = auto()            # <=
    EQ = auto()             # =
    NEQ = auto()            # !=

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )

    # === Binding ===
    ASSIGN = auto()         # :=
    VAL = auto()            # val

    # === Structural ===
    COMMENT = auto()        # (* ... *)
    UNKNOWN = auto()        # anything unrecognized
    EOF = auto()            # end of input


# Kinds whose printed form carries the lexeme, e.g. ID(x1)
VALUED_KINDS = frozenset({
    TokenKind.INT,
    TokenKind.REAL,
    TokenKind.ID,
    TokenKind.TRUE,
    TokenKind.FALSE,
    TokenKind.UNKNOWN,
})


# =============================================================================
# Keyword Mapping
# =============================================================================

# Case-sensitive reserved words. TRUE is matched case-insensitively by the
# scanner and is deliberately absent from this table.
KEYWORDS: dict[str, TokenKind] = {
    "false": TokenKind.FALSE,
    "mod": TokenKind.MOD,
    "not": TokenKind.NOT,
    "and": TokenKind.AND,
    "or": TokenKind.OR,
    "val": TokenKind.VAL,
}


def keyword_kind(name: str) -> TokenKind:
    """
    Classify a letter-led lexeme as a keyword, boolean literal or ID.

    "true" matches in any letter case; "false" and the other keywords
    match only in lowercase.
    """
    if name.lower() == "true":
        return TokenKind.TRUE
    return KEYWORDS.get(name, TokenKind.ID)


# Fixed lexemes for structural tokens
COMMENT_LEXEME = "COMMENT"
INCOMPLETE_COMMENT_LEXEME = "POSSIBLE INCOMPLETE COMMENT"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True, eq=False)
class Token:
    """
    A single token from MFL source.

    Attributes:
        kind: The TokenKind classification
        lexeme: The literal text captured by the token
    """
    kind: TokenKind
    lexeme: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.lexeme == other.lexeme

    def __hash__(self) -> int:
        return hash(self.lexeme)

    def __str__(self) -> str:
        """Format as KIND(lexeme) or bare KIND for printing."""
        if self.kind in VALUED_KINDS:
            return f"{self.kind.name}({self.lexeme})"
        return self.kind.name

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.lexeme!r})"

    @property
    def is_eof(self) -> bool:
        """Return True if this token terminates the stream."""
        return self.kind is TokenKind.EOF

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.kind in (
            TokenKind.MOD,
            TokenKind.NOT,
            TokenKind.AND,
            TokenKind.OR,
            TokenKind.VAL,
        )

    def is_literal(self) -> bool:
        """Return True if this token is a numeric or boolean literal."""
        return self.kind in (
            TokenKind.INT,
            TokenKind.REAL,
            TokenKind.TRUE,
            TokenKind.FALSE,
        )
