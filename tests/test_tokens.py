# =============================================================================
# test_tokens.py - Token Model Unit Tests
# =============================================================================
# Tests for the MFL token kinds, keyword table and Token value.
#
# Test coverage includes:
#   - Lexeme-only equality and hashing
#   - Printed form (KIND(lexeme) vs bare KIND)
#   - Keyword classification and the TRUE/FALSE case asymmetry
#   - Immutability
# =============================================================================

import dataclasses

import pytest
from mfl.lexer.tokens import (
    KEYWORDS,
    Token,
    TokenKind,
    keyword_kind,
)


# =============================================================================
# Equality Tests
# =============================================================================

class TestTokenEquality:
    """Tokens compare by lexeme only."""

    def test_same_kind_same_lexeme(self):
        assert Token(TokenKind.ID, "x") == Token(TokenKind.ID, "x")

    def test_kind_is_ignored(self):
        """An ID and an UNKNOWN with the same text are equal."""
        assert Token(TokenKind.ID, "x") == Token(TokenKind.UNKNOWN, "x")

    def test_different_lexemes(self):
        assert Token(TokenKind.INT, "1") != Token(TokenKind.INT, "2")

    def test_hash_follows_equality(self):
        """Equal tokens collapse in a set."""
        tokens = {Token(TokenKind.ID, "x"), Token(TokenKind.UNKNOWN, "x")}
        assert len(tokens) == 1

    def test_not_equal_to_string(self):
        """A token never equals a bare string with the same text."""
        assert Token(TokenKind.ID, "x") != "x"

    def test_default_lexeme_is_empty(self):
        assert Token(TokenKind.EOF).lexeme == ""


# =============================================================================
# Rendering Tests
# =============================================================================

class TestTokenRendering:
    """Printed form used by the mfl command."""

    @pytest.mark.parametrize("kind,lexeme,expected", [
        (TokenKind.INT, "123", "INT(123)"),
        (TokenKind.REAL, ".5", "REAL(.5)"),
        (TokenKind.ID, "x1", "ID(x1)"),
        (TokenKind.TRUE, "True", "TRUE(True)"),
        (TokenKind.FALSE, "false", "FALSE(false)"),
        (TokenKind.UNKNOWN, "12.", "UNKNOWN(12.)"),
    ])
    def test_valued_kinds_show_lexeme(self, kind, lexeme, expected):
        assert str(Token(kind, lexeme)) == expected

    @pytest.mark.parametrize("kind,lexeme,expected", [
        (TokenKind.ADD, "+", "ADD"),
        (TokenKind.GTE, ">=", "GTE"),
        (TokenKind.ASSIGN, ":=", "ASSIGN"),
        (TokenKind.MOD, "mod", "MOD"),
        (TokenKind.COMMENT, "COMMENT", "COMMENT"),
        (TokenKind.EOF, "", "EOF"),
    ])
    def test_other_kinds_show_name_only(self, kind, lexeme, expected):
        assert str(Token(kind, lexeme)) == expected

    def test_repr(self):
        assert repr(Token(TokenKind.ID, "x")) == "Token(ID, 'x')"


# =============================================================================
# Keyword Classification Tests
# =============================================================================

class TestKeywordKind:
    """Classification of letter-led lexemes."""

    @pytest.mark.parametrize("name", ["true", "TRUE", "True", "tRuE"])
    def test_true_any_case(self, name):
        assert keyword_kind(name) is TokenKind.TRUE

    def test_false_lowercase(self):
        assert keyword_kind("false") is TokenKind.FALSE

    @pytest.mark.parametrize("name", ["FALSE", "False"])
    def test_false_other_case_is_identifier(self, name):
        assert keyword_kind(name) is TokenKind.ID

    @pytest.mark.parametrize("name,kind", [
        ("mod", TokenKind.MOD),
        ("not", TokenKind.NOT),
        ("and", TokenKind.AND),
        ("or", TokenKind.OR),
        ("val", TokenKind.VAL),
    ])
    def test_reserved_words(self, name, kind):
        assert keyword_kind(name) is kind

    @pytest.mark.parametrize("name", ["MOD", "Not", "AND", "Val", "modx", "x"])
    def test_identifiers(self, name):
        assert keyword_kind(name) is TokenKind.ID

    def test_true_not_in_case_sensitive_table(self):
        """TRUE is matched separately, case-insensitively."""
        assert "true" not in KEYWORDS


# =============================================================================
# Token Helpers
# =============================================================================

class TestTokenHelpers:
    """Convenience predicates and immutability."""

    def test_is_eof(self):
        assert Token(TokenKind.EOF, "").is_eof
        assert not Token(TokenKind.ID, "x").is_eof

    def test_is_keyword(self):
        assert Token(TokenKind.VAL, "val").is_keyword()
        assert not Token(TokenKind.ID, "val2").is_keyword()

    def test_is_literal(self):
        assert Token(TokenKind.REAL, "1.5").is_literal()
        assert Token(TokenKind.TRUE, "true").is_literal()
        assert not Token(TokenKind.ADD, "+").is_literal()

    def test_frozen(self):
        token = Token(TokenKind.ID, "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.lexeme = "y"
