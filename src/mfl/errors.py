"""
MFL Error Hierarchy
===================

This module defines the exception hierarchy for the MFL front end.
All exceptions inherit from MflError, allowing callers to catch every
front-end error with a single except clause if desired.

Exception Hierarchy
-------------------
MflError (base)
├── SourceError (source input problems)
│   └── SourceNotFoundError - source file cannot be opened for reading
└── LookaheadError - pushback requested twice without an intervening read

Design Philosophy
-----------------
Only two kinds of failure are ever raised by the lexer:

1. A source that cannot be opened at construction time. This is a hard
   failure surfaced immediately to the caller.
2. Misuse of the one-character pushback slot. This is a programming error
   inside the scanner, never a property of the input text.

Malformed *content* is never an exception: the scanner represents it as
an UNKNOWN token and keeps going.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MflError(Exception):
    """
    Base exception for all MFL errors.

    All exceptions raised by the package inherit from this class:

        try:
            scanner = Scanner.from_file("program.mfl")
        except MflError as e:
            print(f"Error: {e}")
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with an optional hint line.

        Example output:
            error: cannot open source 'prog.mfl': no such file
            hint: check the path passed to --file
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Source Exceptions
# =============================================================================

class SourceError(MflError):
    """Base exception for problems with the scanner's input source."""
    pass


class SourceNotFoundError(SourceError):
    """
    Source file cannot be opened for reading.

    Raised when:
    - The path does not exist
    - The path names a directory
    - Permission denied reading the file

    Attributes:
        path: The path that was requested
        reason: Short description of the underlying OS failure
    """

    def __init__(self, path: str, reason: str = "no such file"):
        self.path = path
        self.reason = reason
        super().__init__(
            f"cannot open source '{path}': {reason}",
            hint="check that the file exists and is readable",
        )


# =============================================================================
# Scanner Exceptions
# =============================================================================

class LookaheadError(MflError):
    """
    Pushback requested while a pushed-back character is still pending.

    The character source holds exactly one character of lookahead. A second
    pushback without an intervening read would silently lose a character,
    so it is reported as a defect in the caller.
    """

    def __init__(self, message: str = "pushback requested twice without a read"):
        super().__init__(message, hint="lookahead depth is exactly one character")
