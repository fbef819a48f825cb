"""
Character Source and Classifier
===============================

The scanner never touches a file or string directly. It pulls one
classified character at a time from a CharacterSource, which wraps a text
stream behind a single-character interface with exactly one character of
pushback and a running line counter.

Character Classes
-----------------
| Class      | Test                      | Examples        |
|------------|---------------------------|-----------------|
| LETTER     | str.isalpha()             | a Z é λ         |
| DIGIT      | str.isdecimal()           | 0 9 ٣           |
| WHITESPACE | str.isspace(), except     | space \\t \\n     |
|            | non-breaking spaces       |                 |
| END        | end of stream             | (empty string)  |
| OTHER      | anything else             | + ( . ! :       |

Lookahead
---------
Lookahead depth is exactly one. ``pushback()`` marks the character just
returned by ``next_raw()`` to be returned again by the following call. A
second pushback before that read raises LookaheadError.

Resource Handling
-----------------
The source owns its stream and closes it exactly once: at end of input,
on ``close()``, on leaving a ``with`` block, or when the source is garbage
collected. Read failures are logged and end the stream; they never
propagate into the scanner.
"""

import io
import logging
import weakref
from enum import Enum, auto
from pathlib import Path
from typing import TextIO, Union

from mfl.errors import LookaheadError, SourceNotFoundError


logger = logging.getLogger(__name__)


# Space characters that do not separate tokens; they scan as OTHER
NON_BREAKING_SPACES = frozenset("\u00a0\u2007\u202f")


# =============================================================================
# Character Classifier
# =============================================================================

class CharacterClass(Enum):
    """Closed set of classes the scanner dispatches on."""
    LETTER = auto()
    DIGIT = auto()
    WHITESPACE = auto()
    OTHER = auto()
    END = auto()


def classify(char: str) -> CharacterClass:
    """
    Map a single character to its CharacterClass.

    The empty string stands for end of input.
    """
    if char == "":
        return CharacterClass.END
    if char.isalpha():
        return CharacterClass.LETTER
    if char.isdecimal():
        return CharacterClass.DIGIT
    if char.isspace() and char not in NON_BREAKING_SPACES:
        return CharacterClass.WHITESPACE
    return CharacterClass.OTHER


# =============================================================================
# Character Source
# =============================================================================

class CharacterSource:
    """
    Single-character pull interface over a text stream.

    Usage:
        source = CharacterSource.from_string("x := 1")
        char, cls = source.next_raw()    # ("x", LETTER)
        char, cls = source.next_raw()    # (" ", WHITESPACE)
        source.pushback()
        char, cls = source.next_raw()    # (" ", WHITESPACE) again

    Attributes:
        name: Display name of the input ("<string>" or the file path)
    """

    def __init__(self, stream: TextIO, name: str = "<string>"):
        """
        Wrap an already-open text stream.

        Args:
            stream: The text stream to read; ownership passes to the source
            name: Display name used in log messages
        """
        self.name = name
        self._stream = stream
        self._finalizer = weakref.finalize(self, stream.close)

        self._char = ""
        self._class = CharacterClass.END
        self._has_read = False
        self._pushed_back = False
        self._ended = False

        self._line = 1

    @classmethod
    def from_string(cls, text: str) -> "CharacterSource":
        """Create a source over an in-memory string. Always succeeds."""
        return cls(io.StringIO(text), "<string>")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CharacterSource":
        """
        Open a UTF-8 text file as a source.

        Undecodable bytes are replaced with U+FFFD, which scans as UNKNOWN.

        Raises:
            SourceNotFoundError: If the path cannot be opened for reading
        """
        try:
            stream = open(path, "r", encoding="utf-8", errors="replace")
        except FileNotFoundError as e:
            raise SourceNotFoundError(str(path), "no such file") from e
        except IsADirectoryError as e:
            raise SourceNotFoundError(str(path), "is a directory") from e
        except PermissionError as e:
            raise SourceNotFoundError(str(path), "permission denied") from e
        except OSError as e:
            raise SourceNotFoundError(str(path), e.strerror or str(e)) from e

        logger.debug(f"Opened source file {path}")
        return cls(stream, str(path))

    # =========================================================================
    # Reading
    # =========================================================================

    def next_raw(self) -> tuple[str, CharacterClass]:
        """
        Return the next character and its class.

        Replays the previous character if a pushback is pending. At end of
        input returns ("", END) on every call.
        """
        if self._pushed_back:
            self._pushed_back = False
            return self._char, self._class

        self._has_read = True

        # A source closed early reads as exhausted
        if self._ended or self.closed:
            self._char = ""
            self._class = CharacterClass.END
            self._ended = True
            return self._char, self._class

        char = self._read_one()
        if char == "":
            self._char = ""
            self._class = CharacterClass.END
            self._ended = True
            self.close()
            return self._char, self._class

        self._char = char
        self._class = classify(char)
        if char == "\n":
            self._line += 1

        return self._char, self._class

    def _read_one(self) -> str:
        """Read one character, treating any read failure as end of input."""
        try:
            return self._stream.read(1)
        except (OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            logger.error(f"Internal error reading {self.name}: {e}")
            return ""

    def pushback(self) -> None:
        """
        Return the last character to be read again by next_raw().

        Raises:
            LookaheadError: If a pushback is already pending or nothing
                has been read yet
        """
        if self._pushed_back:
            raise LookaheadError()
        if not self._has_read:
            raise LookaheadError("pushback requested before any character was read")
        self._pushed_back = True

    # =========================================================================
    # State
    # =========================================================================

    @property
    def line_number(self) -> int:
        """Number of newlines consumed plus one."""
        return self._line

    @property
    def pushback_pending(self) -> bool:
        """True while a pushed-back character waits to be replayed."""
        return self._pushed_back

    @property
    def at_end(self) -> bool:
        """True once the underlying stream has been exhausted."""
        return self._ended

    @property
    def closed(self) -> bool:
        """True once the underlying stream has been released."""
        return not self._finalizer.alive

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        if self._finalizer.alive:
            self._finalizer()
            logger.debug(f"Closed source {self.name}")

    def __enter__(self) -> "CharacterSource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
