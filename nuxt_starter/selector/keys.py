"""Key decoding for the interactive selectors.

Raw terminal input arrives as text that may hold several keystrokes, and
arrow keys arrive as multi-character escape sequences. ``KeyLexer`` turns
that text into a stream of :class:`Key` tokens over a fixed alphabet taken
from :mod:`readchar.key`; anything outside the alphabet becomes
``Key.UNKNOWN``.
"""

from __future__ import annotations

from enum import Enum

import readchar

ESC = "\x1b"


class Key(Enum):
    """Logical key events understood by the selectors."""

    UP = "up"
    DOWN = "down"
    TOGGLE = "toggle"
    CONFIRM = "confirm"
    INTERRUPT = "interrupt"
    UNKNOWN = "unknown"


# Longest sequences first so the lexer always prefers the longest match.
_ALPHABET: tuple[tuple[str, Key], ...] = tuple(
    sorted(
        (
            (readchar.key.UP, Key.UP),
            (readchar.key.DOWN, Key.DOWN),
            (readchar.key.SPACE, Key.TOGGLE),
            (readchar.key.ENTER, Key.CONFIRM),
            (readchar.key.CR, Key.CONFIRM),
            (readchar.key.LF, Key.CONFIRM),
            (readchar.key.CTRL_C, Key.INTERRUPT),
        ),
        key=lambda item: len(item[0]),
        reverse=True,
    )
)


def _escape_length(text: str, start: int) -> int | None:
    """Length of the escape sequence at *start*, or ``None`` if truncated.

    Handles CSI (``ESC [ params final``) and SS3 (``ESC O final``) forms; a
    lone ESC followed by anything else counts as one character. A sequence
    broken off by a byte that cannot continue it ends just before that byte,
    so the byte is lexed on its own.
    """
    end = len(text)
    pos = start + 1
    if pos >= end:
        return None
    if text[pos] == "[":
        pos += 1
        while pos < end and "\x20" <= text[pos] <= "\x3f":
            pos += 1
        if pos >= end:
            return None
        if "\x40" <= text[pos] <= "\x7e":
            return pos + 1 - start
        return pos - start
    if text[pos] == "O":
        if pos + 1 >= end:
            return None
        if "\x20" <= text[pos + 1] <= "\x7e":
            return 3
        return 2
    return 1


class KeyLexer:
    """Incremental lexer from raw terminal text to :class:`Key` tokens.

    An escape sequence split across two reads is held back until the rest
    of it arrives.
    """

    def __init__(self) -> None:
        self._buffer = ""

    def feed(self, text: str) -> list[Key]:
        """Consume *text* and return every complete key it finishes."""
        data = self._buffer + text
        self._buffer = ""
        keys: list[Key] = []
        pos = 0
        while pos < len(data):
            for sequence, key in _ALPHABET:
                if data.startswith(sequence, pos):
                    keys.append(key)
                    pos += len(sequence)
                    break
            else:
                if data[pos] != ESC:
                    keys.append(Key.UNKNOWN)
                    pos += 1
                    continue
                length = _escape_length(data, pos)
                if length is None:
                    self._buffer = data[pos:]
                    break
                keys.append(Key.UNKNOWN)
                pos += length
        return keys

    def flush(self) -> list[Key]:
        """Return a held-back partial sequence as ``UNKNOWN`` and reset."""
        if not self._buffer:
            return []
        self._buffer = ""
        return [Key.UNKNOWN]


def decode_keys(text: str) -> list[Key]:
    """Decode a complete chunk of terminal text into keys."""
    lexer = KeyLexer()
    return lexer.feed(text) + lexer.flush()
