"""Scoped raw-mode terminal access for the selectors.

``terminal_session`` puts stdin into raw mode for the lifetime of a
``with`` block and yields a :class:`KeyReader`. The previous terminal
attributes are restored on every exit path, including ``SystemExit`` from
an interrupt. The reader subscribes to stdin readiness only while a key is
being awaited, and any bytes still buffered when the block exits are
dropped with it, so consecutive selectors never see each other's input.
"""

from __future__ import annotations

import asyncio
import codecs
import os
import sys
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from nuxt_starter.errors import TerminalError

from .keys import Key, KeyLexer

_READ_SIZE = 64


@contextmanager
def raw_input_mode(fd: int) -> Iterator[None]:
    """Switch *fd* to unbuffered, no-echo input for the duration of the block.

    Canonical mode, echo, signal generation (so Ctrl+C arrives as ``\\x03``)
    and CR-to-NL translation are turned off. Output processing stays on so
    rendered newlines still return the carriage.

    Raises:
        TerminalError: If *fd* is not a terminal or the platform has no termios.
    """
    try:
        import termios
    except ImportError as exc:
        raise TerminalError("interactive selection needs a POSIX terminal") from exc

    if not os.isatty(fd):
        raise TerminalError("stdin is not a terminal; interactive selection is unavailable")

    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[0] &= ~(termios.ICRNL | termios.IXON)
    raw[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG | termios.IEXTEN)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSADRAIN, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class KeyReader:
    """Async iterator of :class:`Key` events read from a raw-mode descriptor.

    At most one read is outstanding at a time: a reader callback is added to
    the running loop while awaiting the next chunk and removed as soon as it
    arrives. Iteration stops at end of input.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending: deque[Key] = deque()
        self._lexer = KeyLexer()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def __aiter__(self) -> "KeyReader":
        return self

    async def __anext__(self) -> Key:
        while not self._pending:
            chunk = await self._read_chunk()
            if not chunk:
                self._pending.extend(self._lexer.flush())
                if not self._pending:
                    raise StopAsyncIteration
                break
            self._pending.extend(self._lexer.feed(self._decoder.decode(chunk)))
        return self._pending.popleft()

    async def _read_chunk(self) -> bytes:
        loop = asyncio.get_running_loop()
        ready: asyncio.Future[bytes] = loop.create_future()

        def _on_readable() -> None:
            if ready.done():
                return
            try:
                ready.set_result(os.read(self.fd, _READ_SIZE))
            except OSError as exc:
                ready.set_exception(exc)

        loop.add_reader(self.fd, _on_readable)
        try:
            return await ready
        finally:
            loop.remove_reader(self.fd)


@contextmanager
def terminal_session(stream: TextIO | None = None) -> Iterator[KeyReader]:
    """Own the terminal for one selector: raw mode plus a fresh key reader."""
    fd = (stream or sys.stdin).fileno()
    with raw_input_mode(fd):
        yield KeyReader(fd)
