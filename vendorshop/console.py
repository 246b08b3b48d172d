"""Reading whitespace-separated words, lines and integers from a text stream."""

from __future__ import annotations

from typing import TextIO

_DIGITS = "0123456789"


class InputReader:
    """Token reader over a text stream.

    ``word`` and ``integer`` skip leading whitespace and leave the character
    that ends the token unread. ``line`` reads up to the next newline and
    consumes it. ``ignore`` drops exactly one character.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _peek(self) -> str:
        if not self._pending:
            self._pending = self._stream.read(1)
        return self._pending

    def _take(self) -> str:
        char = self._peek()
        self._pending = ""
        return char

    def _skip_space(self) -> None:
        while self._peek().isspace():
            self._take()

    def word(self) -> str:
        """Return the next run of non-whitespace characters."""
        self._skip_space()
        chars = []
        while (char := self._peek()) and not char.isspace():
            chars.append(self._take())
        if not chars:
            raise EOFError("no more input")
        return "".join(chars)

    def line(self) -> str:
        """Return the rest of the current line, without its newline."""
        if not self._peek():
            raise EOFError("no more input")
        chars = []
        while (char := self._take()) and char != "\n":
            chars.append(char)
        return "".join(chars)

    def integer(self) -> int:
        """Return the next integer, with an optional leading sign."""
        self._skip_space()
        if not self._peek():
            raise EOFError("no more input")
        text = ""
        if self._peek() in ("+", "-"):
            text = self._take()
        while (char := self._peek()) and char in _DIGITS:
            text += self._take()
        if not text.lstrip("+-"):
            raise ValueError(f"expected an integer, found {self._peek()!r}")
        return int(text)

    def ignore(self) -> None:
        """Discard one character, if there is one."""
        self._take()