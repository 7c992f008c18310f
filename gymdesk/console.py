"""Character-oriented terminal input and output for the menus."""

from __future__ import annotations

import subprocess
import sys
from typing import TextIO

_PLATFORM_DEFAULT = object()


def _default_clear_command() -> list[str]:
    if sys.platform.startswith("win"):
        return ["cmd", "/c", "cls"]
    return ["clear"]


class Console:
    """Reads tokens, numbers and single-key choices from a text stream."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_command=_PLATFORM_DEFAULT,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        if clear_command is _PLATFORM_DEFAULT:
            clear_command = _default_clear_command()
        self.clear_command = clear_command
        self._pending = ""

    def _getc(self) -> str:
        if self._pending:
            ch, self._pending = self._pending, ""
            return ch
        return self.stdin.read(1)

    def _skip_whitespace(self) -> str:
        ch = self._getc()
        while ch and ch.isspace():
            ch = self._getc()
        if not ch:
            raise EOFError("end of input")
        return ch

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def read_token(self) -> str:
        """Return the next whitespace-delimited word; EOFError at end of input."""
        chars = [self._skip_whitespace()]
        ch = self._getc()
        while ch and not ch.isspace():
            chars.append(ch)
            ch = self._getc()
        self._pending = ch
        return "".join(chars)

    def read_int(self) -> int:
        """Return the next word as an integer; ValueError if it is not one."""
        token = self.read_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not a number: {token!r}") from None

    def read_choice(self) -> str:
        """Return the next non-blank character; EOFError at end of input."""
        return self._skip_whitespace()

    def pause(self) -> None:
        """Discard input up to and including the next newline."""
        ch = self._getc()
        while ch and ch != "\n":
            ch = self._getc()

    def clear(self) -> None:
        """Clear the terminal with the configured command, if any."""
        self.stdout.flush()
        if not self.clear_command:
            return
        try:
            subprocess.run(self.clear_command, check=False)
        except OSError:
            pass