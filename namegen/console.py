"""Terminal input and output helpers for the interactive menus."""

from __future__ import annotations

import re
import sys
import unicodedata
from typing import Optional, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - not available on Windows
    termios = None

try:
    import msvcrt
except ImportError:  # pragma: no cover - only available on Windows
    msvcrt = None

_INT_PREFIX = re.compile(r"[+-]?\d+")
_HEADER_WIDTH = 50


def _display_width(text: str) -> int:
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


class Console:
    """Reads prompts from one stream and writes menus and messages to another."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def print(self, message: str) -> None:
        """Write a message without a newline and flush."""
        self._out.write(message)
        self._out.flush()

    def println(self, message: str = "") -> None:
        """Write a message followed by a newline."""
        self._out.write(message + "\n")
        self._out.flush()

    def print_line(self, character: str = "-", length: int = 40) -> None:
        """Write a horizontal rule."""
        self.println(character * length)

    def print_header(self, title: str) -> None:
        """Write a title centred between two rules of '='."""
        padding = max(0, (_HEADER_WIDTH - _display_width(title)) // 2)
        self.print_line("=", _HEADER_WIDTH)
        self.println(" " * padding + title)
        self.print_line("=", _HEADER_WIDTH)

    def print_menu_option(self, index: int, option: str) -> None:
        """Write one numbered menu entry."""
        self.println(f"  [{index}] {option}")

    def print_success(self, message: str) -> None:
        self.println(f"\033[1;32m[SUCCESS]\033[0m {message}")

    def print_error(self, message: str) -> None:
        self.println(f"\033[1;31m[ERROR]\033[0m {message}")

    def print_info(self, message: str) -> None:
        self.println(f"\033[1;34m[INFO]\033[0m {message}")

    def clear_screen(self) -> None:
        """Clear the terminal and move the cursor home."""
        self.print("\033[2J\033[H")

    def pause(self) -> None:
        """Wait for a single key press."""
        self.println("按任意键继续...")
        self._read_key()

    def _read_key(self) -> str:
        stream = self._in
        interactive = stream.isatty()
        if interactive and termios is not None:
            fd = stream.fileno()
            saved = termios.tcgetattr(fd)
            raw = termios.tcgetattr(fd)
            raw[3] &= ~(termios.ICANON | termios.ECHO)
            termios.tcsetattr(fd, termios.TCSANOW, raw)
            try:
                return stream.read(1)
            finally:
                termios.tcsetattr(fd, termios.TCSANOW, saved)
        if interactive and msvcrt is not None:
            return msvcrt.getwch()
        return stream.read(1)

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("input stream closed")
        return line

    def _next_token(self) -> str:
        while True:
            fields = self._read_line().split()
            if fields:
                return fields[0]

    def get_int_input(self, prompt: str, low: int = 0, high: int = 100) -> int:
        """Prompt until the user enters an integer in [low, high]."""
        while True:
            self.print(prompt)
            match = _INT_PREFIX.match(self._next_token())
            if match is None:
                self.print_error("无效输入，请输入一个数字")
                continue
            value = int(match.group())
            if low <= value <= high:
                return value
            self.print_error(f"请输入介于 {low} 和 {high} 之间的数字")

    def get_string_input(self, prompt: str) -> str:
        """Prompt for and return one line of text."""
        self.print(prompt)
        return self._read_line().rstrip("\r\n")

    def get_char_input(self, prompt: str) -> str:
        """Prompt for and return the first non-blank character entered."""
        self.print(prompt)
        return self._next_token()[0]