from __future__ import annotations

import sys
from decimal import Decimal
from typing import Optional, TextIO

from clinic.billing.ledger import parse_amount


class StdioPrompter:
    """Line-oriented prompter over text streams (stdin/stdout by default)."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def write(self, text: str) -> None:
        print(text, file=self._out)

    def _readline(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            raise EOFError("input closed")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str, minimum: int, maximum: int) -> int:
        while True:
            text = self._readline(prompt).strip()
            try:
                value = int(text)
            except ValueError:
                self.write("Invalid input. Enter a number.")
                continue
            if value < minimum or value > maximum:
                self.write(f"Enter a number between {minimum} and {maximum}.")
                continue
            return value

    def read_line(self, prompt: str) -> str:
        while True:
            text = self._readline(prompt)
            if not text:
                self.write("Input cannot be empty. Try again.")
                continue
            return text

    def read_amount(self, prompt: str) -> Decimal:
        while True:
            value = parse_amount(self._readline(prompt))
            if value is None:
                self.write("Invalid amount.")
                continue
            return value


__all__ = ["StdioPrompter"]
