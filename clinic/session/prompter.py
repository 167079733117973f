from __future__ import annotations

from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class Prompter(Protocol):
    """Blocking input/output collaborator used by the menus.

    Every ``read_*`` call re-prompts until the input is valid, so callers only
    ever see well-formed values. Implementations raise EOFError when input is
    exhausted.
    """

    def write(self, text: str) -> None:
        ...

    def read_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """Integer within the inclusive range [minimum, maximum]."""
        ...

    def read_line(self, prompt: str) -> str:
        """Non-empty line of text."""
        ...

    def read_amount(self, prompt: str) -> Decimal:
        """Positive decimal amount."""
        ...


__all__ = ["Prompter"]
