"""Protocols for rs2ts.

Defines the contracts shared by lexeme classifiers and transpile strategies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rs2ts.lexemes import Lexeme
    from rs2ts.transpile.result import TranspileResult


class Classifier(Protocol):
    """Protocol for lexeme classifiers.

    A classifier looks at one byte offset and reports how far a lexeme of its
    kind extends from there.

    Thread Safety:
        Implementations must be pure functions of their arguments.

    """

    def __call__(self, raw: bytes, pos: int) -> int:
        """Identify a lexeme starting at ``pos``.

        Args:
            raw: UTF-8 encoded source (read-only)
            pos: Byte offset to look at; may be out of range or mid-character

        Returns:
            Offset just after the lexeme, or ``pos`` unchanged for no match.

        Complexity: O(length of the lexeme)
        """
        ...


class TranspileStrategy(Protocol):
    """Protocol for strategies that turn lexemes into TypeScript."""

    name: str

    def transpile(self, lexemes: Sequence[Lexeme]) -> TranspileResult:
        """Transpile a lexeme sequence.

        Args:
            lexemes: Every lexeme of one source, in order

        Returns:
            TranspileResult holding TypeScript lines and any errors.

        """
        ...
