"""StringBuilder for O(n) accumulation of listings and TypeScript output.

Pieces are collected in a list and joined once. ``build_lines`` splits the
result on line feeds only, so Unicode line separators and form feeds that
Rust treats as whitespace inside a line never add lines.

Thread Safety:
StringBuilder instances are local to one rendering or transpile call.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder().append("let a = 1;\\n").append("let b = 2;")
            >>> sb.build_lines()
            ['let a = 1;\\n', 'let b = 2;']

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a piece of text; empty strings are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append ``s`` and a line feed."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def extend(self, strings: Iterable[str]) -> StringBuilder:
        """Append several pieces at once."""
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def build_lines(self) -> list[str]:
        """Join all parts and split after every line feed.

        Each line keeps its ``\\n``; a final line without one is kept too.
        Carriage returns, U+2028 and the like stay inside their line.
        """
        text = self.build()
        lines: list[str] = []
        start = 0
        end = len(text)
        while start < end:
            nl = text.find("\n", start)
            stop = end if nl == -1 else nl + 1
            lines.append(text[start:stop])
            start = stop
        return lines

    def __bool__(self) -> bool:
        return bool(self._parts)
