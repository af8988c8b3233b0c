"""Lexeme, LexemeKind and LexemizeResult definitions.

The lexemizer turns source text into an ordered, gap-free sequence of
Lexeme objects. Each Lexeme has a kind, its byte offset in the source, and
the exact source text it covers.

Thread Safety:
Lexeme and LexemizeResult are frozen (immutable) and safe to share across
threads. LexemeKind is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from rs2ts.stringbuilder import StringBuilder


class LexemeKind(Enum):
    """Categories of lexeme.

    The value is the display name used by the debug rendering.

    """

    CHARACTER = "Character"  # 'a'
    COMMENT = "Comment"  # // or /* */
    IDENTIFIER = "Identifier"  # foo_bar
    NUMBER = "Number"  # 12.34
    PUNCTUATION = "Punctuation"  # ::
    STRING = "String"  # "abc" or r#"abc"#
    WHITESPACE = "Whitespace"
    UNRECOGNIZED = "Unrecognized"  # anything no classifier accepts

    def __str__(self) -> str:
        return self.value


def mark_line_breaks(text: str) -> str:
    """Make line feeds and carriage returns visible for one-line display."""
    return text.replace("\r", "<CR>").replace("\n", "<NL>")


@dataclass(frozen=True, slots=True)
class Lexeme:
    """A classified, contiguous span of source text.

    Attributes:
        kind: The lexeme category
        pos: Byte offset of the first byte, relative to the start of the source
        text: The exact source text covered
        end_pos: Byte offset just after the last byte
        line_number: Line containing ``pos`` (0-indexed)
        column: Characters between the start of the line and ``pos`` (0-indexed)

    """

    kind: LexemeKind
    pos: int
    text: str
    end_pos: int
    line_number: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.kind.value:<16} {self.pos:>4}  {mark_line_breaks(self.text)}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Lexeme({self.kind.name}, {val!r}, {self.pos})"


@dataclass(frozen=True, slots=True)
class LexemizeResult:
    """Every lexeme found in one source string, plus end-of-input bookkeeping.

    Attributes:
        lexemes: Lexemes in source order, covering the whole input
        end_pos: Byte length of the input
        end_line_number: Line number at the end of input (0-indexed)
        end_column: Column at the end of input (0-indexed)

    """

    lexemes: tuple[Lexeme, ...]
    end_pos: int
    end_line_number: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        sb = StringBuilder()
        for lexeme in self.lexemes:
            sb.append_line(str(lexeme))
        sb.append(f"EndOfInput       {self.end_pos:>4}  <EOI>")
        return sb.build()

    def __len__(self) -> int:
        return len(self.lexemes)

    def __iter__(self) -> Iterator[Lexeme]:
        return iter(self.lexemes)

    @property
    def text(self) -> str:
        """Concatenated lexeme text, equal to the original source."""
        return "".join(lexeme.text for lexeme in self.lexemes)

    def of_kind(self, kind: LexemeKind) -> list[Lexeme]:
        """Return the lexemes of one kind, in source order."""
        return [lexeme for lexeme in self.lexemes if lexeme.kind is kind]
