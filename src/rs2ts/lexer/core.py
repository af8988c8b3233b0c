"""Scan driver: turns source text into a total, ordered lexeme sequence.

At each character boundary the classifiers are tried in a fixed priority
order and the first match is committed. Bytes no classifier accepts are
collected into a pending run, which is emitted as one Unrecognized lexeme
just before the next match or at end of input.

Every call is O(n): the cursor only moves forward, and each classifier
call costs at most the length of the lexeme it finds.

Thread Safety:
Lexemizer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from rs2ts.lexemes import Lexeme, LexemeKind, LexemizeResult
from rs2ts.lexer.classifiers import (
    identify_character,
    identify_comment,
    identify_identifier,
    identify_number,
    identify_punctuation,
    identify_string,
    identify_whitespace,
)
from rs2ts.lexer.position import is_char_boundary
from rs2ts.protocols import Classifier
from rs2ts.utils.logger import get_logger

logger = get_logger(__name__)

# Priority order. Strings come before identifiers because raw strings start
# with the letter "r", and comments before punctuation because of "/".
CLASSIFIERS: tuple[tuple[LexemeKind, Classifier], ...] = (
    (LexemeKind.CHARACTER, identify_character),
    (LexemeKind.COMMENT, identify_comment),
    (LexemeKind.STRING, identify_string),
    (LexemeKind.IDENTIFIER, identify_identifier),
    (LexemeKind.NUMBER, identify_number),
    (LexemeKind.PUNCTUATION, identify_punctuation),
    (LexemeKind.WHITESPACE, identify_whitespace),
)


class Lexemizer:
    """Single-pass lexemizer over a UTF-8 buffer.

    Usage:
            >>> for lexeme in Lexemizer("let x = 'a';").scan():
            ...     print(lexeme)
        Identifier          0  let
        Whitespace          3
        Identifier          4  x
        ...

    ``str`` sources are encoded as UTF-8, with lone surrogates passed
    through. ``bytes`` sources are scanned as-is; bytes that are not valid
    UTF-8 end up in Unrecognized lexemes, decoded with surrogateescape so
    the original bytes can be recovered.

    """

    __slots__ = (
        "_raw",
        "_raw_len",  # Cached len(raw)
        "_text_errors",  # Codec error handler for lexeme text
        "_classifiers",
        "_pos",
        "_pending_start",  # Start of the current unrecognized run
        "_line_number",
        "_column",
    )

    def __init__(
        self,
        source: str | bytes,
        classifiers: tuple[tuple[LexemeKind, Classifier], ...] = CLASSIFIERS,
    ) -> None:
        """Initialize lexemizer with source text.

        Args:
            source: Rust source code
            classifiers: Ordered (kind, classifier) pairs to try at each offset
        """
        if isinstance(source, str):
            self._raw = source.encode("utf-8", "surrogatepass")
            self._text_errors = "surrogatepass"
        else:
            self._raw = bytes(source)
            self._text_errors = "surrogateescape"
        self._raw_len = len(self._raw)
        self._classifiers = classifiers
        self._pos = 0
        self._pending_start = 0
        self._line_number = 0
        self._column = 0

    def scan(self) -> Iterator[Lexeme]:
        """Scan the source into lexemes.

        Yields:
            Lexeme objects in source order, covering every byte exactly once.
        """
        raw = self._raw
        raw_len = self._raw_len
        while self._pos < raw_len:
            pos = self._pos
            match = self._classify(raw, pos) if is_char_boundary(raw, pos) else None
            if match is None:
                # Extend the pending unrecognized run by one byte
                self._pos = pos + 1
                continue
            kind, next_pos = match
            if self._pending_start != pos:
                yield self._emit(LexemeKind.UNRECOGNIZED, self._pending_start, pos)
            yield self._emit(kind, pos, next_pos)
            self._pos = next_pos
            self._pending_start = next_pos

        if self._pending_start != self._pos:
            yield self._emit(LexemeKind.UNRECOGNIZED, self._pending_start, self._pos)
            self._pending_start = self._pos

    def result(self) -> LexemizeResult:
        """Scan the whole source and bundle the lexemes with end-of-input data."""
        lexemes = tuple(self.scan())
        if logger.isEnabledFor(logging.DEBUG):
            unrecognized = sum(1 for x in lexemes if x.kind is LexemeKind.UNRECOGNIZED)
            logger.debug(
                "Lexemized %d bytes into %d lexemes (%d unrecognized)",
                self._raw_len,
                len(lexemes),
                unrecognized,
            )
        return LexemizeResult(
            lexemes=lexemes,
            end_pos=self._pos,
            end_line_number=self._line_number,
            end_column=self._column,
        )

    def _classify(self, raw: bytes, pos: int) -> tuple[LexemeKind, int] | None:
        """Return the kind and end of the first classifier that matches at ``pos``."""
        for kind, identify in self._classifiers:
            next_pos = identify(raw, pos)
            if next_pos > pos:
                return kind, next_pos
        return None

    def _emit(self, kind: LexemeKind, start: int, end: int) -> Lexeme:
        """Create a Lexeme for ``raw[start:end]`` and advance line/column tracking."""
        text = self._raw[start:end].decode("utf-8", self._text_errors)
        lexeme = Lexeme(
            kind=kind,
            pos=start,
            text=text,
            end_pos=end,
            line_number=self._line_number,
            column=self._column,
        )
        newline_count = text.count("\n")
        if newline_count > 0:
            self._line_number += newline_count
            self._column = len(text) - text.rfind("\n") - 1
        else:
            self._column += len(text)
        return lexeme


def lexemize(source: str | bytes) -> LexemizeResult:
    """Transform Rust source code into lexemes.

    Never raises. Malformed input produces Unrecognized lexemes.

    Args:
        source: Rust source code, assumed to conform to the 2018 edition

    Returns:
        LexemizeResult whose lexemes reconstruct ``source`` exactly.

    Example:
        >>> print(lexemize("'Z'"))
        Character           0  'Z'
        EndOfInput          3  <EOI>
    """
    return Lexemizer(source).result()
