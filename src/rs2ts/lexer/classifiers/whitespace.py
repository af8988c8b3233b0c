"""Whitespace classifier.

Rust treats all of Pattern_White_Space alike, including the non-ASCII next
line, directional marks and line/paragraph separators.
"""

from __future__ import annotations

from rs2ts.lexer.charsets import PATTERN_WHITE_SPACE
from rs2ts.lexer.position import char_at, encoded_len


def identify_whitespace(raw: bytes, pos: int) -> int:
    """Identify a run of whitespace starting at ``pos``.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to look at

    Returns:
        Offset after the last whitespace character, or ``pos``.
    """
    i = pos
    char = char_at(raw, i)
    while char in PATTERN_WHITE_SPACE:
        i += encoded_len(char)
        char = char_at(raw, i)
    return i
