"""Punctuation classifier, like ``::``, ``->`` or ``>>=``."""

from __future__ import annotations

from rs2ts.lexer.charsets import PUNCTUATION_BY_LENGTH


def identify_punctuation(raw: bytes, pos: int) -> int:
    """Identify the longest operator or delimiter starting at ``pos``.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to look at

    Returns:
        Offset after the punctuation, or ``pos`` if none starts here.
    """
    if pos < 0:
        return pos
    for length, table in PUNCTUATION_BY_LENGTH:
        if raw[pos : pos + length] in table:
            return pos + length
    return pos
