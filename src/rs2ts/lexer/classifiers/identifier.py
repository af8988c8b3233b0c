"""Identifier classifier, like ``String``, ``foo_bar`` or ``_tmp``."""

from __future__ import annotations

from rs2ts.lexer.charsets import is_alphabetic, is_alphanumeric
from rs2ts.lexer.position import char_at, encoded_len


def identify_identifier(raw: bytes, pos: int) -> int:
    """Identify an identifier starting at ``pos``.

    The first character is Alphabetic or ``_``; the rest are Alphabetic,
    numeric or ``_``. Both tests use Unicode properties, so letter numbers
    like ``Ⅻ`` and combining vowel signs stay inside the identifier. A lone
    ``_`` is the wildcard pattern, not an identifier.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to look at

    Returns:
        Offset after the identifier, or ``pos`` if none starts here.
    """
    first = char_at(raw, pos)
    starts_with_underscore = first == "_"
    if not starts_with_underscore and not is_alphabetic(first):
        return pos

    i = pos + encoded_len(first)
    char = char_at(raw, i)
    while char == "_" or is_alphanumeric(char):
        i += encoded_len(char)
        char = char_at(raw, i)

    if starts_with_underscore and i == pos + 1:
        return pos
    return i
