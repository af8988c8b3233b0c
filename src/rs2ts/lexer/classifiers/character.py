"""Character literal classifier, like ``'a'``, ``'\\n'`` or ``'\\u{1F600}'``."""

from __future__ import annotations

from rs2ts.lexer.charsets import (
    ASCII_ESCAPE_HIGH_DIGITS,
    HEX_DIGITS,
    MAX_CODE_POINT,
    MAX_UNICODE_ESCAPE_DIGITS,
    SIMPLE_ESCAPES,
)
from rs2ts.lexer.position import ascii_at, char_at, encoded_len


def identify_character(raw: bytes, pos: int) -> int:
    """Identify a character literal starting at ``pos``.

    A lone quote followed by an identifier (``'static``, ``'outer:``) is a
    lifetime or label, not a character, so the closing quote is mandatory.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to look at

    Returns:
        Offset just after the closing quote, or ``pos`` if there is no
        well-formed character literal here.
    """
    if ascii_at(raw, pos) != "'":
        return pos

    first = char_at(raw, pos + 1)
    if first == "" or first == "'":
        return pos
    if first != "\\":
        end = pos + 1 + encoded_len(first)
        return end + 1 if ascii_at(raw, end) == "'" else pos

    escape = ascii_at(raw, pos + 2)
    if escape in SIMPLE_ESCAPES:
        return pos + 4 if ascii_at(raw, pos + 3) == "'" else pos
    if escape == "x":
        return _identify_ascii_escape(raw, pos)
    if escape == "u":
        return _identify_unicode_escape(raw, pos)
    return pos


def _identify_ascii_escape(raw: bytes, pos: int) -> int:
    # '\xHH' with the first digit 0-7
    if (
        ascii_at(raw, pos + 3) in ASCII_ESCAPE_HIGH_DIGITS
        and ascii_at(raw, pos + 4) in HEX_DIGITS
        and ascii_at(raw, pos + 5) == "'"
    ):
        return pos + 6
    return pos


def _identify_unicode_escape(raw: bytes, pos: int) -> int:
    # '\u{H..H}' with 1-6 hex digits and a value no greater than U+10FFFF
    if ascii_at(raw, pos + 3) != "{":
        return pos
    start = pos + 4
    i = start
    while ascii_at(raw, i) in HEX_DIGITS:
        i += 1
        if i - start > MAX_UNICODE_ESCAPE_DIGITS:
            return pos
    if i == start or ascii_at(raw, i) != "}" or ascii_at(raw, i + 1) != "'":
        return pos
    if int(raw[start:i], 16) > MAX_CODE_POINT:
        return pos
    return i + 2
