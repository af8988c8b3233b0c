"""String literal classifier, like ``"Hello \\"Rust\\""`` or ``r#"Hello "Rust""#``."""

from __future__ import annotations

from rs2ts.lexer.position import ascii_at

_BACKSLASH = ord("\\")
_QUOTE = ord('"')


def identify_string(raw: bytes, pos: int) -> int:
    """Identify a quoted or raw string starting at ``pos``.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to look at

    Returns:
        Offset after the closing delimiter, or ``pos`` if no complete string
        starts here.
    """
    char = ascii_at(raw, pos)
    if char == '"':
        return _identify_quoted_string(raw, pos)
    if char == "r":
        return _identify_raw_string(raw, pos)
    return pos


def _identify_quoted_string(raw: bytes, pos: int) -> int:
    """Scan to the first unescaped double quote.

    A backslash skips whatever byte follows it. Whether the escape is legal
    is left to a later stage.
    """
    end = len(raw)
    i = pos + 1
    while i < end:
        byte = raw[i]
        if byte == _BACKSLASH:
            i += 2
            continue
        if byte == _QUOTE:
            return i + 1
        i += 1
    return pos


def _identify_raw_string(raw: bytes, pos: int) -> int:
    """Scan ``r`` + N hashes + ``"`` ... ``"`` + N hashes.

    Backslashes have no effect inside a raw string. A double quote followed
    by fewer than N hashes is part of the content.
    """
    i = pos + 1
    hashes = 0
    while ascii_at(raw, i) == "#":
        hashes += 1
        i += 1
    if ascii_at(raw, i) != '"':
        return pos
    terminator = b'"' + b"#" * hashes
    idx = raw.find(terminator, i + 1)
    if idx == -1:
        return pos
    return idx + len(terminator)
