"""Byte-offset primitives shared by every classifier.

All offsets are byte offsets into UTF-8 encoded source. A classifier never
slices the buffer directly; it asks for the character at an offset and gets
the empty string back when there is nothing sensible to return:

- the offset is negative or past the end of the buffer,
- the offset falls inside a multi-byte sequence,
- the bytes at the offset are not valid UTF-8,
- (``ascii_at`` only) the character there is not ASCII.

The empty string is never a member of any character set in
``rs2ts.lexer.charsets``, so a sentinel read always fails a membership test.
"""

from __future__ import annotations


def is_char_boundary(raw: bytes, pos: int) -> bool:
    """Return True if ``pos`` is the start of a character or the end of input."""
    if pos == len(raw):
        return True
    if pos < 0 or pos > len(raw):
        return False
    return (raw[pos] & 0xC0) != 0x80


def char_width(lead: int) -> int:
    """Return the UTF-8 sequence length announced by a lead byte, or 0."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def char_at(raw: bytes, pos: int) -> str:
    """Read the character starting at byte offset ``pos``.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to read from

    Returns:
        The decoded character, or "" if there is no whole character there.
    """
    if pos < 0 or pos >= len(raw):
        return ""
    width = char_width(raw[pos])
    if width == 0:
        return ""
    if width == 1:
        return chr(raw[pos])
    chunk = raw[pos : pos + width]
    if len(chunk) < width:
        return ""
    try:
        return chunk.decode("utf-8")
    except UnicodeDecodeError:
        return ""


def ascii_at(raw: bytes, pos: int) -> str:
    """Read the ASCII character at byte offset ``pos``, or "" if there isn't one."""
    if pos < 0 or pos >= len(raw):
        return ""
    byte = raw[pos]
    if byte >= 0x80:
        return ""
    return chr(byte)


def encoded_len(char: str) -> int:
    """Number of UTF-8 bytes used by a character returned from ``char_at``."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4
