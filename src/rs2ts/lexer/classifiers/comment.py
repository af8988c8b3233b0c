"""Comment classifier for inline ``// ...`` and nested ``/* ... */`` comments."""

from __future__ import annotations

from rs2ts.lexer.position import ascii_at

_SLASH = ord("/")
_STAR = ord("*")


def identify_comment(raw: bytes, pos: int) -> int:
    """Identify an inline or block comment starting at ``pos``.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to look at

    Returns:
        Offset just after the comment, or ``pos`` if no comment starts here.
    """
    if ascii_at(raw, pos) != "/":
        return pos
    marker = ascii_at(raw, pos + 1)
    if marker == "/":
        return _identify_inline_comment(raw, pos)
    if marker == "*":
        return _identify_block_comment(raw, pos)
    return pos


def _identify_inline_comment(raw: bytes, pos: int) -> int:
    """Advance to the next line feed, which is not part of the comment.

    Carriage returns are ordinary characters here, so a CRLF line ending
    leaves the CR inside the comment.
    """
    idx = raw.find(b"\n", pos + 2)
    return idx if idx != -1 else len(raw)


def _identify_block_comment(raw: bytes, pos: int) -> int:
    """Advance past the ``*/`` that balances the opening ``/*``.

    Block comments nest. Both bytes of every ``/*`` and ``*/`` are consumed
    together, so ``/*/`` opens a nested comment and does not also close one.
    Multi-byte characters never contain the ASCII bytes ``/`` or ``*``, so
    the walk can stay byte-wise.

    Returns:
        Offset after the closing ``*/``, or ``pos`` if the comment is unterminated.
    """
    depth = 0
    last = len(raw) - 1
    i = pos + 2
    while i < last:
        byte = raw[i]
        following = raw[i + 1]
        if byte == _STAR and following == _SLASH:
            if depth == 0:
                return i + 2
            depth -= 1
            i += 2
        elif byte == _SLASH and following == _STAR:
            depth += 1
            i += 2
        else:
            i += 1
    return pos
