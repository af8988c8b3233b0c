"""Number classifier, like ``12.34``, ``1e-9``, ``0b1001`` or ``0xFF_FF``.

This is a scanner only. It never evaluates a literal, so numbers too large
for any integer type are still recognised.
"""

from __future__ import annotations

from rs2ts.lexer.charsets import (
    BASE_PREFIX_DIGITS,
    DECIMAL_DIGITS,
    EXPONENT_MARKERS,
    EXPONENT_SIGNS,
)
from rs2ts.lexer.position import ascii_at


def identify_number(raw: bytes, pos: int) -> int:
    """Identify a number starting at ``pos``.

    ``0b``, ``0o`` and ``0x`` select the binary, octal and hex scanners.
    Everything else that starts with a digit, including a bare ``0``, is
    scanned as decimal.

    Args:
        raw: UTF-8 encoded source
        pos: Byte offset to look at

    Returns:
        Offset after the number, or ``pos`` if none starts here.
    """
    first = ascii_at(raw, pos)
    if first not in DECIMAL_DIGITS:
        return pos
    if first == "0":
        digits = BASE_PREFIX_DIGITS.get(ascii_at(raw, pos + 1))
        if digits is not None:
            return _identify_prefixed(raw, pos, digits)
    return _identify_decimal(raw, pos)


def _identify_prefixed(raw: bytes, pos: int, digits: frozenset[str]) -> int:
    """Scan the digits after a ``0b``, ``0o`` or ``0x`` prefix.

    Underscores may appear anywhere after the prefix. A decimal digit that is
    out of range for the base, or a ``.``, rejects the whole literal rather
    than accepting the valid part before it: ``0b12`` and ``0o7.1`` are
    errors, not ``0b1`` and ``0o7``.
    """
    has_digit = False
    i = pos + 2
    while True:
        char = ascii_at(raw, i)
        if char == "_":
            pass
        elif char in digits:
            has_digit = True
        elif char in DECIMAL_DIGITS or char == ".":
            return pos
        else:
            return i if has_digit else pos
        i += 1


def _identify_decimal(raw: bytes, pos: int) -> int:
    """Scan an integer or float, with optional fraction and exponent.

    A literal may not end on a dangling exponent marker, sign, or exponent
    marker followed by underscores (``10e``, ``9E+``, ``7.5e_``); any of
    these rejects the literal. ``1._2`` and ``1e2.3`` are rejected too.
    """
    has_dot = False
    has_exponent = False
    after_dot = -1  # offset just after the "."
    after_exponent = -1  # offset just after the "e" or "E"
    after_exponent_underscore = -1  # offset just after an "_" that follows "e"
    after_sign = -1  # offset just after a "+" or "-" that follows "e"

    i = pos + 1
    while True:
        char = ascii_at(raw, i)
        if char == "_":
            if has_dot and after_dot == i:
                return pos
            if has_exponent and after_exponent == i:
                after_exponent_underscore = i + 1
        elif has_exponent and after_exponent == i and char in EXPONENT_SIGNS:
            after_sign = i + 1
        elif not has_dot and char == ".":
            if has_exponent:
                return pos
            has_dot = True
            after_dot = i + 1
        elif not has_exponent and char in EXPONENT_MARKERS:
            has_exponent = True
            after_exponent = i + 1
        elif char not in DECIMAL_DIGITS:
            if i in (after_exponent, after_sign, after_exponent_underscore):
                return pos
            return i
        i += 1
