"""Frozen character and token tables used by the classifiers.

Every table is a frozenset so the empty-string sentinel returned by
``rs2ts.lexer.position`` is never a member. The Unicode predicates return
False for the sentinel as well.
"""

from __future__ import annotations

import regex

DECIMAL_DIGITS = frozenset("0123456789")
BINARY_DIGITS = frozenset("01")
OCTAL_DIGITS = frozenset("01234567")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# First digit of a \xHH escape (keeps the value at or below 0x7F)
ASCII_ESCAPE_HIGH_DIGITS = frozenset("01234567")

# Characters allowed after a backslash in a simple character escape
SIMPLE_ESCAPES = frozenset({"n", "r", "t", "\\", "0", '"', "'"})

# Number prefixes that select a non-decimal sub-scanner, keyed by marker
BASE_PREFIX_DIGITS = {
    "b": BINARY_DIGITS,
    "o": OCTAL_DIGITS,
    "x": HEX_DIGITS,
}

EXPONENT_MARKERS = frozenset("eE")
EXPONENT_SIGNS = frozenset("+-")

MAX_CODE_POINT = 0x10FFFF
MAX_UNICODE_ESCAPE_DIGITS = 6

# Unicode Pattern_White_Space
PATTERN_WHITE_SPACE = frozenset(
    {
        "\u0009",  # horizontal tab
        "\u000a",  # line feed
        "\u000b",  # vertical tab
        "\u000c",  # form feed
        "\u000d",  # carriage return
        "\u0020",  # space
        "\u0085",  # next line
        "\u200e",  # left-to-right mark
        "\u200f",  # right-to-left mark
        "\u2028",  # line separator
        "\u2029",  # paragraph separator
    }
)

# Rust 2018 punctuation, grouped by length so the longest match is tried first
PUNCTUATION_BY_LENGTH: tuple[tuple[int, frozenset[bytes]], ...] = (
    (3, frozenset({b"<<=", b">>=", b"...", b"..="})),
    (
        2,
        frozenset(
            {
                b"+=",
                b"-=",
                b"*=",
                b"/=",
                b"%=",
                b"^=",
                b"&=",
                b"|=",
                b"&&",
                b"||",
                b"<<",
                b">>",
                b"==",
                b"!=",
                b">=",
                b"<=",
                b"..",
                b"::",
                b"->",
                b"=>",
            }
        ),
    ),
    (1, frozenset(bytes([c]) for c in b"+-*/%^!&|=><@_.,;:#$?{}[]()")),
)

# Unicode Alphabetic: letters, letter numbers (Ⅻ) and Other_Alphabetic
# marks such as Indic vowel signs. unicodedata exposes no Other_Alphabetic.
_ALPHABETIC = regex.compile(r"\p{Alphabetic}")
_ALPHANUMERIC = regex.compile(r"[\p{Alphabetic}\p{N}]")


def is_alphabetic(char: str) -> bool:
    """Check if a single character has the Unicode Alphabetic property."""
    return bool(char) and _ALPHABETIC.match(char) is not None


def is_alphanumeric(char: str) -> bool:
    """Check if a single character is Alphabetic or a Unicode number (Nd, Nl, No)."""
    return bool(char) and _ALPHANUMERIC.match(char) is not None
