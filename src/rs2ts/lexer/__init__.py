"""Lexemizer for Rust 2018 source text.

Splits source into classified lexemes (characters, comments, identifiers,
numbers, punctuation, strings, whitespace) without building any syntax
tree. Any input produces a lexeme sequence; nothing here raises.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexemizer, lexemize, CLASSIFIERS
├── core.py              # Scan driver and unrecognized-run accumulator
├── position.py          # Byte-offset reads that never split a character
├── charsets.py          # Frozen character and punctuation tables
└── classifiers/         # One pure (raw, pos) -> pos function per kind
    ├── character.py     # 'a' '\\n' '\\x7F' '\\u{10FFFF}'
    ├── comment.py       # // and nested /* */
    ├── identifier.py    # foo _bar Größe
    ├── number.py        # 12 3.4e-5 0b1010 0o17 0xFF
    ├── punctuation.py   # :: -> >>= ...
    ├── string.py        # "..." and r#"..."#
    └── whitespace.py    # Pattern_White_Space

Usage:
    >>> from rs2ts.lexer import lexemize
    >>> print(lexemize("x+1"))
    Identifier          0  x
    Punctuation         1  +
    Number              2  1
    EndOfInput          3  <EOI>

"""

from rs2ts.lexer.core import CLASSIFIERS, Lexemizer, lexemize

__all__ = ["CLASSIFIERS", "Lexemizer", "lexemize"]
