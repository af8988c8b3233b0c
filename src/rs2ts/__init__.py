"""
rs2ts: Opinionated Rust to TypeScript transpiler

The heart of rs2ts is a lexemizer: a scanner that splits Rust 2018 source
into characters, comments, identifiers, numbers, punctuation, strings and
whitespace. It never fails; whatever it cannot classify comes back as
Unrecognized lexemes, and the lexemes always reconstruct the input exactly.

Quick Start:
    >>> from rs2ts import lexemize
    >>> print(lexemize("'Z''\\\\t'"))
    Character           0  'Z'
    Character           3  '\\t'
    EndOfInput          7  <EOI>

    >>> from rs2ts import transpile
    >>> transpile("const ROUGHLY_PI: f32 = 3.14;").main_lines[0]
    'const ROUGHLY_PI: Number = 3.14;'

Command Line:
    rs2ts lexemize src/main.rs
    rs2ts transpile -e "const FOUR: u8 = 4;"
"""

from rs2ts.config import (
    RsEdition,
    Strategy,
    TranspileConfig,
    TsMajor,
    get_transpile_config,
    reset_transpile_config,
    set_transpile_config,
    transpile_config_context,
)
from rs2ts.errors import ConfigError, Rs2tsError, TranspileError
from rs2ts.lexemes import Lexeme, LexemeKind, LexemizeResult
from rs2ts.lexer import CLASSIFIERS, Lexemizer, lexemize
from rs2ts.serialization import from_dict, from_json, to_dict, to_json
from rs2ts.transpile import TranspileErrorKind, TranspileResult, transpile

__version__ = "0.1.0"

__all__ = [
    "CLASSIFIERS",
    "ConfigError",
    "Lexeme",
    "LexemeKind",
    "Lexemizer",
    "LexemizeResult",
    "Rs2tsError",
    "RsEdition",
    "Strategy",
    "TranspileConfig",
    "TranspileError",
    "TranspileErrorKind",
    "TranspileResult",
    "TsMajor",
    "__version__",
    "from_dict",
    "from_json",
    "get_transpile_config",
    "lexemize",
    "reset_transpile_config",
    "set_transpile_config",
    "to_dict",
    "to_json",
    "transpile",
    "transpile_config_context",
]
