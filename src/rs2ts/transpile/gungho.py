"""The 'Gungho' strategy: readable TypeScript that mirrors the Rust input.

Lexemes are copied through in order, so line numbers are preserved. Rust
primitive type names are replaced by their TypeScript equivalents.
"""

from __future__ import annotations

from collections.abc import Sequence

from rs2ts.lexemes import Lexeme, LexemeKind
from rs2ts.stringbuilder import StringBuilder
from rs2ts.transpile.result import TranspileResult
from rs2ts.utils.logger import get_logger

logger = get_logger(__name__)

NUMERIC_TYPES = frozenset(
    {
        "i8",
        "i16",
        "i32",
        "i64",
        "i128",
        "isize",
        "u8",
        "u16",
        "u32",
        "u64",
        "u128",
        "usize",
        "f32",
        "f64",
    }
)

TYPE_REPLACEMENTS: dict[str, str] = {
    **{name: "Number" for name in NUMERIC_TYPES},
    "bool": "boolean",
}


class GunghoStrategy:
    """Favours readability over safety.

    Thread Safety:
        Stateless; one instance may be shared between threads.

    """

    name = "gungho"

    def transpile(self, lexemes: Sequence[Lexeme]) -> TranspileResult:
        """Transpile lexemes into TypeScript main lines.

        Example:
            >>> from rs2ts.lexer import lexemize
            >>> result = GunghoStrategy().transpile(
            ...     lexemize("const ROUGHLY_PI: f32 = 3.14;").lexemes)
            >>> result.main_lines
            ['const ROUGHLY_PI: Number = 3.14;']
        """
        sb = StringBuilder()
        unrecognized = 0
        for lexeme in lexemes:
            if lexeme.kind is LexemeKind.IDENTIFIER:
                sb.append(TYPE_REPLACEMENTS.get(lexeme.text, lexeme.text))
            else:
                if lexeme.kind is LexemeKind.UNRECOGNIZED:
                    unrecognized += 1
                sb.append(lexeme.text)

        if unrecognized:
            logger.debug("Copied %d unrecognized lexemes verbatim", unrecognized)

        result = TranspileResult()
        for line in sb.build_lines():
            result.add_main_line(line)
        return result
