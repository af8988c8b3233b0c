"""Lexeme serialization: JSON round-trip for LexemizeResult.

Converts lexemize results to/from JSON-compatible dicts. Useful for:
- Feeding lexemes to tools written in other languages
- Snapshot tests and debugging

All output is deterministic (sorted keys).

Example:
    from rs2ts import lexemize
    from rs2ts.serialization import to_json, from_json

    result = lexemize("let x = 1;")
    restored = from_json(to_json(result))
    assert result == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from rs2ts.lexemes import Lexeme, LexemeKind, LexemizeResult


def _lexeme_to_dict(lexeme: Lexeme) -> dict[str, Any]:
    return {
        "kind": lexeme.kind.name,
        "pos": lexeme.pos,
        "end_pos": lexeme.end_pos,
        "text": lexeme.text,
        "line_number": lexeme.line_number,
        "column": lexeme.column,
    }


def _lexeme_from_dict(data: dict[str, Any]) -> Lexeme:
    return Lexeme(
        kind=LexemeKind[data["kind"]],
        pos=data["pos"],
        text=data["text"],
        end_pos=data["end_pos"],
        line_number=data.get("line_number", 0),
        column=data.get("column", 0),
    )


def to_dict(result: LexemizeResult) -> dict[str, Any]:
    """Convert a LexemizeResult to a JSON-compatible dict."""
    return {
        "lexemes": [_lexeme_to_dict(lexeme) for lexeme in result.lexemes],
        "end_pos": result.end_pos,
        "end_line_number": result.end_line_number,
        "end_column": result.end_column,
    }


def from_dict(data: dict[str, Any]) -> LexemizeResult:
    """Rebuild a LexemizeResult from a dict made by ``to_dict``.

    Raises:
        KeyError: If a required key or a lexeme kind name is missing.
    """
    return LexemizeResult(
        lexemes=tuple(_lexeme_from_dict(item) for item in data["lexemes"]),
        end_pos=data["end_pos"],
        end_line_number=data.get("end_line_number", 0),
        end_column=data.get("end_column", 0),
    )


def to_json(result: LexemizeResult, *, indent: int | None = None) -> str:
    """Serialize a LexemizeResult to a JSON string.

    Args:
        result: The result to serialize
        indent: JSON indent level (None for compact)

    Returns:
        JSON string with sorted keys.
    """
    return json.dumps(to_dict(result), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(json_str: str) -> LexemizeResult:
    """Deserialize a JSON string into a LexemizeResult."""
    return from_dict(json.loads(json_str))
