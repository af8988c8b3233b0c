"""Tests for JSON serialization of lexemize results."""

import json

import pytest

from rs2ts import LexemeKind, from_dict, from_json, lexemize, to_dict, to_json


class TestToDict:
    def test_shape(self) -> None:
        data = to_dict(lexemize("x\n"))
        assert data == {
            "lexemes": [
                {
                    "kind": "IDENTIFIER",
                    "pos": 0,
                    "end_pos": 1,
                    "text": "x",
                    "line_number": 0,
                    "column": 0,
                },
                {
                    "kind": "WHITESPACE",
                    "pos": 1,
                    "end_pos": 2,
                    "text": "\n",
                    "line_number": 0,
                    "column": 1,
                },
            ],
            "end_pos": 2,
            "end_line_number": 1,
            "end_column": 0,
        }


class TestJson:
    def test_roundtrip(self) -> None:
        result = lexemize("fn main() {\n    let s = r#\"日本\"#; €\n}")
        assert from_json(to_json(result)) == result

    def test_deterministic(self) -> None:
        source = "let x = 0xFF;"
        assert to_json(lexemize(source)) == to_json(lexemize(source))

    def test_keys_sorted_and_unicode_kept(self) -> None:
        text = to_json(lexemize("é"))
        assert "é" in text
        assert list(json.loads(text)) == ["end_column", "end_line_number", "end_pos", "lexemes"]

    def test_indent(self) -> None:
        assert "\n  " in to_json(lexemize("a"), indent=2)

    def test_optional_location_fields(self) -> None:
        lexeme = {"kind": "NUMBER", "pos": 0, "end_pos": 2, "text": "42"}
        data = {"lexemes": [lexeme], "end_pos": 2}
        result = from_dict(data)
        assert result.lexemes[0].kind is LexemeKind.NUMBER
        assert result.end_line_number == 0

    def test_unknown_kind(self) -> None:
        lexeme = {"kind": "KEYWORD", "pos": 0, "end_pos": 2, "text": "fn"}
        data = {"lexemes": [lexeme], "end_pos": 2}
        with pytest.raises(KeyError):
            from_dict(data)
