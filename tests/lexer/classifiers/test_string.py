"""Tests for the string literal classifier."""

from __future__ import annotations

from rs2ts.lexer.classifiers import identify_string as identify


class TestQuotedString:
    """Strings between double quotes."""

    def test_typical(self) -> None:
        raw = b'abc"ok"xyz'
        assert identify(raw, 2) == 2  # c"ok
        assert identify(raw, 3) == 7  # "ok"
        assert identify(raw, 4) == 4  # ok"x

    def test_at_end_of_input(self) -> None:
        assert identify(b'"ok"', 0) == 4
        assert identify(b'""', 0) == 2

    def test_escaped_double_quote(self) -> None:
        raw = b'a"b\\"c"d'
        assert identify(raw, 0) == 0
        assert identify(raw, 1) == 7  # "b\"c"
        assert identify(raw, 2) == 2
        assert identify(raw, 3) == 3
        assert identify(raw, 4) == 7  # "c" with no lookbehind

    def test_escapes_are_not_validated(self) -> None:
        raw = b'a"\\0\\\\\\\\\\"\\\\\\n"z'
        assert identify(raw, 0) == 0
        assert identify(raw, 1) == 15
        assert identify(raw, 2) == 2
        assert identify(raw, 9) == 15
        assert identify(raw, 14) == 14  # "z has no end
        assert identify(b'"\\q\\w"', 0) == 6

    def test_unterminated(self) -> None:
        assert identify(b'"abc', 0) == 0
        assert identify(b'"abc\\"', 0) == 0
        assert identify(b'"', 0) == 0

    def test_multiline_and_non_ascii(self) -> None:
        raw = '"héllo\nwörld"'.encode()
        assert identify(raw, 0) == len(raw)


class TestRawString:
    """Strings like r#"..."#."""

    def test_basic(self) -> None:
        assert identify(b'-r"ok"-', 1) == 6
        assert identify(b'r#"ok"#', 0) == 7
        assert identify(b'abcr###"ok"###xyz', 3) == 14

    def test_balanced_hashes(self) -> None:
        raw = b'r##"ok"##'
        assert identify(raw, 0) == len(raw)

    def test_backslash_has_no_effect(self) -> None:
        assert identify(b'r"\\0\\n\\t"', 0) == 9
        assert identify(b'r#"\\X\\Y\\Z"#', 0) == 11
        assert identify(b'r"\\"', 0) == 4

    def test_quote_inside_hashed_raw_string(self) -> None:
        assert identify(b'r#"say "hi" now"#', 0) == 17
        assert identify(b'r##"a"#b"##', 0) == 11

    def test_extra_trailing_hashes_are_not_included(self) -> None:
        assert identify(b'r#"ok"##', 0) == 7

    def test_invalid(self) -> None:
        assert identify(b'r###"ok"##', 0) == 0
        assert identify(b'r##X#" X in leading hashes "###', 0) == 0
        assert identify(b'r###" X in trailing hashes "##X#', 0) == 0
        assert identify(b'r###" too few trailing hashes "##', 0) == 0
        assert identify(b'-r###" no trailing hashes "-', 1) == 1
        assert identify(b'r"unterminated', 0) == 0
        assert identify(b"r#", 0) == 0

    def test_identifier_starting_with_r(self) -> None:
        assert identify(b"rust", 0) == 0
        assert identify(b"r", 0) == 0


class TestNotAString:
    """Positions that cannot start a string."""

    def test_out_of_range(self) -> None:
        assert identify(b'"a"', 3) == 3
        assert identify(b'"a"', 30) == 30

    def test_mid_codepoint(self) -> None:
        raw = 'é"a"'.encode()
        assert identify(raw, 1) == 1
        assert identify(raw, 2) == 5
