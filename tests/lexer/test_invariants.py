"""Property-based tests for lexemizer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from rs2ts.lexemes import LexemeKind
from rs2ts.lexer import CLASSIFIERS, lexemize
from rs2ts.lexer.position import is_char_boundary

# Text without lone surrogates, so every string has a UTF-8 encoding
source_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=500)

# Biased towards the characters that start or end lexemes
rust_text = st.text(alphabet="abr_019xoe.+-'\"\\#/*{}<>=!u \n\t", max_size=200)


class TestCoverage:
    """Every byte of the source belongs to exactly one lexeme."""

    @given(source_text)
    @settings(max_examples=200)
    def test_concatenation_reproduces_source(self, source: str) -> None:
        """Joining the lexeme texts gives back the source."""
        result = lexemize(source)
        assert result.text == source
        assert result.end_pos == len(source.encode())

    @given(rust_text)
    @settings(max_examples=200)
    def test_lexemes_are_contiguous(self, source: str) -> None:
        """Each lexeme starts where the previous one ended."""
        result = lexemize(source)
        pos = 0
        for lexeme in result:
            assert lexeme.pos == pos
            assert lexeme.end_pos > lexeme.pos, "Lexemes are never empty"
            pos = lexeme.end_pos
        assert pos == result.end_pos

    @given(st.binary(max_size=300))
    @settings(max_examples=200)
    def test_arbitrary_bytes(self, raw: bytes) -> None:
        """Invalid UTF-8 never crashes and is recoverable from the lexemes."""
        result = lexemize(raw)
        assert result.text.encode("utf-8", "surrogateescape") == raw
        assert result.end_pos == len(raw)

    @given(rust_text)
    @settings(max_examples=100)
    def test_unrecognized_runs_are_merged(self, source: str) -> None:
        """Two Unrecognized lexemes are never adjacent."""
        kinds = [lexeme.kind for lexeme in lexemize(source)]
        for left, right in zip(kinds, kinds[1:]):
            assert not (left is LexemeKind.UNRECOGNIZED and right is LexemeKind.UNRECOGNIZED)


class TestClassifiers:
    """Classifier contract: a pure function returning pos or a later offset."""

    @given(st.binary(max_size=64), st.data())
    @settings(max_examples=300)
    def test_never_crash(self, raw: bytes, data: st.DataObject) -> None:
        """Any offset, valid or not, is answered without raising."""
        pos = data.draw(st.integers(min_value=-2, max_value=len(raw) + 2))
        for _, identify in CLASSIFIERS:
            next_pos = identify(raw, pos)
            assert next_pos == pos or pos < next_pos <= len(raw)

    @given(rust_text)
    @settings(max_examples=100)
    def test_first_match_wins(self, source: str) -> None:
        """Each lexeme is what the first accepting classifier found."""
        raw = source.encode()
        for lexeme in lexemize(raw):
            if lexeme.kind is LexemeKind.UNRECOGNIZED:
                continue
            for kind, identify in CLASSIFIERS:
                next_pos = identify(raw, lexeme.pos)
                if kind is lexeme.kind:
                    assert next_pos == lexeme.end_pos
                    break
                assert next_pos == lexeme.pos

    @given(rust_text)
    @settings(max_examples=100)
    def test_unrecognized_bytes_match_nothing(self, source: str) -> None:
        """No classifier accepts a character boundary inside an Unrecognized run."""
        raw = source.encode()
        for lexeme in lexemize(raw).of_kind(LexemeKind.UNRECOGNIZED):
            for pos in range(lexeme.pos, lexeme.end_pos):
                if not is_char_boundary(raw, pos):
                    continue
                for _, identify in CLASSIFIERS:
                    assert identify(raw, pos) == pos


class TestIdempotence:
    """A lexeme's text scanned on its own gives back the same lexeme."""

    @given(rust_text)
    @settings(max_examples=200)
    def test_rescan_single_lexeme(self, source: str) -> None:
        for lexeme in lexemize(source):
            if lexeme.kind is LexemeKind.UNRECOGNIZED:
                continue
            rescanned = lexemize(lexeme.text).lexemes
            assert len(rescanned) == 1, f"{lexeme!r} split into {rescanned!r}"
            assert rescanned[0].kind is lexeme.kind
            assert rescanned[0].text == lexeme.text


class TestDeterminism:
    """Same input, same output."""

    @given(source_text)
    @settings(max_examples=100)
    def test_repeatable(self, source: str) -> None:
        assert lexemize(source) == lexemize(source)

    @given(source_text)
    @settings(max_examples=100)
    def test_str_and_bytes_agree(self, source: str) -> None:
        """Scanning text or its UTF-8 bytes gives the same lexemes."""
        assert lexemize(source) == lexemize(source.encode())
