"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from minilex.lexer import KEYWORDS, Lexer
from minilex.tokens import TokenKind

# No lone-error operators and no decimal points: scans over this alphabet
# can never produce an ERROR token.
CLEAN_ALPHABET = "abxyz019=<>+-*/(){}[];, \t\n"

identifiers = st.from_regex(r"[a-z][a-z0-9]{0,8}", fullmatch=True)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        """Any string scans to completion."""
        lexer = Lexer(source)
        list(lexer.tokenize())
        assert lexer._pos == len(source)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_token_text_matches_source(self, source: str) -> None:
        """Every token's text is the source slice at its offset."""
        for token in Lexer(source).tokenize():
            assert token.text
            assert source[token.offset : token.offset + len(token.text)] == token.text

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_offsets_strictly_increase(self, source: str) -> None:
        offsets = [t.offset for t in Lexer(source).tokenize()]
        assert offsets == sorted(set(offsets))

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_every_error_has_diagnostic(self, source: str) -> None:
        lexer = Lexer(source)
        tokens = list(lexer.tokenize())
        errors = [t for t in tokens if t.kind is TokenKind.ERROR]
        assert all(t.diagnostic is not None for t in errors)
        assert len(errors) == len(lexer.diagnostics)
        assert all(t.diagnostic is None for t in tokens if t.kind is not TokenKind.ERROR)


class TestCleanInput:
    """Inputs built from valid characters only."""

    @given(st.text(alphabet=CLEAN_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_tokens_cover_non_whitespace(self, source: str) -> None:
        """Token texts, concatenated, equal the source minus whitespace."""
        tokens = list(Lexer(source).tokenize())

        assert all(t.kind is not TokenKind.ERROR for t in tokens)
        assert "".join(t.text for t in tokens) == "".join(source.split())


class TestWordInvariants:
    """Identifier/keyword classification."""

    @given(st.lists(identifiers, min_size=1, max_size=20))
    @settings(max_examples=100)
    def test_one_token_per_word(self, words: list[str]) -> None:
        """Each letter-led run is exactly one IDENTIFIER or KEYWORD."""
        tokens = list(Lexer(" ".join(words)).tokenize())

        assert [t.text for t in tokens] == words
        for token in tokens:
            expected = (
                TokenKind.KEYWORD if token.text in KEYWORDS else TokenKind.IDENTIFIER
            )
            assert token.kind is expected

    @given(st.sampled_from(sorted(KEYWORDS)), st.sampled_from(list("(;= \n")))
    def test_keyword_before_terminator(self, word: str, terminator: str) -> None:
        tokens = list(Lexer(word + terminator).tokenize())
        assert tokens[0].kind is TokenKind.KEYWORD
        assert tokens[0].text == word


class TestNumberInvariants:
    """Decimal literals."""

    @given(st.integers(min_value=0), st.integers(min_value=0))
    def test_single_point_is_one_number(self, whole: int, frac: int) -> None:
        text = f"{whole}.{frac}"
        tokens = list(Lexer(text).tokenize())
        assert [(t.kind, t.text) for t in tokens] == [(TokenKind.NUMBER, text)]

    @given(st.integers(min_value=0), st.integers(min_value=0), st.integers(min_value=0))
    def test_two_points_is_error(self, a: int, b: int, c: int) -> None:
        text = f"{a}.{b}.{c}"
        tokens = list(Lexer(text).tokenize())

        assert tokens[0].kind is TokenKind.ERROR
        assert tokens[-1].kind is TokenKind.NUMBER
        assert tokens[-1].text == str(c)
