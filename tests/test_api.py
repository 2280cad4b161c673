"""Tests for the top-level API."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

import pytest

from minilex import SAMPLE_PROGRAM, Lexer, Token, TokenKind, scan, tokenize


class TestScan:
    def test_is_lazy_iterator(self) -> None:
        stream = scan("a b c")
        assert isinstance(stream, Iterator)
        assert next(stream).text == "a"

    def test_rescan_by_calling_again(self) -> None:
        first = [t.text for t in scan(SAMPLE_PROGRAM)]
        second = [t.text for t in scan(SAMPLE_PROGRAM)]
        assert first == second
        assert len(first) == 31

    def test_source_file_propagates(self) -> None:
        token = next(scan("@", source_file="x.src"))
        assert token.diagnostic is not None
        assert token.diagnostic.source_file == "x.src"
        assert token.location.source_file == "x.src"


class TestTokenize:
    def test_returns_list(self) -> None:
        tokens = tokenize("pi * r")
        assert [(t.kind, t.text) for t in tokens] == [
            (TokenKind.KEYWORD, "pi"),
            (TokenKind.OPERATOR, "*"),
            (TokenKind.IDENTIFIER, "r"),
        ]

    def test_warns_on_errors(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="minilex"):
            tokenize("a & b @", source_file="bad.src")

        messages = [r.getMessage() for r in caplog.records if r.name == "minilex"]
        assert messages == ["bad.src: 2 lexical error(s) in 7 characters"]

    def test_silent_on_clean_input(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="minilex"):
            tokenize(SAMPLE_PROGRAM)
        assert not caplog.records


class TestTokens:
    def test_frozen(self) -> None:
        token = Token(TokenKind.NUMBER, "5")
        with pytest.raises(AttributeError):
            token.text = "6"  # type: ignore[misc]

    def test_equality_ignores_location_cache(self) -> None:
        a = Token(TokenKind.IDENTIFIER, "x")
        b = Token(TokenKind.IDENTIFIER, "x")
        _ = a.location
        assert a == b

    def test_repr(self) -> None:
        assert repr(Token(TokenKind.OPERATOR, "&&", 3, 1, 4)) == "Token(OPERATOR, '&&', 1:4)"


class TestConcurrentScans:
    """Each Lexer owns its state; distinct inputs scan independently."""

    def test_parallel_matches_sequential(self) -> None:
        sources = [f"x{i} = {i}.5 && y{i} >= {i};" for i in range(50)]
        expected = [[t.text for t in Lexer(s).tokenize()] for s in sources]

        def run(source: str) -> list[str]:
            return [t.text for t in Lexer(source).tokenize()]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, sources))

        assert results == expected
