"""Tests for diagnostics and exception classes."""

import pytest

from minilex.errors import Diagnostic, ErrorKind, LexError, MinilexError


def make_diagnostic(**overrides) -> Diagnostic:
    fields = dict(
        kind=ErrorKind.MALFORMED_OPERATOR,
        message="Invalid input - unrecognized operator '!'.",
        char="!",
        offset=4,
        lineno=2,
        col=3,
    )
    fields.update(overrides)
    return Diagnostic(**fields)


class TestDiagnostic:
    def test_location(self) -> None:
        loc = make_diagnostic().location
        assert (loc.lineno, loc.col_offset, loc.offset, loc.end_offset) == (2, 3, 4, 5)

    def test_str_without_file(self) -> None:
        assert str(make_diagnostic()) == "2:3 Invalid input - unrecognized operator '!'."

    def test_str_with_file(self) -> None:
        assert str(make_diagnostic(source_file="a.src")).startswith("a.src:2:3 ")


class TestLexError:
    def test_is_minilex_error(self) -> None:
        with pytest.raises(MinilexError):
            raise LexError(make_diagnostic())

    def test_attributes(self) -> None:
        diagnostic = make_diagnostic(source_file="a.src")
        err = LexError(diagnostic)
        assert err.diagnostic is diagnostic
        assert err.lineno == 2
        assert err.col_offset == 3
        assert err.source_file == "a.src"
        assert str(err) == "a.src:2:3 Invalid input - unrecognized operator '!'."
