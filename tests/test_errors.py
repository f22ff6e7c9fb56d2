"""Exception hierarchy and message formatting."""

import pytest

from chesscli.errors import (
    AllocationError,
    ChessCliError,
    FormatArgumentError,
    InvariantError,
    OptionsError,
    UnsupportedSpecifierError,
)


class TestHierarchy:
    """Every error derives from ChessCliError."""

    @pytest.mark.parametrize(
        "error",
        [
            InvariantError("x"),
            UnsupportedSpecifierError(b"d", b"%d"),
            FormatArgumentError("x"),
            AllocationError(64),
            OptionsError("x"),
        ],
    )
    def test_is_chesscli_error(self, error: Exception) -> None:
        assert isinstance(error, ChessCliError)

    def test_format_errors_are_defects(self) -> None:
        assert issubclass(UnsupportedSpecifierError, InvariantError)
        assert issubclass(FormatArgumentError, InvariantError)

    def test_allocation_error_is_memory_error(self) -> None:
        assert isinstance(AllocationError(64), MemoryError)

    def test_options_error_is_not_a_defect(self) -> None:
        assert not isinstance(OptionsError("x"), InvariantError)


class TestMessages:
    """Error messages carry their context."""

    def test_unsupported_specifier(self) -> None:
        err = UnsupportedSpecifierError(b"q", b"a %q b")
        assert err.specifier == b"q"
        assert "'%q'" in str(err)

    def test_lone_percent(self) -> None:
        err = UnsupportedSpecifierError(b"", b"50%")
        assert "lone '%'" in str(err)

    def test_allocation_with_limit(self) -> None:
        err = AllocationError(128, limit=64)
        assert str(err) == "cannot allocate 128 bytes (limit is 64)"

    def test_allocation_without_limit(self) -> None:
        assert str(AllocationError(128)) == "cannot allocate 128 bytes"

    def test_options_error_fields(self) -> None:
        err = OptionsError("invalid tag '-x'", tag="-x")
        assert err.message == "invalid tag '-x'"
        assert err.tag == "-x"
        assert err.value is None
        assert str(err) == "invalid tag '-x'"
