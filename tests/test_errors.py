"""
Tests for jsonic.errors module.
"""

import pytest

from jsonic.errors import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_INVALID_FORMAT,
    EXIT_IO_ERROR,
    EXIT_PARSE_ERROR,
    ConfigError,
    DirectoryError,
    InvalidFormatError,
    JsonicError,
    ParseError,
    ReadError,
    WriteError,
)


class TestJsonicError:
    """Tests for the error hierarchy."""

    def test_message(self):
        """Test that the message is kept and used as str()."""
        error = JsonicError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"
        assert error.exit_code == EXIT_ERROR

    @pytest.mark.parametrize(
        "error_cls, exit_code",
        [
            (ConfigError, EXIT_CONFIG_ERROR),
            (ParseError, EXIT_PARSE_ERROR),
            (DirectoryError, EXIT_IO_ERROR),
            (WriteError, EXIT_IO_ERROR),
            (ReadError, EXIT_IO_ERROR),
            (InvalidFormatError, EXIT_INVALID_FORMAT),
        ],
    )
    def test_subclass_exit_codes(self, error_cls, exit_code):
        """Test that each error kind maps to its exit code."""
        error = error_cls("boom")
        assert isinstance(error, JsonicError)
        assert error.exit_code == exit_code

    def test_parse_error_location(self):
        """Test that ParseError carries an optional location."""
        assert ParseError("bad").line is None
        error = ParseError("bad", line=4, column=7)
        assert (error.line, error.column) == (4, 7)
