"""
Custom error types and exit codes for jsonic.
"""

from typing import Optional


class JsonicError(Exception):
    """Base exception for jsonic errors."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(JsonicError):
    """Error loading or parsing configuration."""

    exit_code = 2


class ParseError(JsonicError):
    """Text handed to format or minify is not valid JSON."""

    exit_code = 3

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        super().__init__(message)


class DirectoryError(JsonicError):
    """Parent directory of a save target could not be created."""

    exit_code = 4


class WriteError(JsonicError):
    """Writing a document to disk failed."""

    exit_code = 4


class ReadError(JsonicError):
    """Reading a document from disk failed."""

    exit_code = 4


class InvalidFormatError(JsonicError):
    """Text being saved or loaded is not valid JSON."""

    exit_code = 5


# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_PARSE_ERROR = 3
EXIT_IO_ERROR = 4
EXIT_INVALID_FORMAT = 5

