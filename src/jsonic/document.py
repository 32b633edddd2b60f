"""
Document operations for jsonic.

Provides stateless functions over JSON text:
- Formatting (two-space indentation) and minifying
- Syntactic validation, as a boolean or as a diagnostic report
- Saving text to disk and loading it back verbatim

No parsed value outlives a call; every operation re-parses its input.
"""

import json
import logging
import math
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .errors import (
    DirectoryError,
    InvalidFormatError,
    ParseError,
    ReadError,
    WriteError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

INDENT = 2
MINIFIED_SEPARATORS = (",", ":")
DIRECTORY_MODE = 0o755
ENCODING = "utf-8"

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


@dataclass(frozen=True)
class ViewPair:
    """Formatted and minified renderings of one document."""

    formatted: str
    minified: str


@dataclass(frozen=True)
class DocumentStats:
    """Character and line counts of a text, as shown in an editor status bar."""

    characters: int
    lines: int


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of checking a text, with the parser diagnostic when invalid."""

    valid: bool
    empty: bool = False
    message: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "empty": self.empty,
            "message": self.message,
            "line": self.line,
            "column": self.column,
        }


def _reject_constant(name: str) -> Any:
    # Python accepts NaN/Infinity by default; JSON does not.
    raise ValueError(f"Invalid constant {name!r}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} out of range")
    return value


def _parse(text: str) -> Any:
    """
    Parse JSON text into a Python value.

    Args:
        text: The JSON text.

    Returns:
        The parsed value. Object key order follows the input.

    Raises:
        ParseError: If the text is not valid JSON, including numbers too
            large to represent as a finite float.
    """
    if not isinstance(text, str):
        raise ParseError(f"invalid JSON: expected str, got {type(text).__name__}")

    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e}", line=e.lineno, column=e.colno) from e
    except ValueError as e:
        raise ParseError(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise ParseError("invalid JSON: exceeded max nesting depth") from e


def _escape_lone_surrogates(text: str) -> str:
    # Only string contents can hold them; \uXXXX re-parses to the same value.
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def _dump_formatted(value: Any) -> str:
    return _escape_lone_surrogates(json.dumps(value, indent=INDENT, ensure_ascii=False))


def _dump_minified(value: Any) -> str:
    return _escape_lone_surrogates(
        json.dumps(value, separators=MINIFIED_SEPARATORS, ensure_ascii=False)
    )


def format_json(text: str) -> str:
    """
    Re-serialize JSON text with two-space indentation.

    Args:
        text: The JSON text to format.

    Returns:
        The formatted text.

    Raises:
        ParseError: If the text is not valid JSON.
    """
    value = _parse(text)
    try:
        formatted = _dump_formatted(value)
    except RecursionError as e:
        raise ParseError("formatting error: exceeded max nesting depth") from e
    logger.debug(f"Formatted {len(text)} -> {len(formatted)} characters")
    return formatted


def minify_json(text: str) -> str:
    """
    Re-serialize JSON text without any inserted whitespace.

    Args:
        text: The JSON text to minify.

    Returns:
        The minified text.

    Raises:
        ParseError: If the text is not valid JSON.
    """
    value = _parse(text)
    try:
        minified = _dump_minified(value)
    except RecursionError as e:
        raise ParseError("minifying error: exceeded max nesting depth") from e
    logger.debug(f"Minified {len(text)} -> {len(minified)} characters")
    return minified


def validate_json(text: str) -> bool:
    """Return True if the text parses as JSON. Never raises."""
    try:
        _parse(text)
    except ParseError:
        return False
    return True


def render_views(text: str) -> ViewPair:
    """
    Produce both the formatted and the minified rendering from a single parse.

    Raises:
        ParseError: If the text is not valid JSON.
    """
    value = _parse(text)
    try:
        return ViewPair(formatted=_dump_formatted(value), minified=_dump_minified(value))
    except RecursionError as e:
        raise ParseError("formatting error: exceeded max nesting depth") from e


def document_stats(text: str) -> DocumentStats:
    """Count characters and lines. Empty text still counts as one line."""
    return DocumentStats(characters=len(text), lines=text.count("\n") + 1)


def check_json(text: str) -> ValidationReport:
    """
    Check a text and describe the result.

    Blank text is reported as valid and empty, which is how the editor
    treats a cleared input. Anything else is valid exactly when
    validate_json() would say so.

    Args:
        text: The text to check.

    Returns:
        A ValidationReport; invalid reports carry the parser message and
        the 1-based line and column of the error when known.
    """
    if isinstance(text, str) and not text.strip():
        return ValidationReport(valid=True, empty=True)

    try:
        _parse(text)
    except ParseError as e:
        return ValidationReport(valid=False, message=e.message, line=e.line, column=e.column)
    return ValidationReport(valid=True)


def save_json(text: str, path: PathLike) -> None:
    """
    Write JSON text to a file, verbatim.

    Missing parent directories are created first, then the text is
    validated, then the file is truncated and written. There is no atomic
    replace: a crash mid-write can leave a partial file.

    Args:
        text: The JSON text to save.
        path: Destination file path.

    Raises:
        DirectoryError: If a parent directory cannot be created.
        InvalidFormatError: If the text is not valid JSON or cannot be
            encoded as UTF-8. Nothing is written.
        WriteError: If writing the file fails.
    """
    path = Path(path)

    try:
        path.parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(f"failed to create directory {path.parent}: {e}") from e

    try:
        _parse(text)
    except ParseError as e:
        raise InvalidFormatError(f"invalid JSON format: {e.message}") from e

    try:
        data = text.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise InvalidFormatError(f"invalid JSON format: cannot encode as UTF-8: {e}") from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(f"failed to write file {path}: {e}") from e

    logger.debug(f"Saved {len(text)} characters to {path}")


def load_json(path: PathLike) -> str:
    """
    Read JSON text from a file, verbatim.

    Args:
        path: Source file path.

    Returns:
        The file contents, unmodified.

    Raises:
        ReadError: If the file does not exist or cannot be read.
        InvalidFormatError: If the contents are not valid UTF-8 JSON.
    """
    path = Path(path)

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise ReadError(f"failed to read file {path}: {e}") from e

    try:
        text = data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidFormatError(f"file contains invalid JSON: {e}") from e

    try:
        _parse(text)
    except ParseError as e:
        raise InvalidFormatError(f"file contains invalid JSON: {e.message}") from e

    logger.debug(f"Loaded {len(text)} characters from {path}")
    return text


class DocumentService:
    """
    Stateless façade over the document operations.

    Host UIs that bind one object and call its methods get the same
    behavior as the module-level functions.
    """

    def format(self, text: str) -> str:
        return format_json(text)

    def minify(self, text: str) -> str:
        return minify_json(text)

    def validate(self, text: str) -> bool:
        return validate_json(text)

    def save(self, text: str, path: PathLike) -> None:
        save_json(text, path)

    def load(self, path: PathLike) -> str:
        return load_json(path)

    def views(self, text: str) -> ViewPair:
        return render_views(text)

    def stats(self, text: str) -> DocumentStats:
        return document_stats(text)

    def check(self, text: str) -> ValidationReport:
        return check_json(text)
