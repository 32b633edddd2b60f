"""
jsonic - backend for a desktop JSON editing utility.

This package provides stateless operations over JSON text:
- Formatting and minifying
- Syntactic validation
- Saving to and loading from the filesystem
"""

__version__ = "1.0.0"

from .document import (
    DocumentService,
    DocumentStats,
    ValidationReport,
    ViewPair,
    check_json,
    document_stats,
    format_json,
    load_json,
    minify_json,
    render_views,
    save_json,
    validate_json,
)
from .errors import (
    ConfigError,
    DirectoryError,
    InvalidFormatError,
    JsonicError,
    ParseError,
    ReadError,
    WriteError,
)

__all__ = [
    # Document operations
    "format_json",
    "minify_json",
    "validate_json",
    "save_json",
    "load_json",
    "render_views",
    "document_stats",
    "check_json",
    "DocumentService",
    "DocumentStats",
    "ValidationReport",
    "ViewPair",
    # Errors
    "JsonicError",
    "ParseError",
    "InvalidFormatError",
    "DirectoryError",
    "WriteError",
    "ReadError",
    "ConfigError",
    # Version
    "__version__",
]
