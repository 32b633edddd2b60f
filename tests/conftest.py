"""Test configuration and fixtures for jsonic tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add src to path for development testing
_src_dir = Path(__file__).parent.parent / "src"
if _src_dir.exists():
    sys.path.insert(0, str(_src_dir))


# ==============================================================================
# Sample documents
# ==============================================================================

NESTED_DOCUMENT = '{"name":"jsonic","tags":["a","b"],"meta":{"count":2,"ok":true,"none":null}}'

VALID_DOCUMENTS = [
    "{}",
    "[]",
    "null",
    "true",
    "0",
    "-1.5e10",
    '"text"',
    '  {"a": 1}  ',
    '{"a":{"b":{"c":[1,2,{"d":null}]}}}',
    '{"unicode":"Grüße ✓"}',
    NESTED_DOCUMENT,
]

INVALID_DOCUMENTS = [
    "",
    "   ",
    "{invalid",
    "{'a': 1}",
    '{"a": 1,}',
    "[1, 2",
    '{"a": 1} trailing',
    "NaN",
    "[Infinity]",
    '{"a": -Infinity}',
    "undefined",
    "1e400",
    "[-1e400]",
    '{"big": 1.5e309}',
]

# Valid documents whose numbers or escapes need care when re-serialized
EDGE_DOCUMENTS = [
    "1.0",
    "1e2",
    "-0",
    "-0.0",
    "1e308",
    "123456789012345678901234567890",
    '"\\ud800"',
    '["\\udfff", {"\\ud83d": 1}]',
    '"\\ud83d\\ude00"',
    '"tab\\tnew\\nline \\"quoted\\" \\\\ \\/"',
    '"\\u0000\\u001f"',
]


# ==============================================================================
# Shared pytest fixtures
# ==============================================================================

@pytest.fixture
def nested_document() -> str:
    """Return a compact document with nested objects and arrays."""
    return NESTED_DOCUMENT


@pytest.fixture
def write_text(tmp_path):
    """Return a helper that writes raw bytes/text to a file under tmp_path."""
    def _write(name: str, content) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Restore root logger handlers after tests that configure logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    package_level = logging.getLogger("jsonic").level
    yield
    logging.getLogger("jsonic").setLevel(package_level)
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
