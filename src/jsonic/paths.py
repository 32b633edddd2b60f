"""
Path resolution helpers for jsonic.
"""

import os
from pathlib import Path
from typing import Optional, Union


def resolve_document_path(path: Union[str, os.PathLike], base: Optional[Path] = None) -> Path:
    """
    Resolve a document path, optionally relative to a base directory.

    Args:
        path: The path to resolve. A leading ~ is expanded.
        base: Base directory for relative paths. Defaults to the current directory.

    Returns:
        Absolute path.
    """
    path = Path(path).expanduser()

    if path.is_absolute():
        return path

    if base is None:
        base = Path.cwd()

    return Path(base).expanduser().absolute() / path
