"""
Logging configuration for jsonic.

The `jsonic` command configures the root logger once, from two sources:
- the [logging] table of jsonic.toml (level name, optional log file)
- the --quiet / --verbose / --debug flags, which beat the config level

Library code only ever calls logging.getLogger(__name__).
"""

import logging
import sys
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = "%(message)s"
DETAILED_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def level_from_name(name: str) -> int:
    """
    Convert a level name from the config file to a logging constant.

    Args:
        name: Level name, case-insensitive (e.g. "info").

    Returns:
        The matching logging level.

    Raises:
        ValueError: If the name is not one of LEVEL_NAMES.
    """
    normalized = str(name).strip().upper()
    if normalized not in LEVEL_NAMES:
        raise ValueError(f"Unknown logging level {name!r}; expected one of {', '.join(LEVEL_NAMES)}")
    return getattr(logging, normalized)


def get_log_level_from_flags(
    quiet: bool = False,
    verbose: bool = False,
    debug: bool = False,
    default: int = logging.WARNING,
) -> int:
    """
    Pick the log level for a run.

    --debug wins over everything, --quiet wins over --verbose, and with no
    flag at all the configured default applies.
    """
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return default


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    fmt = DETAILED_FORMAT if level <= logging.DEBUG else CONSOLE_FORMAT
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(log_file: Path, level: int) -> Optional[logging.Handler]:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as e:
        # A read-only location must not stop the command itself
        logger.debug(f"Could not set up file logging to {log_file}: {e}")
        return None
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
    return handler


def configure_logging(level: int = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """
    Replace the root logger's handlers with a stderr handler and, when
    requested, a UTF-8 file handler. Safe to call more than once.

    Args:
        level: The logging level for both handlers.
        log_file: Optional log file; its directory is created if missing.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    root_logger.addHandler(_console_handler(level))
    if log_file is not None:
        file_handler = _file_handler(log_file, level)
        if file_handler is not None:
            root_logger.addHandler(file_handler)

    logging.getLogger("jsonic").setLevel(level)


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    default_level: int = logging.WARNING,
) -> None:
    """Configure logging from CLI flags, falling back to the configured level."""
    level = get_log_level_from_flags(quiet=quiet, verbose=verbose, debug=debug, default=default_level)
    configure_logging(level=level, log_file=log_file)
