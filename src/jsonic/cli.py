"""
Command-line interface for jsonic.

Provides the `jsonic` command with the following subcommands:
- format: Pretty-print JSON with two-space indentation
- minify: Strip all insignificant whitespace from JSON
- validate: Check whether text is well-formed JSON
- save: Validate JSON text and write it to a file
- load: Read a JSON file and print it verbatim
- stats: Show character and line counts
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config, load_config
from .document import (
    check_json,
    document_stats,
    format_json,
    load_json,
    minify_json,
    save_json,
)
from .errors import (
    EXIT_ERROR,
    EXIT_INVALID_FORMAT,
    EXIT_SUCCESS,
    JsonicError,
    ReadError,
    WriteError,
)
from .logging_config import setup_logging
from .paths import resolve_document_path

logger = logging.getLogger(__name__)


def _get_config(args: argparse.Namespace) -> Config:
    config = getattr(args, "_config", None)
    if config is None:
        config = Config()
    return config


def _documents_base(args: argparse.Namespace) -> Optional[Path]:
    config = _get_config(args)
    if config.paths.documents:
        return Path(config.paths.documents)
    return None


def _read_input(source: Optional[str]) -> str:
    """
    Read input text from a file, or from stdin when no file (or "-") is given.

    Both are read as bytes and decoded as UTF-8, so line endings survive
    untouched. The content is not required to be valid JSON here, that is
    up to the command.

    Raises:
        ReadError: If the input cannot be read or is not UTF-8.
    """
    if source is None or source == "-":
        name = "stdin"
        try:
            data = sys.stdin.buffer.read()
        except OSError as e:
            raise ReadError(f"failed to read {name}: {e}") from e
    else:
        name = Path(source)
        try:
            with open(name, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ReadError(f"failed to read file {name}: {e}") from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReadError(f"failed to decode {name} as UTF-8: {e}") from e


def _write_output(text: str) -> None:
    if not text.endswith("\n"):
        text += "\n"
    try:
        sys.stdout.write(text)
    except UnicodeEncodeError as e:
        raise WriteError(f"cannot write output in {sys.stdout.encoding}: {e}") from e


def format_command(args: argparse.Namespace) -> int:
    """Execute the format command."""
    _write_output(format_json(_read_input(args.file)))
    return EXIT_SUCCESS


def minify_command(args: argparse.Namespace) -> int:
    """Execute the minify command."""
    _write_output(minify_json(_read_input(args.file)))
    return EXIT_SUCCESS


def validate_command(args: argparse.Namespace) -> int:
    """
    Execute the validate command.

    Returns:
        EXIT_SUCCESS when the input is valid, EXIT_INVALID_FORMAT otherwise.
    """
    text = _read_input(args.file)
    report = check_json(text)

    if args.format == "json":
        print(json.dumps(report.to_dict(), indent=2))
    elif report.empty:
        print("Empty")
    elif report.valid:
        print("Valid")
    else:
        location = ""
        if report.line is not None:
            location = f" (line {report.line}, column {report.column})"
        print(f"Invalid{location}: {report.message}")

    return EXIT_SUCCESS if report.valid else EXIT_INVALID_FORMAT


def save_command(args: argparse.Namespace) -> int:
    """Execute the save command."""
    text = _read_input(args.input)
    target = resolve_document_path(args.path, _documents_base(args))

    save_json(text, target)
    logger.info(f"Saved {target}")
    return EXIT_SUCCESS


def load_command(args: argparse.Namespace) -> int:
    """Execute the load command."""
    source = resolve_document_path(args.path, _documents_base(args))

    _write_output(load_json(source))
    logger.info(f"Loaded {source}")
    return EXIT_SUCCESS


def stats_command(args: argparse.Namespace) -> int:
    """Execute the stats command."""
    stats = document_stats(_read_input(args.file))

    if args.format == "json":
        print(json.dumps({"characters": stats.characters, "lines": stats.lines}, indent=2))
    else:
        print(f"{stats.characters} characters, {stats.lines} lines")
    return EXIT_SUCCESS


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="jsonic",
        description="Format, minify, validate, save and load JSON documents.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"jsonic {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output (INFO level)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level, shows tracebacks)"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors"
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        type=str,
        help="Path to a jsonic.toml config file"
    )

    subparsers = parser.add_subparsers(dest="command", title="commands")

    format_parser = subparsers.add_parser(
        "format",
        help="Pretty-print JSON with two-space indentation",
        description="Parse JSON and re-serialize it with two-space indentation."
    )
    format_parser.add_argument(
        "file",
        nargs="?",
        help="Input file (default: stdin)"
    )
    format_parser.set_defaults(func=format_command)

    minify_parser = subparsers.add_parser(
        "minify",
        help="Remove all insignificant whitespace",
        description="Parse JSON and re-serialize it without whitespace."
    )
    minify_parser.add_argument(
        "file",
        nargs="?",
        help="Input file (default: stdin)"
    )
    minify_parser.set_defaults(func=minify_command)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that the input is well-formed JSON",
        description="Check syntax only. Exits 0 when valid and 5 when invalid."
    )
    validate_parser.add_argument(
        "file",
        nargs="?",
        help="Input file (default: stdin)"
    )
    validate_parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    validate_parser.set_defaults(func=validate_command)

    save_parser = subparsers.add_parser(
        "save",
        help="Validate JSON text and write it to a file",
        description="Write the input verbatim to PATH, creating parent directories."
    )
    save_parser.add_argument(
        "path",
        help="Destination file (relative paths use paths.documents from config)"
    )
    save_parser.add_argument(
        "--input", "-i",
        type=str,
        help="Input file (default: stdin)"
    )
    save_parser.set_defaults(func=save_command)

    load_parser = subparsers.add_parser(
        "load",
        help="Print a JSON file verbatim after validating it",
        description="Read PATH, check that it holds valid JSON, and print it unchanged."
    )
    load_parser.add_argument(
        "path",
        help="Source file (relative paths use paths.documents from config)"
    )
    load_parser.set_defaults(func=load_command)

    stats_parser = subparsers.add_parser(
        "stats",
        help="Show character and line counts",
        description="Count characters and lines of the input."
    )
    stats_parser.add_argument(
        "file",
        nargs="?",
        help="Input file (default: stdin)"
    )
    stats_parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    stats_parser.set_defaults(func=stats_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    config_path = Path(args.config_file) if args.config_file else None
    try:
        config = load_config(config_path)
    except JsonicError as e:
        setup_logging(verbose=args.verbose, debug=args.debug, quiet=args.quiet)
        logger.error(f"Config error: {e}")
        return e.exit_code
    args._config = config

    log_file = None
    if config.logging.log_file:
        log_file = Path(config.logging.log_file).expanduser()
        if not log_file.is_absolute() and config.config_path is not None:
            log_file = config.config_path.parent / log_file

    setup_logging(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        log_file=log_file,
        default_level=config.logging.level_value,
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_SUCCESS

    try:
        return args.func(args)
    except JsonicError as e:
        logger.error(f"Error: {e}", exc_info=args.debug)
        return e.exit_code
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return EXIT_ERROR


def main_cli() -> None:
    """
    CLI entry point for setuptools console_scripts.

    Calls main() and exits with the returned code.
    """
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
