"""Command-line interface.

Compiles one ``.publ`` file. The output format follows the destination
suffix (``.html`` or ``.txt``); without ``-o`` the output goes next to the
input with an ``.html`` suffix.

    publication notes.publ
    publication notes.publ -o notes.txt --bold --list-bullet "-"

Exit codes: 0 on success, 1 when reading, parsing or writing fails,
2 for command-line errors (wrong source suffix, unknown output format).
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from publication import __version__
from publication.config import ParseConfig, load_config
from publication.emitters import emitter_for_path
from publication.errors import PublicationError
from publication.parser import Parser
from publication.utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_SUFFIX = ".publ"
DEFAULT_OUTPUT_SUFFIX = ".html"

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2

DESCRIPTION = """
    Compile a Publication (.publ) document to HTML or plain text.
"""


def build_argument_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(prog="publication", description=DESCRIPTION)
    argument_parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    argument_parser.add_argument("input", type=Path, metavar="INPUT.publ", help="source document")
    argument_parser.add_argument(
        "-o", "--out",
        type=Path,
        default=None,
        help="destination file; its suffix selects the format (default: INPUT.html)",
    )
    argument_parser.add_argument(
        "--bold",
        dest="enable_bold",
        action="store_true",
        default=None,
        help="enable *bold* emphasis",
    )
    argument_parser.add_argument(
        "--italics",
        dest="enable_italics",
        action="store_true",
        default=None,
        help="enable /italic/ emphasis",
    )
    argument_parser.add_argument(
        "--list-bullet",
        default=None,
        metavar="TEXT",
        help="enable bulleted lists introduced by TEXT",
    )
    argument_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="TOML file with extension settings (flags take precedence)",
    )
    argument_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log progress to stderr",
    )
    return argument_parser


def check_source_path(path: Path) -> str | None:
    """Return an error message if ``path`` is not a Publication source."""
    if path.suffix == SOURCE_SUFFIX:
        return None
    if path.suffix:
        return (
            f"Publication files must use the {SOURCE_SUFFIX} extension, "
            f"so {path.suffix} cannot be used."
        )
    return f"Publication files must use the {SOURCE_SUFFIX} extension."


def default_output_path(path: Path) -> Path:
    return path.with_suffix(DEFAULT_OUTPUT_SUFFIX)


def resolve_config(arguments: argparse.Namespace) -> ParseConfig:
    config = load_config(arguments.config) if arguments.config else ParseConfig()
    return config.merged(
        enable_bold=arguments.enable_bold,
        enable_italics=arguments.enable_italics,
        list_bullet=arguments.list_bullet,
    )


def _fail(message: str, exit_code: int) -> int:
    print(message, file=sys.stderr)
    return exit_code


def main(argv: Sequence[str] | None = None) -> int:
    arguments = build_argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if arguments.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source_path: Path = arguments.input
    error = check_source_path(source_path)
    if error:
        return _fail(error, COMMAND_LINE_ERROR_EXIT_CODE)
    output_path: Path = arguments.out or default_output_path(source_path)

    start = time.perf_counter()

    try:
        emitter = emitter_for_path(output_path)
    except KeyError:
        if not output_path.suffix:
            return _fail(
                "To infer emitter, please provide an output file with a known extension.",
                COMMAND_LINE_ERROR_EXIT_CODE,
            )
        return _fail(
            f"No known emitter for {output_path.suffix} files.",
            COMMAND_LINE_ERROR_EXIT_CODE,
        )

    try:
        registry = resolve_config(arguments).build_registry()
    except (OSError, ValueError, PublicationError) as e:
        return _fail(f"Invalid configuration: {e}", GENERIC_ERROR_EXIT_CODE)

    try:
        raw = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return _fail(f"Could not read {source_path}: {e}", GENERIC_ERROR_EXIT_CODE)

    logger.info("Compiling %s with %s", source_path, type(emitter).__name__)
    try:
        parser = Parser(raw, registry=registry, source_file=str(source_path))
        emitted = parser.emit_with(emitter)
    except PublicationError as e:
        return _fail(f"Failed to parse {source_path}: {e}", GENERIC_ERROR_EXIT_CODE)

    try:
        output_path.write_text(emitted, encoding="utf-8")
    except OSError as e:
        return _fail(f"Could not write to {output_path}: {e}", GENERIC_ERROR_EXIT_CODE)

    elapsed_us = int((time.perf_counter() - start) * 1_000_000)
    print(f"{source_path} → {output_path} ({elapsed_us}µs)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
