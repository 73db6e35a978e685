#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/cli.py
"""Command-line interface for md2docx.

Usage::

    md2docx notes.md                      # writes notes.docx
    md2docx notes.md -o out/report.docx --template corporate.docx
    cat notes.md | md2docx - -o notes.docx

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Union

from md2docx import __version__
from md2docx.api import convert
from md2docx.config import load_config_with_priority, options_from_config
from md2docx.constants import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from md2docx.exceptions import (
    ConfigError,
    DependencyError,
    FileError,
    FileNotFoundError,
    Md2DocxError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2docx.logging_utils import configure_logging, resolve_log_level
from md2docx.options.docx import DocxRendererOptions
from md2docx.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2docx",
        description="Convert Markdown to a styled Word (.docx) document.",
    )
    parser.add_argument("input", help="Markdown file to convert, or '-' to read from stdin")
    parser.add_argument("-o", "--output", help="Output .docx path (default: input path with a .docx suffix)")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .yml, .json or pyproject.toml)")
    parser.add_argument("--template", help="Template .docx whose styles the output adopts")
    parser.add_argument(
        "--no-native-hyperlinks",
        action="store_true",
        help="Write links as styled text instead of clickable hyperlinks",
    )
    parser.add_argument(
        "--no-number-lists",
        action="store_true",
        help="Do not prefix ordered list items with their number",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        Exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _build_options(parsed_args: argparse.Namespace) -> tuple[MarkdownParserOptions, DocxRendererOptions]:
    config = load_config_with_priority(parsed_args.config)
    parser_options, renderer_options = options_from_config(config)

    overrides: dict[str, object] = {}
    if parsed_args.template:
        overrides["template_path"] = parsed_args.template
    if parsed_args.no_native_hyperlinks:
        overrides["native_hyperlinks"] = False
    if parsed_args.no_number_lists:
        overrides["number_ordered_lists"] = False
    if overrides:
        renderer_options = renderer_options.create_updated(**overrides)

    return parser_options, renderer_options


def _resolve_paths(parsed_args: argparse.Namespace) -> tuple[Union[Path, bytes], Path]:
    if parsed_args.input == STDIN_MARKER:
        if not parsed_args.output:
            raise ValidationError("--output is required when reading from stdin", parameter_name="output")
        return sys.stdin.buffer.read(), Path(parsed_args.output)

    input_path = Path(parsed_args.input)
    if not input_path.is_file():
        raise FileNotFoundError(str(input_path))

    output_path = Path(parsed_args.output) if parsed_args.output else input_path.with_suffix(".docx")
    if output_path.resolve() == input_path.resolve():
        raise ValidationError(f"Output would overwrite the input file: {input_path}", parameter_name="output")
    return input_path, output_path


def main(args: list[str] | None = None) -> int:
    """Run the command-line interface and return the exit code."""
    parsed_args = create_parser().parse_args(args)

    configure_logging(
        resolve_log_level(parsed_args.log_level, parsed_args.verbose, parsed_args.trace),
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
    )

    try:
        parser_options, renderer_options = _build_options(parsed_args)
        source, output_path = _resolve_paths(parsed_args)
        if output_path.parent != Path("."):
            output_path.parent.mkdir(parents=True, exist_ok=True)
        convert(source, output_path, parser_options=parser_options, renderer_options=renderer_options)
    except Md2DocxError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    print(f"Wrote {output_path}", file=sys.stderr)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
