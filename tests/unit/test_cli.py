#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli.py
"""Unit tests for the md2docx command-line interface.

Tests cover:
- Argument parsing and defaults
- Exit codes for every error family
- Output path resolution and stdin input
- Configuration files and CLI overrides

"""

import io
import logging
from unittest.mock import patch

import docx
import pytest

from md2docx import __version__
from md2docx.cli import create_parser, get_exit_code_for_exception, main
from md2docx.exceptions import (
    ConfigError,
    DependencyError,
    FileAccessError,
    Md2DocxError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)


@pytest.fixture(autouse=True)
def mock_configure_logging():
    """Keep main() from replacing the root logger handlers."""
    with patch("md2docx.cli.configure_logging") as mock:
        yield mock


@pytest.fixture
def markdown_file(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nSome **bold** text.\n", encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentParser:
    """Tests for create_parser."""

    def test_defaults(self):
        args = create_parser().parse_args(["in.md"])
        assert args.input == "in.md"
        assert args.output is None
        assert args.log_level == "WARNING"
        assert not args.verbose
        assert not args.no_native_hyperlinks

    def test_all_flags(self):
        args = create_parser().parse_args(
            [
                "in.md",
                "-o",
                "out.docx",
                "--template",
                "t.docx",
                "--no-native-hyperlinks",
                "--no-number-lists",
                "--log-level",
                "DEBUG",
                "--trace",
                "--log-file",
                "run.log",
            ]
        )
        assert args.output == "out.docx"
        assert args.template == "t.docx"
        assert args.no_native_hyperlinks
        assert args.no_number_lists
        assert args.trace
        assert args.log_file == "run.log"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["in.md", "--log-level", "LOUD"])


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Tests for exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError("x", [("pkg", ">=1")]), 2),
            (ImportError("x"), 2),
            (ValidationError("x"), 3),
            (ConfigError("x"), 3),
            (FileAccessError("f"), 4),
            (ParsingError("x"), 6),
            (RenderingError("x"), 7),
            (OutputWriteError("f"), 7),
            (Md2DocxError("x"), 1),
            (RuntimeError("x"), 1),
        ],
    )
    def test_mapping(self, exception, code):
        assert get_exit_code_for_exception(exception) == code


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for running main()."""

    def test_default_output_path(self, markdown_file, capsys):
        assert main([str(markdown_file)]) == 0
        output = markdown_file.with_suffix(".docx")
        assert output.is_file()
        assert "Wrote" in capsys.readouterr().err
        assert docx.Document(str(output)).paragraphs[0].style.name == "Heading 1"

    def test_explicit_output_in_new_directory(self, markdown_file, tmp_path):
        output = tmp_path / "out" / "report.docx"
        assert main([str(markdown_file), "-o", str(output)]) == 0
        assert output.is_file()

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.md")]) == 4
        assert "Error" in capsys.readouterr().err

    def test_output_same_as_input(self, tmp_path):
        path = tmp_path / "same.docx"
        path.write_text("# x", encoding="utf-8")
        assert main([str(path), "-o", str(path)]) == 3

    def test_stdin_requires_output(self):
        assert main(["-"]) == 3

    def test_stdin_input(self, tmp_path, monkeypatch):
        stdin = io.TextIOWrapper(io.BytesIO(b"# From stdin\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        output = tmp_path / "stdin.docx"
        assert main(["-", "-o", str(output)]) == 0
        assert docx.Document(str(output)).paragraphs[0].text == "From stdin"

    def test_missing_template(self, markdown_file, tmp_path):
        assert main([str(markdown_file), "--template", str(tmp_path / "nope.docx")]) == 4

    def test_config_file_applied(self, markdown_file, tmp_path):
        config = tmp_path / "cfg.toml"
        config.write_text('[docx]\ndefault_font = "Arial"\n', encoding="utf-8")
        output = tmp_path / "cfg.docx"
        assert main([str(markdown_file), "-o", str(output), "--config", str(config)]) == 0
        assert docx.Document(str(output)).styles["Normal"].font.name == "Arial"

    def test_invalid_config(self, markdown_file, tmp_path):
        config = tmp_path / "cfg.toml"
        config.write_text("[docx]\nunknown_option = 1\n", encoding="utf-8")
        assert main([str(markdown_file), "--config", str(config)]) == 3

    def test_no_number_lists_flag(self, tmp_path):
        source = tmp_path / "list.md"
        source.write_text("1. first\n2. second\n", encoding="utf-8")
        output = tmp_path / "list.docx"
        assert main([str(source), "-o", str(output), "--no-number-lists"]) == 0
        texts = [p.text for p in docx.Document(str(output)).paragraphs]
        assert texts == ["first", "second"]

    def test_logging_flags_forwarded(self, markdown_file, tmp_path, mock_configure_logging):
        log_file = tmp_path / "run.log"
        assert main([str(markdown_file), "-v", "--trace", "--log-file", str(log_file)]) == 0
        mock_configure_logging.assert_called_once_with(logging.DEBUG, log_file=str(log_file), trace_mode=True)
