#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the Markdown parser front-end."""

from dataclasses import dataclass, field

from md2docx.options.base import BaseParserOptions


# src/md2docx/options/markdown.py
@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for parsing Markdown into an AST.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognise GFM pipe tables.
    parse_underline : bool, default True
        Recognise ``^^text^^`` as underlined text.
    parse_frontmatter : bool, default True
        Strip a leading YAML front matter block before parsing.
    strip_code_trailing_newline : bool, default True
        Drop the final newline the tokenizer leaves on code block content.

    """

    parse_tables: bool = field(default=True, metadata={"help": "Parse GFM pipe tables"})
    parse_underline: bool = field(default=True, metadata={"help": "Parse ^^text^^ as underline"})
    parse_frontmatter: bool = field(default=True, metadata={"help": "Strip and read YAML front matter"})
    strip_code_trailing_newline: bool = field(
        default=True,
        metadata={"help": "Drop the trailing newline of code block content"},
    )
