#  Copyright (c) 2025 Tom Villani, Ph.D.
"""md2docx - render Markdown as styled Word documents.

md2docx parses Markdown (CommonMark plus GFM tables) into an AST, renders
the AST into a format-neutral model of styled paragraphs, runs and tables,
and writes that model to a .docx file with python-docx.

Pipeline
--------
1. ``MarkdownParser`` (mistune) turns text into an AST ``Document``
2. ``BlockRenderer`` turns the AST into an ``OutputDocument``
3. ``DocxSink`` writes the ``OutputDocument`` as .docx

Examples
--------
One-call conversion:

    >>> from md2docx import convert
    >>> convert("notes.md", "notes.docx")

Rendering a hand-built AST and inspecting the result:

    >>> from md2docx import render_ast
    >>> from md2docx.ast import Document, Heading, Text
    >>> out = render_ast(Document(children=[Heading(level=1, content=[Text(content="Title")])]))
    >>> out.paragraphs()[0].style_name
    'Heading1'

"""

__version__ = "0.1.0"

from md2docx.api import convert, convert_to_bytes, markdown_to_ast, render_ast
from md2docx.exceptions import (
    ConfigError,
    DependencyError,
    FileError,
    Md2DocxError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2docx.model import OutputDocument, ParagraphBlock, Run, TableBlock
from md2docx.options import DocxRendererOptions, MarkdownParserOptions
from md2docx.style import RunStyle

__all__ = [
    "__version__",
    "ConfigError",
    "DependencyError",
    "DocxRendererOptions",
    "FileError",
    "MarkdownParserOptions",
    "Md2DocxError",
    "OutputDocument",
    "ParagraphBlock",
    "ParsingError",
    "RenderingError",
    "Run",
    "RunStyle",
    "TableBlock",
    "ValidationError",
    "convert",
    "convert_to_bytes",
    "markdown_to_ast",
    "render_ast",
]
