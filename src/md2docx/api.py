#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/api.py
"""High-level conversion functions.

These functions wire the pieces together: Markdown is parsed into an AST,
the block renderer turns the AST into an ``OutputDocument`` using the style
names the sink reports, and the sink writes the .docx container.

Examples
--------
    >>> from md2docx.api import convert
    >>> convert("# Report\\n\\nAll **green**.", "report.docx")

"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from md2docx.ast.nodes import Document
from md2docx.model import OutputDocument
from md2docx.options.docx import DocxRendererOptions
from md2docx.options.markdown import MarkdownParserOptions
from md2docx.parsers.markdown import MarkdownInput, MarkdownParser
from md2docx.renderers.blocks import BlockRenderer
from md2docx.sinks.docx import DocxSink
from md2docx.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

OutputTarget = Union[str, Path, IO[bytes]]


def markdown_to_ast(source: MarkdownInput, options: MarkdownParserOptions | None = None) -> Document:
    """Parse Markdown text, a Markdown file, or bytes into an AST document."""
    with debug_timer(logger, "Parsing"):
        return MarkdownParser(options).parse(source)


def render_ast(
    doc: Union[Document, list],
    options: DocxRendererOptions | None = None,
    available_styles: Optional[Iterable[str]] = None,
) -> OutputDocument:
    """Render an AST into the output document model.

    Parameters
    ----------
    doc : Document or list of Node
        AST root or top-level block nodes
    options : DocxRendererOptions or None, default = None
        Rendering options
    available_styles : Iterable of str or None, default = None
        Paragraph styles the target document defines; None assumes all

    Returns
    -------
    OutputDocument
        Rendered document model

    """
    with debug_timer(logger, "Rendering"):
        return BlockRenderer(options, available_styles=available_styles).render(doc)


def _base_path_for(source: MarkdownInput) -> Optional[Path]:
    """Directory that relative image paths in ``source`` are resolved against."""
    if isinstance(source, Path):
        return source.parent
    if isinstance(source, str) and len(source) <= 260 and "\n" not in source:
        try:
            candidate = Path(source)
            if candidate.is_file():
                return candidate.parent
        except OSError:
            return None
    return None


def convert(
    source: Union[MarkdownInput, Document],
    output: OutputTarget,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: DocxRendererOptions | None = None,
) -> None:
    """Convert Markdown (or an already parsed AST) to a .docx file.

    Parameters
    ----------
    source : str, Path, bytes, IO[bytes], or Document
        Markdown text, a path to a Markdown file, raw bytes, a binary
        stream, or a parsed AST
    output : str, Path, or IO[bytes]
        Destination path or writable binary stream
    parser_options : MarkdownParserOptions or None, default = None
        Parser configuration (ignored for an AST source)
    renderer_options : DocxRendererOptions or None, default = None
        Rendering and output configuration

    Raises
    ------
    Md2DocxError
        Any parsing, rendering or output failure. The output is left
        unwritten when rendering fails.

    """
    sink = DocxSink(renderer_options)
    if isinstance(source, Document):
        doc = source
    else:
        sink.base_path = _base_path_for(source)
        doc = markdown_to_ast(source, parser_options)

    document = render_ast(doc, sink.options, available_styles=sink.available_styles())
    with debug_timer(logger, "Writing DOCX"):
        sink.write(document, output)


def convert_to_bytes(
    source: Union[MarkdownInput, Document],
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: DocxRendererOptions | None = None,
) -> bytes:
    """Convert Markdown (or an AST) and return the .docx content as bytes."""
    buffer = BytesIO()
    convert(source, buffer, parser_options=parser_options, renderer_options=renderer_options)
    return buffer.getvalue()
