#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for the parser front-end and the DOCX renderer."""

from md2docx.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2docx.options.docx import DocxRendererOptions
from md2docx.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DocxRendererOptions",
    "MarkdownParserOptions",
]
