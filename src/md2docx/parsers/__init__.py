#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown parser front-end producing the md2docx AST."""

from md2docx.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["MarkdownParser", "markdown_to_ast"]
