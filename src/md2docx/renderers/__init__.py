#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn AST nodes into the output document model."""

from md2docx.renderers.blocks import BlockRenderer
from md2docx.renderers.inline import InlineRenderer
from md2docx.renderers.tables import TableGridBuilder

__all__ = ["BlockRenderer", "InlineRenderer", "TableGridBuilder"]
