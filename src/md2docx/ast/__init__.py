#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/ast/__init__.py
"""Abstract Syntax Tree (AST) for Markdown documents.

The AST is the renderer's input. It can be produced by the Markdown parser
front-end or built by hand:

    >>> from md2docx.ast import Document, Heading, Paragraph, Strong, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello "), Strong(content=[Text(content="world")])]),
    ... ])

"""

from __future__ import annotations

from md2docx.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    BlockQuote,
    BulletList,
    Code,
    Document,
    Emphasis,
    FencedCodeBlock,
    HardBreak,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    IndentedCodeBlock,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    SoftBreak,
    SourceLocation,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
    extract_text,
    get_node_children,
)
from md2docx.ast.visitors import NodeVisitor

__all__ = [
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "BlockQuote",
    "BulletList",
    "Code",
    "Document",
    "Emphasis",
    "FencedCodeBlock",
    "HardBreak",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "IndentedCodeBlock",
    "Link",
    "ListItem",
    "Node",
    "NodeVisitor",
    "OrderedList",
    "Paragraph",
    "SoftBreak",
    "SourceLocation",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "Underline",
    "extract_text",
    "get_node_children",
]
