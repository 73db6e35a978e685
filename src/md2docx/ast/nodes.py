#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/ast/nodes.py
"""AST node classes for Markdown documents.

This module defines the node hierarchy the renderer consumes. Each node
represents a block or inline element of a CommonMark document (plus GFM
tables and an underline mark) and supports the visitor pattern through
``accept``.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph
    - BulletList, OrderedList, ListItem
    - Table, TableRow, TableCell
    - FencedCodeBlock, IndentedCodeBlock, BlockQuote
    - ThematicBreak, HTMLBlock

Inline nodes:
    - Text, Emphasis, Strong, Underline, Code
    - Link, Image, SoftBreak, HardBreak, HTMLInline

The renderer treats every node as read-only input. Nothing in md2docx
mutates a node once the parser has built it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SourceLocation:
    """Position of a node in the Markdown source.

    Parameters
    ----------
    line : int or None, default = None
        Line number in the source text
    column : int or None, default = None
        Column number in the source text

    """

    line: Optional[int] = None
    column: Optional[int] = None


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing block-level children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (title, author, subject, keywords)

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node.

    The level is deliberately left unchecked here. Parsers only produce
    levels 1-6, but a hand-built tree may not, and the renderer maps
    anything else onto a level-1 heading.

    Parameters
    ----------
    level : int
        Heading level (1 is the most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    A list item holds the blocks of one bullet or number: usually a single
    paragraph, optionally followed by further paragraphs, nested lists or
    code blocks.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class BulletList(Node):
    """Unordered (bulleted) list.

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items in document order

    """

    items: list[ListItem] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bullet_list``."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Node):
    """Ordered (numbered) list.

    Parameters
    ----------
    start : int, default = 1
        Number of the first item
    items : list of ListItem, default = empty list
        List items in document order

    """

    start: int = 1
    items: list[ListItem] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_ordered_list``."""
        return visitor.visit_ordered_list(self)


@dataclass
class TableCell(Node):
    """Table cell node holding inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells.

    Rows of one table need not have the same number of cells.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in this row

    """

    cells: list[TableCell] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self)


@dataclass
class Table(Node):
    """GFM pipe table.

    Parameters
    ----------
    header : TableRow or None, default = None
        Optional header row
    rows : list of TableRow, default = empty list
        Body rows (excluding the header)

    """

    header: Optional[TableRow] = None
    rows: list[TableRow] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)


@dataclass
class FencedCodeBlock(Node):
    """Fenced code block (```` ``` ```` or ``~~~``).

    Parameters
    ----------
    content : str
        Literal code, internal line breaks included
    language : str or None, default = None
        First word of the info string

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_fenced_code_block``."""
        return visitor.visit_fenced_code_block(self)


@dataclass
class IndentedCodeBlock(Node):
    """Code block introduced by four spaces of indentation.

    Parameters
    ----------
    content : str
        Literal code with the indentation removed

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_indented_code_block``."""
        return visitor.visit_indented_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Word output has no place for raw HTML, so renderers skip these.

    Parameters
    ----------
    content : str
        Raw HTML content

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_html_block``."""
        return visitor.visit_html_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with emphasis

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with strong emphasis

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self)


@dataclass
class Underline(Node):
    """Underline (inserted text) node, written ``^^text^^`` in the source.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with underline

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_underline``."""
        return visitor.visit_underline(self)


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    content : str
        Literal code; never parsed further

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination
    content : list of Node, default = empty list
        Inline nodes representing the visible link label
    title : str or None, default = None
        Optional link title (tooltip)

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source path or URL
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


@dataclass
class SoftBreak(Node):
    """Soft line break (a plain newline inside a paragraph)."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_soft_break``."""
        return visitor.visit_soft_break(self)


@dataclass
class HardBreak(Node):
    """Hard line break (two trailing spaces or a backslash before a newline)."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_hard_break``."""
        return visitor.visit_hard_break(self)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML.

    Parameters
    ----------
    content : str
        Raw HTML content

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_html_inline``."""
        return visitor.visit_html_inline(self)


BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Heading,
    Paragraph,
    BulletList,
    OrderedList,
    ListItem,
    Table,
    TableRow,
    TableCell,
    FencedCodeBlock,
    IndentedCodeBlock,
    BlockQuote,
    ThematicBreak,
    HTMLBlock,
)

INLINE_NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    Emphasis,
    Strong,
    Underline,
    Code,
    Link,
    Image,
    SoftBreak,
    HardBreak,
    HTMLInline,
)


def get_node_children(node: Node) -> list[Node]:
    """Return the child nodes of any node, in document order.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        Direct children; empty for leaf nodes

    """
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)
    if isinstance(node, (BulletList, OrderedList)):
        return list(node.items)
    if isinstance(node, Table):
        rows: list[Node] = [node.header] if node.header is not None else []
        rows.extend(node.rows)
        return rows
    if isinstance(node, TableRow):
        return list(node.cells)

    content = getattr(node, "content", None)
    if isinstance(content, list):
        return list(content)
    return []


def extract_text(nodes: list[Node]) -> str:
    """Concatenate the literal text beneath a list of nodes.

    Images contribute their alt text and breaks a newline. Raw HTML is
    ignored.

    Parameters
    ----------
    nodes : list of Node
        Nodes to extract text from

    Returns
    -------
    str
        Plain text content

    """
    parts: list[str] = []

    def collect(node_list: list[Node]) -> None:
        for node in node_list:
            if isinstance(node, (Text, Code)):
                parts.append(node.content)
            elif isinstance(node, Image):
                parts.append(node.alt_text)
            elif isinstance(node, (SoftBreak, HardBreak)):
                parts.append("\n")
            elif isinstance(node, (HTMLInline, HTMLBlock)):
                continue
            else:
                collect(get_node_children(node))

    collect(nodes)
    return "".join(parts)
