#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/ast/visitors.py
"""Visitor base class for AST traversal.

Every ``visit_*`` method defaults to ``generic_visit``, so a visitor only
overrides the node kinds it handles. Anything else falls through to the
fallback, which does nothing unless a subclass says otherwise.

"""

from __future__ import annotations

from typing import Any

from md2docx.ast.nodes import (
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
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
)


class NodeVisitor:
    """Base class for AST node visitors.

    Examples
    --------
    Count the headings in a document:

        >>> class HeadingCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...
        ...     def visit_heading(self, node):
        ...         self.count += 1
        ...
        >>> counter = HeadingCounter()
        >>> Document(children=[Heading(level=1)]).accept(counter)
        >>> counter.count
        1

    """

    # Block nodes

    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        return self.generic_visit(node)

    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        return self.generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        return self.generic_visit(node)

    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        return self.generic_visit(node)

    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        return self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        return self.generic_visit(node)

    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        return self.generic_visit(node)

    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        return self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        return self.generic_visit(node)

    def visit_fenced_code_block(self, node: FencedCodeBlock) -> Any:
        """Visit a FencedCodeBlock node."""
        return self.generic_visit(node)

    def visit_indented_code_block(self, node: IndentedCodeBlock) -> Any:
        """Visit an IndentedCodeBlock node."""
        return self.generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        return self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        return self.generic_visit(node)

    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit an HTMLBlock node."""
        return self.generic_visit(node)

    # Inline nodes

    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        return self.generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        return self.generic_visit(node)

    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        return self.generic_visit(node)

    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""
        return self.generic_visit(node)

    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        return self.generic_visit(node)

    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        return self.generic_visit(node)

    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        return self.generic_visit(node)

    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""
        return self.generic_visit(node)

    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""
        return self.generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit an HTMLInline node."""
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback for node types the visitor does not handle.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
