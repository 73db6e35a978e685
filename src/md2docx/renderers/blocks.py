#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/renderers/blocks.py
"""Block renderer: turns an AST into an ``OutputDocument``.

The renderer makes one pre-order, depth-first pass over the top-level
blocks. Each block handler appends zero or more paragraphs or tables to the
output and hands inline content to the ``InlineRenderer``. Nodes it does not
recognise are skipped, so a partially supported tree still renders.

Examples
--------
    >>> from md2docx.ast import Document, Heading, Text
    >>> out = BlockRenderer().render(Document(children=[Heading(level=2, content=[Text(content="Hi")])]))
    >>> out.blocks[0].style_name
    'Heading2'

"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from md2docx.ast.nodes import (
    BlockQuote,
    BulletList,
    Document,
    FencedCodeBlock,
    Heading,
    HTMLBlock,
    IndentedCodeBlock,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Table,
    ThematicBreak,
    get_node_children,
)
from md2docx.ast.visitors import NodeVisitor
from md2docx.constants import (
    BLOCKQUOTE_LEFT_INDENT,
    BLOCKQUOTE_RIGHT_INDENT,
    BLOCKQUOTE_SPACING_AFTER,
    CODE_BLOCK_SPACING_AFTER,
    HEADING_SPACING_AFTER,
    HEADING_STYLE_PREFIX,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    PARAGRAPH_SPACING_AFTER,
    THEMATIC_BREAK_SPACING_AFTER,
    ListKind,
)
from md2docx.model import OutputDocument, ParagraphBlock, Run
from md2docx.options.docx import DocxRendererOptions
from md2docx.renderers.inline import InlineRenderer
from md2docx.renderers.tables import TableGridBuilder
from md2docx.style import PLAIN

logger = logging.getLogger(__name__)


class BlockRenderer(NodeVisitor):
    """Render block-level AST nodes into an output document.

    A renderer holds configuration only. Each call to ``render`` builds a
    fresh ``OutputDocument``, so one instance can be reused for any number
    of conversions.

    Parameters
    ----------
    options : DocxRendererOptions or None, default = None
        Rendering options
    available_styles : Iterable of str or None, default = None
        Paragraph style names the target document defines. ``None`` means
        every style is assumed to exist.

    """

    def __init__(
        self,
        options: DocxRendererOptions | None = None,
        available_styles: Iterable[str] | None = None,
    ):
        self.options = options or DocxRendererOptions()
        self.available_styles = set(available_styles) if available_styles is not None else None
        self.inline_renderer = InlineRenderer(self.options)
        self.table_builder = TableGridBuilder(self.inline_renderer, self.options)
        self._document = OutputDocument()
        self._list_depth = 0

    def render(self, source: Union[Document, list[Node]]) -> OutputDocument:
        """Render a document, or a list of block nodes, into a new output document.

        Parameters
        ----------
        source : Document or list of Node
            AST root or top-level blocks

        Returns
        -------
        OutputDocument
            Blocks in document order, plus metadata from the AST root

        """
        self._document = OutputDocument()
        self._list_depth = 0

        if isinstance(source, Document):
            source.accept(self)
        else:
            self._render_blocks(source)

        logger.debug("Rendered %d output blocks", len(self._document.blocks))
        return self._document

    def _render_blocks(self, nodes: list[Node]) -> None:
        for node in nodes:
            node.accept(self)

    def _has_style(self, style_name: str) -> bool:
        return self.available_styles is None or style_name in self.available_styles

    def visit_document(self, node: Document) -> None:
        """Render the document's children and copy its metadata."""
        self._document.metadata.update(node.metadata)
        self._render_blocks(node.children)

    def visit_heading(self, node: Heading) -> None:
        """Render a heading with its ``HeadingN`` style, or manual emphasis if the style is missing."""
        level = node.level
        if not isinstance(level, int) or not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
            logger.debug("Heading level %r out of range, using level %d", level, MIN_HEADING_LEVEL)
            level = MIN_HEADING_LEVEL

        style_name = f"{HEADING_STYLE_PREFIX}{level}"
        paragraph = ParagraphBlock(spacing_after=HEADING_SPACING_AFTER)

        if self._has_style(style_name):
            paragraph.style_name = style_name
            paragraph.extend(self.inline_renderer.render_inline(node.content))
        else:
            size = self.options.heading_size(level)
            logger.debug("Style %s unavailable, falling back to bold %spt text", style_name, size)
            paragraph.extend(self.inline_renderer.render_inline(node.content, PLAIN.merge(bold=True, font_size=size)))

        self._document.append(paragraph)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a paragraph."""
        paragraph = ParagraphBlock(spacing_after=PARAGRAPH_SPACING_AFTER, list_level=self._list_depth)
        paragraph.extend(self.inline_renderer.render_inline(node.content))
        self._document.append(paragraph)

    def visit_bullet_list(self, node: BulletList) -> None:
        """Render each item as a paragraph prefixed with the bullet glyph."""
        for item in node.items:
            self._render_list_item(item, "bullet", None, self.options.bullet_glyph)

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render each item as a paragraph carrying its item number."""
        for index, item in enumerate(node.items):
            ordinal = node.start + index
            prefix = f"{ordinal}. " if self.options.number_ordered_lists else None
            self._render_list_item(item, "ordered", ordinal, prefix)

    def visit_list_item(self, node: ListItem) -> None:
        """Render a list item met outside a list as an unmarked bullet."""
        self._render_list_item(node, "bullet", None, None)

    def _render_list_item(self, item: ListItem, kind: ListKind, ordinal: int | None, prefix: str | None) -> None:
        paragraph = ParagraphBlock(list_kind=kind, list_ordinal=ordinal, list_level=self._list_depth)
        if prefix:
            paragraph.add_run(Run(text=prefix))

        children = list(item.children)
        if children and isinstance(children[0], Paragraph):
            paragraph.extend(self.inline_renderer.render_inline(children.pop(0).content))

        self._document.append(paragraph)

        # Nested lists and any further blocks follow their parent item
        self._list_depth += 1
        try:
            self._render_blocks(children)
        finally:
            self._list_depth -= 1

    def visit_fenced_code_block(self, node: FencedCodeBlock) -> None:
        """Render a fenced code block as one monospace paragraph."""
        self._append_code(node.content)

    def visit_indented_code_block(self, node: IndentedCodeBlock) -> None:
        """Render an indented code block as one monospace paragraph."""
        self._append_code(node.content)

    def _append_code(self, content: str) -> None:
        paragraph = ParagraphBlock(
            spacing_after=CODE_BLOCK_SPACING_AFTER,
            shading=self.options.code_background,
            list_level=self._list_depth,
        )
        if content:
            style = PLAIN.merge(monospace=True, font_size=self.options.code_font_size)
            paragraph.add_run(Run(text=content, style=style))
        self._document.append(paragraph)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a block quote as a single indented italic paragraph.

        The text of every paragraph-like descendant is joined with hard
        breaks. Nested quotes are flattened into the same paragraph. Tables
        cannot live inside a paragraph, so quoted tables follow it as grids.
        """
        paragraph = ParagraphBlock(
            spacing_after=BLOCKQUOTE_SPACING_AFTER,
            left_indent=BLOCKQUOTE_LEFT_INDENT,
            right_indent=BLOCKQUOTE_RIGHT_INDENT,
        )
        tables: list[Table] = []
        self._collect_quote_runs(node.children, paragraph, tables)
        if paragraph.runs or not tables:
            self._document.append(paragraph)
        for table in tables:
            self.visit_table(table)

    def _collect_quote_runs(self, nodes: list[Node], paragraph: ParagraphBlock, tables: list[Table]) -> None:
        quote_style = PLAIN.merge(italic=True)
        for child in nodes:
            if isinstance(child, (Paragraph, Heading)):
                runs = self.inline_renderer.render_inline(child.content, quote_style)
            elif isinstance(child, (FencedCodeBlock, IndentedCodeBlock)):
                runs = [Run(text=child.content, style=quote_style.merge(monospace=True))] if child.content else []
            elif isinstance(child, (BlockQuote, BulletList, OrderedList, ListItem)):
                self._collect_quote_runs(get_node_children(child), paragraph, tables)
                continue
            elif isinstance(child, Table):
                tables.append(child)
                continue
            else:
                logger.debug("Skipping %s inside block quote", type(child).__name__)
                continue

            if not runs:
                continue
            if paragraph.runs:
                paragraph.add_run(Run(text="", style=quote_style, kind="hard_break"))
            paragraph.extend(runs)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a thematic break as an empty paragraph with a bottom border."""
        self._document.append(ParagraphBlock(spacing_after=THEMATIC_BREAK_SPACING_AFTER, bottom_border=True))

    def visit_table(self, node: Table) -> None:
        """Delegate the table to the grid builder."""
        self._document.append(self.table_builder.render_table(node.header, node.rows))

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Raw HTML has no Word equivalent and is skipped."""
        logger.debug("Skipping raw HTML block")

    def generic_visit(self, node: Node) -> None:
        """Skip nodes with no block rendering."""
        logger.debug("Skipping unsupported block node: %s", type(node).__name__)
