#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/renderers/tables.py
"""Table grid builder.

Markdown tables may be ragged: a body row can hold fewer or more cells than
the header. The builder never truncates. It lays each source row onto a
destination row at the same index, creating rows and cells on demand, and
leaves the grid shape to ``TableBlock.column_count``.
"""

from __future__ import annotations

import logging
from typing import Optional

from md2docx.ast.nodes import TableRow
from md2docx.model import TableBlock
from md2docx.options.docx import DocxRendererOptions
from md2docx.renderers.inline import InlineRenderer
from md2docx.style import BOLD, PLAIN

logger = logging.getLogger(__name__)


class TableGridBuilder:
    """Build a ``TableBlock`` from a header row and body rows.

    Parameters
    ----------
    inline_renderer : InlineRenderer or None, default = None
        Renderer used for cell content
    options : DocxRendererOptions or None, default = None
        Rendering options; ``table_width`` sets the block width

    """

    def __init__(
        self,
        inline_renderer: InlineRenderer | None = None,
        options: DocxRendererOptions | None = None,
    ):
        self.options = options or DocxRendererOptions()
        self.inline_renderer = inline_renderer or InlineRenderer(self.options)

    def render_table(self, header: Optional[TableRow], rows: list[TableRow]) -> TableBlock:
        """Render a table's rows into a new ``TableBlock``.

        Header cells are rendered bold; body cells use the plain style.

        Parameters
        ----------
        header : TableRow or None
            Optional header row, placed first
        rows : list of TableRow
            Body rows in order

        Returns
        -------
        TableBlock
            The populated table

        """
        table = TableBlock(width=self.options.table_width)

        source_rows: list[tuple[TableRow, bool]] = []
        if header is not None:
            source_rows.append((header, True))
            table.header_rows = 1
        source_rows.extend((row, False) for row in rows)

        for row_index, (source_row, is_header) in enumerate(source_rows):
            dest_row = table.row(row_index)
            base_style = BOLD if is_header else PLAIN
            for col_index, source_cell in enumerate(source_row.cells):
                dest_cell = dest_row.cell(col_index)
                dest_cell.paragraph.extend(self.inline_renderer.render_inline(source_cell.content, base_style))

        logger.debug(
            "Built table with %d rows and %d columns (%d header)",
            len(table.rows),
            table.column_count,
            table.header_rows,
        )
        return table
