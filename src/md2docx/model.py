#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/model.py
"""Output document model produced by the block renderer.

The model is a format-neutral description of a Word document: an ordered
sequence of styled paragraphs and tables. Renderers only ever append to it;
a ``DocumentSink`` serializes the finished model.

Spacing, indentation and table width are stored in twips (1/20 point).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

from md2docx.constants import DEFAULT_TABLE_WIDTH, ListKind, RunKind
from md2docx.style import PLAIN, RunStyle


@dataclass
class Run:
    """A contiguous piece of text sharing one style.

    Parameters
    ----------
    text : str
        Literal text; empty for break runs
    style : RunStyle, default = PLAIN
        Character formatting
    kind : {"text", "soft_break", "hard_break"}, default = "text"
        Whether this run carries text or a line break
    hyperlink : str or None, default = None
        Target URL when the run belongs to a link
    image_src : str or None, default = None
        Image source when the run stands in for an image

    """

    text: str
    style: RunStyle = PLAIN
    kind: RunKind = "text"
    hyperlink: Optional[str] = None
    image_src: Optional[str] = None

    @property
    def is_break(self) -> bool:
        """Return True for soft and hard break runs."""
        return self.kind != "text"

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary describing this run."""
        return {
            "text": self.text,
            "style": self.style.to_dict(),
            "kind": self.kind,
            "hyperlink": self.hyperlink,
            "image_src": self.image_src,
        }


@dataclass
class ParagraphBlock:
    """A paragraph in the output document.

    Parameters
    ----------
    runs : list of Run, default = empty list
        Runs in reading order
    style_name : str or None, default = None
        Named paragraph style, e.g. ``"Heading2"``
    spacing_after : int or None, default = None
        Space after the paragraph in twips
    left_indent : int or None, default = None
        Left indentation in twips
    right_indent : int or None, default = None
        Right indentation in twips
    bottom_border : bool, default = False
        Draw a single line below the paragraph
    shading : str or None, default = None
        Background fill as a hex colour, e.g. ``"EEEEEE"``
    list_kind : {"bullet", "ordered"} or None, default = None
        List membership, for sinks that build real numbering
    list_ordinal : int or None, default = None
        Item number within an ordered list
    list_level : int, default = 0
        Nesting depth of the list item (0 for top level)

    """

    runs: list[Run] = field(default_factory=list)
    style_name: Optional[str] = None
    spacing_after: Optional[int] = None
    left_indent: Optional[int] = None
    right_indent: Optional[int] = None
    bottom_border: bool = False
    shading: Optional[str] = None
    list_kind: Optional[ListKind] = None
    list_ordinal: Optional[int] = None
    list_level: int = 0

    def add_run(self, run: Run) -> Run:
        """Append a run and return it."""
        self.runs.append(run)
        return run

    def extend(self, runs: list[Run]) -> None:
        """Append several runs in order."""
        self.runs.extend(runs)

    @property
    def text(self) -> str:
        """Concatenated run text, with breaks shown as newlines."""
        return "".join("\n" if run.is_break else run.text for run in self.runs)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary describing this paragraph."""
        return {
            "type": "paragraph",
            "runs": [run.to_dict() for run in self.runs],
            "style_name": self.style_name,
            "spacing_after": self.spacing_after,
            "left_indent": self.left_indent,
            "right_indent": self.right_indent,
            "bottom_border": self.bottom_border,
            "shading": self.shading,
            "list_kind": self.list_kind,
            "list_ordinal": self.list_ordinal,
            "list_level": self.list_level,
        }


@dataclass
class TableCellBlock:
    """A table cell holding a single paragraph."""

    paragraph: ParagraphBlock = field(default_factory=ParagraphBlock)

    @property
    def text(self) -> str:
        return self.paragraph.text


@dataclass
class TableRowBlock:
    """A table row; cells are created on demand by index."""

    cells: list[TableCellBlock] = field(default_factory=list)

    def cell(self, index: int) -> TableCellBlock:
        """Return the cell at ``index``, creating it and any gap before it."""
        while len(self.cells) <= index:
            self.cells.append(TableCellBlock())
        return self.cells[index]


@dataclass
class TableBlock:
    """A table in the output document.

    Rows may hold different numbers of cells. Sinks that need a uniform grid
    size it from ``column_count`` and leave missing cells empty.

    Parameters
    ----------
    rows : list of TableRowBlock, default = empty list
        Rows in order, header rows first
    width : int, default = 9000
        Preferred table width in twips
    header_rows : int, default = 0
        Number of leading rows that form the header

    """

    rows: list[TableRowBlock] = field(default_factory=list)
    width: int = DEFAULT_TABLE_WIDTH
    header_rows: int = 0

    def row(self, index: int) -> TableRowBlock:
        """Return the row at ``index``, creating it and any gap before it."""
        while len(self.rows) <= index:
            self.rows.append(TableRowBlock())
        return self.rows[index]

    @property
    def column_count(self) -> int:
        """Widest row's cell count."""
        return max((len(row.cells) for row in self.rows), default=0)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary describing this table."""
        return {
            "type": "table",
            "width": self.width,
            "header_rows": self.header_rows,
            "rows": [[cell.paragraph.to_dict() for cell in row.cells] for row in self.rows],
        }


Block = Union[ParagraphBlock, TableBlock]


@dataclass
class OutputDocument:
    """Ordered sequence of output blocks plus document metadata.

    Parameters
    ----------
    blocks : list of Block, default = empty list
        Paragraphs and tables in reading order
    metadata : dict, default = empty dict
        Document properties (title, author, subject, keywords)

    """

    blocks: list[Block] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def append(self, block: Block) -> Block:
        """Append a block at the end of the document and return it."""
        self.blocks.append(block)
        return block

    def paragraphs(self) -> list[ParagraphBlock]:
        """Top-level paragraphs, in order."""
        return [block for block in self.blocks if isinstance(block, ParagraphBlock)]

    def tables(self) -> list[TableBlock]:
        """Tables, in order."""
        return [block for block in self.blocks if isinstance(block, TableBlock)]

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, comparable description of the whole document."""
        return {
            "metadata": dict(self.metadata),
            "blocks": [block.to_dict() for block in self.blocks],
        }
