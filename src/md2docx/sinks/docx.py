#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/sinks/docx.py
"""DOCX output through python-docx.

``DocxSink`` serializes an ``OutputDocument`` into a Word container. The
model is already fully laid out, so the sink only translates: paragraph
styles, spacing and indents, run formatting, hyperlinks, tables and local
images. python-docx has no public API for hyperlinks, paragraph borders or
table widths, so those are written as raw OOXML elements.

"""

from __future__ import annotations

import logging
from itertools import groupby
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Optional, Union
from urllib.parse import urlparse

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument
    from docx.text.paragraph import Paragraph

from md2docx.constants import (
    DEPS_DOCX_RENDER,
    HYPERLINK_RELATIONSHIP_TYPE,
    IMAGE_EXTENSIONS,
    LIST_INDENT_PER_LEVEL,
    THEMATIC_BREAK_BORDER_COLOR,
    THEMATIC_BREAK_BORDER_SIZE,
)
from md2docx.exceptions import FileNotFoundError as Md2DocxFileNotFoundError
from md2docx.exceptions import Md2DocxError, OutputWriteError, RenderingError
from md2docx.model import OutputDocument, ParagraphBlock, Run, TableBlock
from md2docx.options.docx import DocxRendererOptions
from md2docx.sinks.base import DocumentSink
from md2docx.style import RunStyle
from md2docx.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

# pPr children that must follow w:pBdr, in schema order
_PPR_AFTER_BORDER = (
    "w:shd",
    "w:tabs",
    "w:suppressAutoHyphens",
    "w:kinsoku",
    "w:wordWrap",
    "w:overflowPunct",
    "w:topLinePunct",
    "w:autoSpaceDE",
    "w:autoSpaceDN",
    "w:bidi",
    "w:adjustRightInd",
    "w:snapToGrid",
    "w:spacing",
    "w:ind",
    "w:contextualSpacing",
    "w:mirrorIndents",
    "w:suppressOverlap",
    "w:jc",
    "w:textDirection",
    "w:textAlignment",
    "w:textboxTightWrap",
    "w:outlineLvl",
    "w:divId",
    "w:cnfStyle",
    "w:rPr",
    "w:sectPr",
    "w:pPrChange",
)


class DocxSink(DocumentSink):
    """Write an ``OutputDocument`` as a .docx file.

    Parameters
    ----------
    options : DocxRendererOptions or None, default = None
        Output options (fonts, template, hyperlinks, images)
    base_path : str, Path or None, default = None
        Directory that relative image paths are resolved against. Defaults
        to the current working directory.

    Examples
    --------
        >>> from md2docx.model import OutputDocument, ParagraphBlock, Run
        >>> out = OutputDocument()
        >>> out.append(ParagraphBlock(runs=[Run(text="Hello")]))
        >>> DocxSink().write(out, "hello.docx")

    """

    def __init__(self, options: DocxRendererOptions | None = None, base_path: Union[str, Path, None] = None):
        DocumentSink._validate_options_type(options, DocxRendererOptions, "docx sink")
        options = options or DocxRendererOptions()
        super().__init__(options)
        self.options: DocxRendererOptions = options
        self.base_path = Path(base_path) if base_path is not None else None

    def _open_document(self) -> DocxDocument:
        from docx import Document

        template = self.options.template_path
        if template:
            if not Path(template).is_file():
                raise Md2DocxFileNotFoundError(str(template), message=f"Template not found: {template}")
            try:
                return Document(template)
            except Exception as e:
                raise RenderingError(
                    f"Could not open template {template}: {e!r}", rendering_stage="template", original_error=e
                ) from e
        return Document()

    @requires_dependencies("docx sink", DEPS_DOCX_RENDER)
    def available_styles(self) -> set[str]:
        """Return the ids and names of every paragraph style in the target document."""
        from docx.enum.style import WD_STYLE_TYPE

        document = self._open_document()
        names: set[str] = set()
        for style in document.styles:
            if style.type == WD_STYLE_TYPE.PARAGRAPH:
                names.add(style.style_id)
                names.add(style.name)
        return names

    @requires_dependencies("docx sink", DEPS_DOCX_RENDER)
    def write(self, document: OutputDocument, output: Union[str, Path, IO[bytes]]) -> None:
        """Serialize ``document`` to a .docx path or binary stream.

        Parameters
        ----------
        document : OutputDocument
            Rendered document model
        output : str, Path, or IO[bytes]
            Output destination

        Raises
        ------
        FileNotFoundError
            If the configured template does not exist
        OutputWriteError
            If the output file cannot be written
        RenderingError
            If python-docx fails while building the document

        """
        docx_document = self._open_document()

        try:
            self._set_document_defaults(docx_document)
            self._set_document_properties(docx_document, document.metadata)
            for block in document.blocks:
                if isinstance(block, TableBlock):
                    self._write_table(docx_document, block)
                else:
                    self._write_paragraph(docx_document, docx_document.add_paragraph(), block)
        except Md2DocxError:
            raise
        except Exception as e:
            raise RenderingError(f"Failed to build DOCX: {e!r}", rendering_stage="rendering", original_error=e) from e

        self._save(docx_document, output)

    def _save(self, docx_document: DocxDocument, output: Union[str, Path, IO[bytes]]) -> None:
        if isinstance(output, (str, Path)):
            try:
                docx_document.save(str(output))
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
            logger.info("Wrote %s", output)
            return

        try:
            docx_document.save(output)
        except Exception as e:
            raise RenderingError(f"Failed to write DOCX stream: {e!r}", rendering_stage="save", original_error=e) from e

    # ------------------------------------------------------------------
    # Document level
    # ------------------------------------------------------------------

    def _set_document_defaults(self, docx_document: DocxDocument) -> None:
        from docx.shared import Pt

        font = docx_document.styles["Normal"].font
        font.name = self.options.default_font
        font.size = Pt(self.options.default_font_size)

    def _set_document_properties(self, docx_document: DocxDocument, metadata: dict[str, Any]) -> None:
        core_props = docx_document.core_properties
        if metadata.get("title"):
            core_props.title = str(metadata["title"])
        if metadata.get("author"):
            core_props.author = str(metadata["author"])
        if metadata.get("subject"):
            core_props.subject = str(metadata["subject"])
        if metadata.get("keywords"):
            keywords = metadata["keywords"]
            if isinstance(keywords, (list, tuple)):
                core_props.keywords = ", ".join(str(k) for k in keywords)
            else:
                core_props.keywords = str(keywords)
        if self.options.creator:
            core_props.last_modified_by = self.options.creator

    def _find_style(self, docx_document: DocxDocument, name: str, style_type: Any) -> Any:
        """Look a style up by id or by display name."""
        for style in docx_document.styles:
            if style.type == style_type and (style.style_id == name or style.name == name):
                return style
        return None

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    def _write_paragraph(self, docx_document: DocxDocument, paragraph: Paragraph, block: ParagraphBlock) -> None:
        from docx.enum.style import WD_STYLE_TYPE
        from docx.shared import Twips

        if block.style_name:
            style = self._find_style(docx_document, block.style_name, WD_STYLE_TYPE.PARAGRAPH)
            if style is not None:
                paragraph.style = style
            else:
                logger.debug("Paragraph style %s not in document, using Normal", block.style_name)

        fmt = paragraph.paragraph_format
        if block.spacing_after is not None:
            fmt.space_after = Twips(block.spacing_after)
        if block.left_indent is not None:
            fmt.left_indent = Twips(block.left_indent)
        elif block.list_level > 0:
            fmt.left_indent = Twips(LIST_INDENT_PER_LEVEL * block.list_level)
        if block.right_indent is not None:
            fmt.right_indent = Twips(block.right_indent)
        if block.bottom_border:
            self._add_bottom_border(paragraph)
        if block.shading:
            self._set_paragraph_shading(paragraph, block.shading)

        self._write_runs(paragraph, block.runs)

    def _add_bottom_border(self, paragraph: Paragraph) -> None:
        from docx.oxml import OxmlElement
        from docx.oxml.ns import qn

        p_pr = paragraph._p.get_or_add_pPr()
        border = OxmlElement("w:pBdr")
        bottom = OxmlElement("w:bottom")
        bottom.set(qn("w:val"), "single")
        bottom.set(qn("w:sz"), THEMATIC_BREAK_BORDER_SIZE)
        bottom.set(qn("w:space"), "1")
        bottom.set(qn("w:color"), THEMATIC_BREAK_BORDER_COLOR)
        border.append(bottom)
        p_pr.insert_element_before(border, *_PPR_AFTER_BORDER)

    def _set_paragraph_shading(self, paragraph: Paragraph, color: str) -> None:
        from docx.oxml import OxmlElement
        from docx.oxml.ns import qn

        p_pr = paragraph._p.get_or_add_pPr()
        shading = OxmlElement("w:shd")
        shading.set(qn("w:val"), "clear")
        shading.set(qn("w:color"), "auto")
        shading.set(qn("w:fill"), color)
        # w:shd sits after w:pBdr in pPr
        p_pr.insert_element_before(shading, *_PPR_AFTER_BORDER[1:])

    def _write_runs(self, paragraph: Paragraph, runs: list[Run]) -> None:
        if not self.options.native_hyperlinks:
            for run in runs:
                self._add_run(paragraph, run)
            return

        for url, group in groupby(runs, key=lambda r: r.hyperlink):
            link_runs = list(group)
            if url is None:
                for run in link_runs:
                    self._add_run(paragraph, run)
                continue

            try:
                self._add_hyperlink(paragraph, url, link_runs)
            except Exception as e:
                logger.warning("Could not create hyperlink to %s, writing styled text instead: %s", url, e)
                for run in link_runs:
                    self._add_run(paragraph, run)

    def _add_run(self, paragraph: Paragraph, run: Run) -> None:
        if run.is_break:
            paragraph.add_run().add_break()
            return

        if run.image_src and self.options.embed_images and self._embed_image(paragraph, run.image_src):
            return

        docx_run = paragraph.add_run(run.text)
        self._apply_style(docx_run, run.style)

    def _apply_style(self, docx_run: Any, style: RunStyle) -> None:
        from docx.shared import Pt, RGBColor

        if style.bold:
            docx_run.bold = True
        if style.italic:
            docx_run.italic = True
        if style.underline:
            docx_run.underline = True
        if style.monospace:
            docx_run.font.name = self.options.code_font
        if style.font_size is not None:
            docx_run.font.size = Pt(style.font_size)
        if style.color:
            docx_run.font.color.rgb = RGBColor.from_string(style.color)

    def _add_hyperlink(self, paragraph: Paragraph, url: str, runs: list[Run]) -> None:
        """Wrap ``runs`` in a ``w:hyperlink`` pointing at an external relationship."""
        from docx.oxml import OxmlElement
        from docx.oxml.ns import qn
        from docx.text.run import Run as DocxRun

        r_id = paragraph.part.relate_to(url, HYPERLINK_RELATIONSHIP_TYPE, is_external=True)
        hyperlink = OxmlElement("w:hyperlink")
        hyperlink.set(qn("r:id"), r_id)

        for run in runs:
            r_element = OxmlElement("w:r")
            hyperlink.append(r_element)
            docx_run = DocxRun(r_element, paragraph)
            docx_run.text = run.text
            self._apply_style(docx_run, run.style)

        paragraph._p.append(hyperlink)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def _resolve_image(self, src: str) -> Optional[Path]:
        if urlparse(src).scheme not in ("", "file") or src.startswith("data:"):
            logger.debug("Not embedding non-local image %s", src)
            return None

        path = Path(urlparse(src).path) if src.startswith("file:") else Path(src)
        if not path.is_absolute() and self.base_path is not None:
            path = self.base_path / path
        return path

    def _embed_image(self, paragraph: Paragraph, src: str) -> bool:
        """Embed a local image; return False when only the alt text should be written."""
        from docx.shared import Inches

        path = self._resolve_image(src)
        if path is None:
            return False
        if path.suffix.lower() not in IMAGE_EXTENSIONS:
            logger.debug("Not embedding %s: unsupported image type", path)
            return False
        if not path.is_file():
            self._resource_error(f"Image not found: {path}")
            return False

        try:
            paragraph.add_run().add_picture(str(path), width=Inches(self.options.image_width_inches))
        except Exception as e:
            self._resource_error(f"Failed to embed image {path}: {e}", e)
            return False
        return True

    def _resource_error(self, message: str, error: Exception | None = None) -> None:
        logger.warning(message)
        if self.options.fail_on_resource_errors:
            raise RenderingError(message, rendering_stage="image_processing", original_error=error)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _write_table(self, docx_document: DocxDocument, block: TableBlock) -> None:
        from docx.enum.style import WD_STYLE_TYPE

        num_cols = block.column_count
        if not block.rows or num_cols == 0:
            logger.debug("Skipping table with no cells")
            return

        table = docx_document.add_table(rows=len(block.rows), cols=num_cols)

        if self.options.table_style:
            style = self._find_style(docx_document, self.options.table_style, WD_STYLE_TYPE.TABLE)
            if style is not None:
                table.style = style
            else:
                logger.debug("Table style %s not in document", self.options.table_style)

        self._set_table_width(table, block.width)

        for row_idx, row in enumerate(block.rows):
            if row_idx < block.header_rows:
                self._mark_header_row(table.rows[row_idx])
            for col_idx, cell in enumerate(row.cells):
                docx_cell = table.cell(row_idx, col_idx)
                self._write_paragraph(docx_document, docx_cell.paragraphs[0], cell.paragraph)

    def _set_table_width(self, table: Any, width: int) -> None:
        from docx.oxml import OxmlElement
        from docx.oxml.ns import qn

        tbl_pr = table._tbl.tblPr
        tbl_w = tbl_pr.find(qn("w:tblW"))
        if tbl_w is None:
            tbl_w = OxmlElement("w:tblW")
            tbl_pr.append(tbl_w)
        tbl_w.set(qn("w:w"), str(width))
        tbl_w.set(qn("w:type"), "dxa")

    def _mark_header_row(self, row: Any) -> None:
        from docx.oxml import OxmlElement

        tr_pr = row._tr.get_or_add_trPr()
        tr_pr.append(OxmlElement("w:tblHeader"))
