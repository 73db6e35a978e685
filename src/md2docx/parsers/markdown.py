#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/parsers/markdown.py
"""Markdown to AST parser.

This module turns Markdown text into the md2docx AST using mistune 3 in
token mode (no HTML renderer). CommonMark is covered by mistune's core;
GFM pipe tables and ``^^underline^^`` come from mistune plugins. A leading
YAML front matter block is read with PyYAML and becomes the document's
metadata.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

import yaml

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
from md2docx.constants import DEPS_MARKDOWN
from md2docx.exceptions import FileAccessError, InvalidOptionsError, ParsingError
from md2docx.exceptions import FileNotFoundError as Md2DocxFileNotFoundError
from md2docx.options.markdown import MarkdownParserOptions
from md2docx.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

MarkdownInput = Union[str, Path, IO[bytes], bytes]

_FRONTMATTER_DELIMITER = "---"


class MarkdownParser:
    r"""Parse Markdown into an AST ``Document``.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Title\n\nSome **bold** text")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="markdown parser",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    @requires_dependencies("markdown parser", DEPS_MARKDOWN)
    def parse(self, input_data: MarkdownInput) -> Document:
        """Parse Markdown input into an AST document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Markdown text, a path to a Markdown file, raw bytes, or a binary
            stream. A short single-line string naming an existing file is
            read as a path.

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        FileNotFoundError
            If a ``Path`` input does not exist
        FileAccessError
            If the input file cannot be read
        ParsingError
            If mistune fails on the input

        """
        import mistune

        content = self._load_text_content(input_data)

        metadata: dict[str, Any] = {}
        if self.options.parse_frontmatter:
            content, metadata = self._extract_frontmatter(content)

        plugins = []
        if self.options.parse_tables:
            # Tables nested in quotes and list items need their own plugins
            plugins.extend(
                ["table", "mistune.plugins.table.table_in_quote", "mistune.plugins.table.table_in_list"]
            )
        if self.options.parse_underline:
            plugins.append("insert")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        try:
            tokens, _state = markdown.parse(content)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e!r}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens if isinstance(tokens, list) else [])
        if not self.options.extract_metadata:
            metadata = {}

        logger.debug("Parsed %d top-level blocks", len(children))
        return Document(children=children, metadata=metadata)

    @staticmethod
    def _decode(data: bytes) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError:
            logger.debug("Input is not valid UTF-8, decoding as latin-1")
            return data.decode("latin-1")

    def _read_file(self, path: Path) -> str:
        if not path.exists():
            raise Md2DocxFileNotFoundError(str(path))
        try:
            return self._decode(path.read_bytes())
        except OSError as e:
            raise FileAccessError(str(path), original_error=e) from e

    def _load_text_content(self, input_data: MarkdownInput) -> str:
        if isinstance(input_data, bytes):
            return self._decode(input_data)
        if isinstance(input_data, Path):
            return self._read_file(input_data)
        if isinstance(input_data, str):
            # Path components are capped at 255 characters on Linux
            if len(input_data) <= 260 and "\n" not in input_data:
                try:
                    candidate = Path(input_data)
                    if candidate.is_file():
                        return self._read_file(candidate)
                except OSError as e:
                    logger.debug("Input is not a readable path, treating it as Markdown: %s", e)
            return input_data

        data = input_data.read()
        return self._decode(data) if isinstance(data, bytes) else data

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Split a leading ``---`` YAML block off ``content``.

        Returns the remaining Markdown and the metadata mapping. Content
        without a complete front matter block is returned unchanged.
        """
        if not (content.startswith("---\n") or content.startswith("---\r\n")):
            return content, {}

        lines = content.splitlines(keepends=True)
        end_index = next(
            (i for i in range(1, len(lines)) if lines[i].strip() == _FRONTMATTER_DELIMITER),
            -1,
        )
        if end_index <= 0:
            return content, {}

        yaml_text = "".join(lines[1:end_index])
        remaining = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(yaml_text)
        except yaml.YAMLError as e:
            logger.warning("Ignoring malformed YAML front matter: %s", e)
            return remaining, {}

        if not isinstance(data, dict):
            logger.debug("Front matter is not a mapping, ignoring it")
            return remaining, {}
        return remaining, {str(key): value for key, value in data.items()}

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Optional[Node]:
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        if token_type in ("paragraph", "block_text"):
            # block_text is the body of a tight list item
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        if token_type == "block_code":
            return self._process_code_block(token)
        if token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        if token_type == "list":
            return self._process_list(token)
        if token_type == "table":
            return self._process_table(token)
        if token_type == "thematic_break":
            return ThematicBreak()
        if token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        if token_type != "blank_line":
            logger.debug("Ignoring unsupported block token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> Node:
        code = token.get("raw", "")
        if self.options.strip_code_trailing_newline and code.endswith("\n"):
            code = code[:-1]

        if token.get("style") == "indent":
            return IndentedCodeBlock(content=code)

        info = ((token.get("attrs") or {}).get("info") or "").strip()
        metadata = {"info_string": info} if info else {}
        language = info.split(maxsplit=1)[0] if info else None
        return FencedCodeBlock(content=code, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> Node:
        attrs = token.get("attrs") or {}
        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]
        if attrs.get("ordered", False):
            return OrderedList(start=attrs.get("start", 1), items=items)
        return BulletList(items=items)

    def _process_table(self, token: dict[str, Any]) -> Table:
        header: Optional[TableRow] = None
        rows: list[TableRow] = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells sit directly under table_head
                header = TableRow(cells=self._process_cells(section.get("children", [])))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(cells=self._process_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows)

    def _process_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            align = (cell_token.get("attrs") or {}).get("align")
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    metadata={"align": align} if align else {},
                )
            )
        return cells

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Node]:
        token_type = token.get("type", "")
        children = token.get("children", [])

        if token_type == "text":
            return Text(content=token.get("raw", ""))
        if token_type == "strong":
            return Strong(content=self._process_inline_tokens(children))
        if token_type == "emphasis":
            return Emphasis(content=self._process_inline_tokens(children))
        if token_type == "insert":
            return Underline(content=self._process_inline_tokens(children))
        if token_type == "codespan":
            return Code(content=token.get("raw", ""))
        if token_type == "link":
            attrs = token.get("attrs") or {}
            return Link(
                url=attrs.get("url", ""),
                content=self._process_inline_tokens(children),
                title=attrs.get("title"),
            )
        if token_type == "image":
            attrs = token.get("attrs") or {}
            alt_text = "".join(child.get("raw", "") for child in children if child.get("type") == "text")
            return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))
        if token_type == "softbreak":
            return SoftBreak()
        if token_type == "linebreak":
            return HardBreak()
        if token_type == "inline_html":
            return HTMLInline(content=token.get("raw", ""))

        logger.debug("Ignoring unsupported inline token: %s", token_type)
        return None


def markdown_to_ast(markdown_content: MarkdownInput, options: MarkdownParserOptions | None = None) -> Document:
    r"""Parse Markdown into an AST in one call.

    Parameters
    ----------
    markdown_content : str, Path, IO[bytes], or bytes
        Markdown to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)
