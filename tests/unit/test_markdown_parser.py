#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for MarkdownParser.

Tests cover:
- Block constructs: headings, paragraphs, lists, code, quotes, tables
- Inline constructs: emphasis, strong, underline, code, links, images, breaks
- Front matter and metadata options
- Input types: text, paths, bytes and streams
- Error handling for missing files and wrong option types

"""

import io
import logging

import pytest

from md2docx.ast import (
    BlockQuote,
    BulletList,
    Code,
    Emphasis,
    FencedCodeBlock,
    HardBreak,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    IndentedCodeBlock,
    Link,
    OrderedList,
    Paragraph,
    SoftBreak,
    Strong,
    Table,
    ThematicBreak,
    Underline,
    extract_text,
)
from md2docx.exceptions import FileNotFoundError as Md2DocxFileNotFoundError
from md2docx.exceptions import InvalidOptionsError
from md2docx.options import DocxRendererOptions, MarkdownParserOptions
from md2docx.parsers.markdown import MarkdownParser, markdown_to_ast


def parse(markdown: str, **options):
    return MarkdownParser(MarkdownParserOptions(**options) if options else None).parse(markdown)


def first_inline(markdown: str, node_type):
    paragraph = parse(markdown).children[0]
    return next(node for node in paragraph.content if isinstance(node, node_type))


@pytest.mark.unit
class TestBlocks:
    """Tests for block-level constructs."""

    def test_heading_levels(self):
        doc = parse("# One\n\n### Three\n\n###### Six")
        assert [child.level for child in doc.children] == [1, 3, 6]
        assert all(isinstance(child, Heading) for child in doc.children)
        assert extract_text(doc.children[1].content) == "Three"

    def test_paragraphs(self):
        doc = parse("First paragraph.\n\nSecond paragraph.")
        assert len(doc.children) == 2
        assert all(isinstance(child, Paragraph) for child in doc.children)
        assert extract_text(doc.children[1].content) == "Second paragraph."

    def test_blank_lines_produce_no_nodes(self):
        doc = parse("\n\nText\n\n\n")
        assert len(doc.children) == 1

    def test_bullet_list_with_nesting(self):
        doc = parse("- A\n- B\n  - B1\n- C")
        bullet = doc.children[0]
        assert isinstance(bullet, BulletList)
        assert len(bullet.items) == 3
        second = bullet.items[1]
        assert extract_text(second.children[0].content) == "B"
        nested = second.children[1]
        assert isinstance(nested, BulletList)
        assert extract_text(nested.items[0].children[0].content) == "B1"

    def test_ordered_list_start(self):
        doc = parse("3. Third\n4. Fourth")
        ordered = doc.children[0]
        assert isinstance(ordered, OrderedList)
        assert ordered.start == 3
        assert len(ordered.items) == 2

    def test_ordered_list_default_start(self):
        assert parse("1. one\n2. two").children[0].start == 1

    def test_fenced_code_block(self):
        doc = parse('```python\ndef hello():\n    print("hi")\n```')
        code = doc.children[0]
        assert isinstance(code, FencedCodeBlock)
        assert code.language == "python"
        assert code.content == 'def hello():\n    print("hi")'

    def test_fenced_code_keeps_trailing_newline_when_asked(self):
        code = parse("```\nx = 1\n```", strip_code_trailing_newline=False).children[0]
        assert code.content == "x = 1\n"
        assert code.language is None

    def test_info_string_with_attributes(self):
        code = parse("```python title=demo\nx\n```").children[0]
        assert code.language == "python"
        assert code.metadata["info_string"] == "python title=demo"

    def test_indented_code_block(self):
        code = parse("Intro\n\n    indented code\n    more").children[1]
        assert isinstance(code, IndentedCodeBlock)
        assert code.content == "indented code\nmore"

    def test_block_quote(self):
        quote = parse("> Quoted text\n> continues here.").children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)
        assert "Quoted text" in extract_text(quote.children[0].content)

    def test_nested_block_quote(self):
        quote = parse("> outer\n>\n> > inner").children[0]
        assert isinstance(quote.children[-1], BlockQuote)

    def test_thematic_break(self):
        doc = parse("before\n\n---\n\nafter")
        assert isinstance(doc.children[1], ThematicBreak)

    def test_table(self):
        table = parse("| H1 | H2 |\n|:---|---:|\n| a | b |\n| c | d |").children[0]
        assert isinstance(table, Table)
        assert [extract_text(cell.content) for cell in table.header.cells] == ["H1", "H2"]
        assert len(table.rows) == 2
        assert [extract_text(cell.content) for cell in table.rows[1].cells] == ["c", "d"]
        assert table.header.cells[0].metadata["align"] == "left"
        assert table.header.cells[1].metadata["align"] == "right"

    def test_table_inside_block_quote(self):
        quote = parse("> | A | B |\n> |---|---|\n> | c | d |\n").children[0]
        assert isinstance(quote, BlockQuote)
        table = quote.children[0]
        assert isinstance(table, Table)
        assert [extract_text(cell.content) for cell in table.header.cells] == ["A", "B"]
        assert [extract_text(cell.content) for cell in table.rows[0].cells] == ["c", "d"]

    def test_table_inside_list_item(self):
        bullet = parse("- item\n\n  | A | B |\n  |---|---|\n  | c | d |\n").children[0]
        assert isinstance(bullet, BulletList)
        tables = [child for child in bullet.items[0].children if isinstance(child, Table)]
        assert len(tables) == 1
        assert [extract_text(cell.content) for cell in tables[0].rows[0].cells] == ["c", "d"]

    def test_tables_disabled(self):
        doc = parse("| H1 | H2 |\n|----|----|\n| a | b |", parse_tables=False)
        assert not any(isinstance(child, Table) for child in doc.children)

    def test_html_block(self):
        doc = parse("<div>\nraw\n</div>")
        assert isinstance(doc.children[0], HTMLBlock)
        assert "<div>" in doc.children[0].content


@pytest.mark.unit
class TestInline:
    """Tests for inline constructs."""

    def test_strong_and_emphasis(self):
        paragraph = parse("**bold** and *italic*").children[0]
        assert isinstance(paragraph.content[0], Strong)
        assert any(isinstance(node, Emphasis) for node in paragraph.content)

    def test_nested_emphasis(self):
        emphasis = first_inline("*a **b** c*", Emphasis)
        assert any(isinstance(node, Strong) for node in emphasis.content)

    def test_underline(self):
        underline = first_inline("some ^^underlined^^ text", Underline)
        assert extract_text(underline.content) == "underlined"

    def test_underline_disabled(self):
        paragraph = parse("some ^^underlined^^ text", parse_underline=False).children[0]
        assert not any(isinstance(node, Underline) for node in paragraph.content)
        assert "^^underlined^^" in extract_text(paragraph.content)

    def test_code_span(self):
        code = first_inline("use `print()` here", Code)
        assert code.content == "print()"

    def test_link(self):
        link = first_inline('see [the docs](https://example.com "Docs")', Link)
        assert link.url == "https://example.com"
        assert link.title == "Docs"
        assert extract_text(link.content) == "the docs"

    def test_image(self):
        image = first_inline("![A cat](cat.png)", Image)
        assert image.url == "cat.png"
        assert image.alt_text == "A cat"

    def test_soft_and_hard_breaks(self):
        soft = parse("line one\nline two").children[0]
        assert any(isinstance(node, SoftBreak) for node in soft.content)
        hard = parse("line one  \nline two").children[0]
        assert any(isinstance(node, HardBreak) for node in hard.content)

    def test_inline_html(self):
        html = first_inline("a <span>b</span>", HTMLInline)
        assert html.content == "<span>"


@pytest.mark.unit
class TestFrontMatter:
    """Tests for YAML front matter handling."""

    def test_front_matter_becomes_metadata(self):
        doc = parse("---\ntitle: Report\nkeywords: [a, b]\n---\n# Heading")
        assert doc.metadata == {"title": "Report", "keywords": ["a", "b"]}
        assert isinstance(doc.children[0], Heading)

    def test_front_matter_removed_from_body(self):
        doc = parse("---\ntitle: Report\n---\nBody")
        assert len(doc.children) == 1
        assert extract_text(doc.children[0].content) == "Body"

    def test_malformed_front_matter_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="md2docx.parsers.markdown"):
            doc = parse("---\ntitle: [unclosed\n---\nBody")
        assert doc.metadata == {}
        assert "front matter" in caplog.text

    def test_non_mapping_front_matter_ignored(self):
        doc = parse("---\n- a\n- b\n---\nBody")
        assert doc.metadata == {}
        assert extract_text(doc.children[0].content) == "Body"

    def test_unterminated_front_matter_left_alone(self):
        doc = parse("---\ntitle: x\n\nBody")
        assert doc.metadata == {}

    def test_extract_metadata_disabled(self):
        doc = parse("---\ntitle: Report\n---\nBody", extract_metadata=False)
        assert doc.metadata == {}
        assert len(doc.children) == 1

    def test_front_matter_parsing_disabled(self):
        doc = parse("---\ntitle: Report\n---\nBody", parse_frontmatter=False)
        assert doc.metadata == {}
        assert isinstance(doc.children[0], ThematicBreak)


@pytest.mark.unit
class TestInputs:
    """Tests for accepted input types and input errors."""

    def test_path_input(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text("# From file", encoding="utf-8")
        doc = MarkdownParser().parse(path)
        assert extract_text(doc.children[0].content) == "From file"

    def test_string_path_input(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text("# From file", encoding="utf-8")
        doc = MarkdownParser().parse(str(path))
        assert isinstance(doc.children[0], Heading)

    def test_bytes_input_with_bom(self):
        doc = MarkdownParser().parse("\ufeff# Title".encode("utf-8"))
        assert isinstance(doc.children[0], Heading)

    def test_latin1_bytes(self):
        doc = MarkdownParser().parse("caf\xe9".encode("latin-1"))
        assert extract_text(doc.children[0].content) == "caf\xe9"

    def test_stream_input(self):
        doc = MarkdownParser().parse(io.BytesIO(b"**x**"))
        assert isinstance(doc.children[0].content[0], Strong)

    def test_missing_path(self, tmp_path):
        with pytest.raises(Md2DocxFileNotFoundError):
            MarkdownParser().parse(tmp_path / "missing.md")

    def test_plain_string_not_treated_as_path(self):
        doc = MarkdownParser().parse("missing.md")
        assert extract_text(doc.children[0].content) == "missing.md"

    def test_empty_input(self):
        doc = MarkdownParser().parse("")
        assert doc.children == []
        assert doc.metadata == {}

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(DocxRendererOptions())

    def test_module_level_helper(self):
        doc = markdown_to_ast("# Hi")
        assert isinstance(doc.children[0], Heading)
