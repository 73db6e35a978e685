#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST node classes, the visitor base and the tree helpers."""

import pytest

from md2docx.ast import (
    BlockQuote,
    BulletList,
    Code,
    Document,
    Emphasis,
    FencedCodeBlock,
    HardBreak,
    Heading,
    HTMLInline,
    Image,
    Link,
    ListItem,
    NodeVisitor,
    OrderedList,
    Paragraph,
    SoftBreak,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    extract_text,
    get_node_children,
)


class RecordingVisitor(NodeVisitor):
    """Visitor that records which visit method handled each node."""

    def __init__(self):
        self.calls = []

    def visit_heading(self, node):
        self.calls.append("heading")

    def generic_visit(self, node):
        self.calls.append(f"generic:{type(node).__name__}")


@pytest.mark.unit
class TestNodeConstruction:
    """Tests for node defaults."""

    def test_document_defaults(self):
        doc = Document()
        assert doc.children == []
        assert doc.metadata == {}
        assert doc.source_location is None

    def test_ordered_list_starts_at_one(self):
        assert OrderedList().start == 1

    def test_heading_level_is_not_validated(self):
        """Out-of-range levels are accepted; the renderer deals with them."""
        assert Heading(level=9).level == 9
        assert Heading(level=0).level == 0

    def test_default_lists_are_not_shared(self):
        first, second = Paragraph(), Paragraph()
        first.content.append(Text(content="x"))
        assert second.content == []


@pytest.mark.unit
class TestVisitorDispatch:
    """Tests for accept() and the NodeVisitor defaults."""

    def test_accept_calls_specific_method(self):
        visitor = RecordingVisitor()
        Heading(level=1).accept(visitor)
        assert visitor.calls == ["heading"]

    def test_unhandled_nodes_fall_back_to_generic_visit(self):
        visitor = RecordingVisitor()
        for node in (Paragraph(), ThematicBreak(), Text(content="x"), SoftBreak()):
            node.accept(visitor)
        assert visitor.calls == [
            "generic:Paragraph",
            "generic:ThematicBreak",
            "generic:Text",
            "generic:SoftBreak",
        ]

    def test_base_generic_visit_returns_none(self):
        assert Paragraph().accept(NodeVisitor()) is None


@pytest.mark.unit
class TestTreeHelpers:
    """Tests for get_node_children and extract_text."""

    def test_children_of_containers(self):
        item = ListItem(children=[Paragraph()])
        assert get_node_children(BulletList(items=[item])) == [item]
        assert get_node_children(BlockQuote(children=[item])) == [item]

    def test_children_of_table_include_header_first(self):
        header = TableRow(cells=[TableCell()])
        body = TableRow(cells=[TableCell()])
        assert get_node_children(Table(header=header, rows=[body])) == [header, body]
        assert get_node_children(Table(rows=[body])) == [body]

    def test_leaf_nodes_have_no_children(self):
        assert get_node_children(Text(content="x")) == []
        assert get_node_children(FencedCodeBlock(content="x")) == []

    def test_extract_text_nested(self):
        nodes = [
            Text(content="a "),
            Strong(content=[Emphasis(content=[Text(content="b")])]),
            Text(content=" "),
            Code(content="c"),
            Link(url="https://x", content=[Text(content=" d")]),
        ]
        assert extract_text(nodes) == "a b c d"

    def test_extract_text_images_breaks_and_html(self):
        nodes = [
            Image(url="i.png", alt_text="alt"),
            HardBreak(),
            HTMLInline(content="<b>"),
            Text(content="end"),
        ]
        assert extract_text(nodes) == "alt\nend"
