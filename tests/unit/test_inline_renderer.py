#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_inline_renderer.py
"""Unit tests for InlineRenderer.

Tests cover:
- Style propagation through emphasis, strong and underline
- Code spans, links, images and breaks
- Unknown and raw HTML nodes
- Option-driven behaviour (soft breaks, link colour)

"""

from dataclasses import dataclass, field

import pytest

from md2docx.ast import (
    Code,
    Emphasis,
    HardBreak,
    HTMLInline,
    Image,
    Link,
    Node,
    SoftBreak,
    Strong,
    Text,
    Underline,
)
from md2docx.options import DocxRendererOptions
from md2docx.renderers.inline import InlineRenderer
from md2docx.style import BOLD, PLAIN


@dataclass
class Highlight(Node):
    """Inline container the renderer has no rule for."""

    content: list = field(default_factory=list)

    def accept(self, visitor):
        return visitor.generic_visit(self)


def texts(runs):
    return [run.text for run in runs]


@pytest.mark.unit
class TestTextAndFormatting:
    """Tests for text runs and style propagation."""

    def test_plain_text(self):
        runs = InlineRenderer().render_inline([Text(content="Hello")])
        assert texts(runs) == ["Hello"]
        assert runs[0].style == PLAIN
        assert runs[0].kind == "text"

    def test_each_text_node_creates_its_own_run(self):
        runs = InlineRenderer().render_inline([Text(content="a"), Text(content="b")])
        assert texts(runs) == ["a", "b"]

    def test_empty_text_produces_no_run(self):
        assert InlineRenderer().render_inline([Text(content="")]) == []

    def test_empty_input(self):
        assert InlineRenderer().render_inline([]) == []

    def test_strong_and_emphasis(self):
        runs = InlineRenderer().render_inline(
            [Strong(content=[Text(content="b")]), Emphasis(content=[Text(content="i")])]
        )
        assert runs[0].style.bold and not runs[0].style.italic
        assert runs[1].style.italic and not runs[1].style.bold

    def test_strong_inside_emphasis_is_bold_italic(self):
        runs = InlineRenderer().render_inline(
            [Emphasis(content=[Text(content="x "), Strong(content=[Text(content="y")]), Text(content=" z")])]
        )
        assert texts(runs) == ["x ", "y", " z"]
        assert runs[1].style.bold and runs[1].style.italic
        assert not runs[0].style.bold and not runs[2].style.bold
        assert all(run.style.italic for run in runs)

    def test_formatting_does_not_leak_to_siblings(self):
        runs = InlineRenderer().render_inline(
            [Strong(content=[Text(content="bold")]), Text(content=" plain")]
        )
        assert runs[1].style == PLAIN

    def test_underline(self):
        runs = InlineRenderer().render_inline([Underline(content=[Text(content="u")])])
        assert runs[0].style.underline

    def test_inherited_style(self):
        runs = InlineRenderer().render_inline([Text(content="x")], BOLD)
        assert runs[0].style.bold

    def test_code_span_is_monospace_and_literal(self):
        runs = InlineRenderer().render_inline([Code(content="**not bold**")])
        assert texts(runs) == ["**not bold**"]
        assert runs[0].style.monospace
        assert not runs[0].style.bold

    def test_code_span_keeps_enclosing_style(self):
        runs = InlineRenderer().render_inline([Strong(content=[Code(content="x")])])
        assert runs[0].style.monospace and runs[0].style.bold


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for hyperlink and image runs."""

    def test_link_label_is_visible_text(self):
        runs = InlineRenderer().render_inline(
            [Link(url="https://example.com", content=[Text(content="Example")])]
        )
        assert texts(runs) == ["Example"]
        assert runs[0].hyperlink == "https://example.com"
        assert runs[0].style.underline
        assert runs[0].style.color == "0000FF"

    def test_link_with_formatted_label(self):
        runs = InlineRenderer().render_inline(
            [Link(url="u", content=[Text(content="a "), Strong(content=[Text(content="b")])])]
        )
        assert texts(runs) == ["a ", "b"]
        assert all(run.hyperlink == "u" for run in runs)
        assert runs[1].style.bold and runs[1].style.underline

    def test_link_without_label_shows_url(self):
        runs = InlineRenderer().render_inline([Link(url="https://example.com")])
        assert texts(runs) == ["https://example.com"]
        assert runs[0].hyperlink == "https://example.com"

    def test_text_after_link_has_no_hyperlink(self):
        runs = InlineRenderer().render_inline(
            [Link(url="u", content=[Text(content="a")]), Text(content=" b")]
        )
        assert runs[1].hyperlink is None
        assert runs[1].style == PLAIN

    def test_link_colour_option(self):
        options = DocxRendererOptions(link_color="FF0000")
        runs = InlineRenderer(options).render_inline([Link(url="u", content=[Text(content="a")])])
        assert runs[0].style.color == "FF0000"

    def test_image_alt_text(self):
        runs = InlineRenderer().render_inline([Image(url="pic.png", alt_text="A picture")])
        assert texts(runs) == ["A picture"]
        assert runs[0].image_src == "pic.png"

    def test_image_without_alt_text_uses_placeholder(self):
        runs = InlineRenderer().render_inline([Image(url="pic.png")])
        assert texts(runs) == ["[Image: pic.png]"]


@pytest.mark.unit
class TestBreaksAndUnknownNodes:
    """Tests for line breaks, raw HTML and unrecognised nodes."""

    def test_soft_and_hard_breaks(self):
        runs = InlineRenderer().render_inline(
            [Text(content="a"), SoftBreak(), Text(content="b"), HardBreak(), Text(content="c")]
        )
        assert [run.kind for run in runs] == ["text", "soft_break", "text", "hard_break", "text"]
        assert runs[1].text == "" and runs[3].text == ""

    def test_soft_break_as_space(self):
        options = DocxRendererOptions(soft_break_as_space=True)
        runs = InlineRenderer(options).render_inline([Text(content="a"), SoftBreak(), Text(content="b")])
        assert texts(runs) == ["a", " ", "b"]
        assert all(run.kind == "text" for run in runs)

    def test_html_inline_is_skipped(self):
        runs = InlineRenderer().render_inline([Text(content="a"), HTMLInline(content="<br>"), Text(content="b")])
        assert texts(runs) == ["a", "b"]

    def test_unknown_container_recurses_with_same_style(self):
        runs = InlineRenderer().render_inline([Highlight(content=[Text(content="x")])], BOLD)
        assert texts(runs) == ["x"]
        assert runs[0].style == BOLD

    def test_returned_runs_are_fresh_objects(self):
        renderer = InlineRenderer()
        nodes = [Text(content="x")]
        first = renderer.render_inline(nodes)
        second = renderer.render_inline(nodes)
        assert first[0] is not second[0]
        assert first == second
