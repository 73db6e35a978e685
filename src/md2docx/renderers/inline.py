#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/renderers/inline.py
"""Inline renderer: flattens inline AST nodes into styled runs.

The renderer walks the inline tree left to right. Container nodes
(emphasis, strong, underline, links) pass a derived ``RunStyle`` to their
children; leaf nodes emit runs. Every text leaf produces a fresh ``Run``,
so a caller's runs are never modified after they are returned.

"""

from __future__ import annotations

import logging
from typing import Optional

from md2docx.ast.nodes import (
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
    get_node_children,
)
from md2docx.model import Run
from md2docx.options.docx import DocxRendererOptions
from md2docx.style import PLAIN, RunStyle

logger = logging.getLogger(__name__)


class InlineRenderer:
    """Convert inline AST nodes into a flat list of runs.

    Parameters
    ----------
    options : DocxRendererOptions or None, default = None
        Rendering options; only ``link_color`` and ``soft_break_as_space``
        are consulted here

    Examples
    --------
        >>> from md2docx.ast import Strong, Text
        >>> runs = InlineRenderer().render_inline([Text(content="a "), Strong(content=[Text(content="b")])])
        >>> [(run.text, run.style.bold) for run in runs]
        [('a ', False), ('b', True)]

    """

    def __init__(self, options: DocxRendererOptions | None = None):
        self.options = options or DocxRendererOptions()

    def render_inline(self, nodes: list[Node], style: RunStyle = PLAIN) -> list[Run]:
        """Render a sequence of inline nodes under ``style``.

        Parameters
        ----------
        nodes : list of Node
            Inline nodes in document order
        style : RunStyle, default = PLAIN
            Style inherited from the enclosing context

        Returns
        -------
        list of Run
            Runs in document order; empty when the nodes carry no text

        """
        return self._render(nodes, style, None)

    def _render(self, nodes: list[Node], style: RunStyle, hyperlink: Optional[str]) -> list[Run]:
        runs: list[Run] = []
        for node in nodes:
            if isinstance(node, Text):
                if node.content:
                    runs.append(Run(text=node.content, style=style, hyperlink=hyperlink))

            elif isinstance(node, Strong):
                runs.extend(self._render(node.content, style.merge(bold=True), hyperlink))

            elif isinstance(node, Emphasis):
                runs.extend(self._render(node.content, style.merge(italic=True), hyperlink))

            elif isinstance(node, Underline):
                runs.extend(self._render(node.content, style.merge(underline=True), hyperlink))

            elif isinstance(node, Code):
                if node.content:
                    runs.append(Run(text=node.content, style=style.merge(monospace=True), hyperlink=hyperlink))

            elif isinstance(node, Link):
                runs.extend(self._render_link(node, style))

            elif isinstance(node, Image):
                runs.append(self._render_image(node, style, hyperlink))

            elif isinstance(node, SoftBreak):
                if self.options.soft_break_as_space:
                    runs.append(Run(text=" ", style=style, hyperlink=hyperlink))
                else:
                    runs.append(Run(text="", style=style, kind="soft_break"))

            elif isinstance(node, HardBreak):
                runs.append(Run(text="", style=style, kind="hard_break"))

            elif isinstance(node, HTMLInline):
                logger.debug("Skipping raw inline HTML: %r", node.content[:40])

            else:
                children = get_node_children(node)
                if children:
                    runs.extend(self._render(children, style, hyperlink))
                else:
                    logger.debug("Skipping unsupported inline node: %s", type(node).__name__)

        return runs

    def _render_link(self, node: Link, style: RunStyle) -> list[Run]:
        link_style = style.merge(underline=True, color=self.options.link_color)
        runs = self._render(node.content, link_style, node.url)

        if not any(run.text for run in runs) and node.url:
            # A link without visible text shows its destination instead
            runs.append(Run(text=node.url, style=link_style, hyperlink=node.url))
        return runs

    def _render_image(self, node: Image, style: RunStyle, hyperlink: Optional[str]) -> Run:
        text = node.alt_text or f"[Image: {node.url}]"
        return Run(text=text, style=style, hyperlink=hyperlink, image_src=node.url or None)
