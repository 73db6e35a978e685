#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering Markdown ASTs to DOCX.

The same options object drives both halves of a conversion: the block and
inline renderers read the layout fields (glyphs, ladders, code size) and the
python-docx sink reads the output fields (fonts, template, hyperlinks,
images).
"""

import re
from dataclasses import dataclass, field

from md2docx.constants import (
    DEFAULT_BULLET_GLYPH,
    DEFAULT_CODE_BACKGROUND,
    DEFAULT_DOCX_CODE_FONT,
    DEFAULT_DOCX_CODE_FONT_SIZE,
    DEFAULT_DOCX_FONT,
    DEFAULT_DOCX_FONT_SIZE,
    DEFAULT_DOCX_TABLE_STYLE,
    DEFAULT_HEADING_FALLBACK_SIZE,
    DEFAULT_HEADING_FONT_SIZES,
    DEFAULT_IMAGE_WIDTH_INCHES,
    DEFAULT_LINK_COLOR,
    DEFAULT_TABLE_WIDTH,
)
from md2docx.options.base import BaseRendererOptions

_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


# src/md2docx/options/docx.py
@dataclass(frozen=True)
class DocxRendererOptions(BaseRendererOptions):
    """Configuration options for rendering an AST to a Word document.

    Parameters
    ----------
    default_font : str, default "Calibri"
        Font applied to the ``Normal`` style.
    default_font_size : int, default 11
        Size in points applied to the ``Normal`` style.
    code_font : str, default "Courier New"
        Font used for code blocks and inline code.
    code_font_size : int, default 10
        Size in points for code blocks.
    code_background : str or None, default "EEEEEE"
        RGB hex fill behind code blocks; None leaves them unshaded.
    heading_font_sizes : dict[int, int], default {1: 24, 2: 20, 3: 16}
        Manual heading sizes used when the template lacks a ``HeadingN`` style.
    heading_fallback_size : int, default 14
        Manual heading size for levels missing from ``heading_font_sizes``.
    table_style : str or None, default None
        Table style name applied when the template defines it.
    table_width : int, default 9000
        Preferred table width in twips.
    template_path : str or None, default None
        Path to a .docx template whose styles the output adopts.
    bullet_glyph : str, default "• "
        Literal prefix run for bullet list items.
    number_ordered_lists : bool, default True
        Prefix ordered list items with a literal ``"n. "`` run.
    native_hyperlinks : bool, default True
        Write links as clickable ``w:hyperlink`` elements instead of styled runs only.
    embed_images : bool, default True
        Embed local image files; otherwise only the alt text is written.
    image_width_inches : float, default 4.0
        Width of embedded images.
    soft_break_as_space : bool, default False
        Render soft line breaks as a single space instead of a line break.
    link_color : str, default "0000FF"
        RGB hex colour for link text.

    """

    default_font: str = field(default=DEFAULT_DOCX_FONT, metadata={"help": "Default font for body text"})
    default_font_size: int = field(default=DEFAULT_DOCX_FONT_SIZE, metadata={"help": "Default font size in points"})
    code_font: str = field(default=DEFAULT_DOCX_CODE_FONT, metadata={"help": "Font for code blocks and inline code"})
    code_font_size: int = field(default=DEFAULT_DOCX_CODE_FONT_SIZE, metadata={"help": "Font size for code blocks"})
    code_background: str | None = field(
        default=DEFAULT_CODE_BACKGROUND,
        metadata={"help": "RGB hex fill behind code blocks (None for no shading)"},
    )
    heading_font_sizes: dict[int, int] = field(
        default_factory=lambda: dict(DEFAULT_HEADING_FONT_SIZES),
        metadata={"help": "Manual heading sizes by level, used when a heading style is unavailable"},
    )
    heading_fallback_size: int = field(
        default=DEFAULT_HEADING_FALLBACK_SIZE,
        metadata={"help": "Manual heading size for levels without an explicit entry"},
    )
    table_style: str | None = field(
        default=DEFAULT_DOCX_TABLE_STYLE,
        metadata={"help": "Table style name (None = plain formatting)"},
    )
    table_width: int = field(default=DEFAULT_TABLE_WIDTH, metadata={"help": "Preferred table width in twips"})
    template_path: str | None = field(
        default=None,
        metadata={"help": "Path to .docx template file for styles (None = default blank document)"},
    )
    bullet_glyph: str = field(default=DEFAULT_BULLET_GLYPH, metadata={"help": "Prefix for bullet list items"})
    number_ordered_lists: bool = field(
        default=True,
        metadata={"help": "Prefix ordered list items with their number"},
    )
    native_hyperlinks: bool = field(
        default=True,
        metadata={"help": "Write clickable hyperlinks instead of styled text only"},
    )
    embed_images: bool = field(default=True, metadata={"help": "Embed local image files"})
    image_width_inches: float = field(
        default=DEFAULT_IMAGE_WIDTH_INCHES,
        metadata={"help": "Width of embedded images in inches"},
    )
    soft_break_as_space: bool = field(
        default=False,
        metadata={"help": "Render soft line breaks as spaces"},
    )
    link_color: str = field(default=DEFAULT_LINK_COLOR, metadata={"help": "RGB hex colour for link text"})

    def __post_init__(self) -> None:
        """Validate numeric ranges and colour format.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.default_font_size <= 0:
            raise ValueError(f"default_font_size must be positive, got {self.default_font_size}")
        if self.code_font_size <= 0:
            raise ValueError(f"code_font_size must be positive, got {self.code_font_size}")
        if self.heading_fallback_size <= 0:
            raise ValueError(f"heading_fallback_size must be positive, got {self.heading_fallback_size}")
        for level, size in self.heading_font_sizes.items():
            if size <= 0:
                raise ValueError(f"heading_font_sizes[{level}] must be positive, got {size}")
        if self.table_width <= 0:
            raise ValueError(f"table_width must be positive, got {self.table_width}")
        if self.image_width_inches <= 0:
            raise ValueError(f"image_width_inches must be positive, got {self.image_width_inches}")
        if not _HEX_COLOR.match(self.link_color):
            raise ValueError(f"link_color must be a 6-digit hex colour, got {self.link_color!r}")
        if self.code_background is not None and not _HEX_COLOR.match(self.code_background):
            raise ValueError(f"code_background must be a 6-digit hex colour, got {self.code_background!r}")

        # Config files deliver heading levels as string keys
        if any(not isinstance(level, int) for level in self.heading_font_sizes):
            object.__setattr__(
                self,
                "heading_font_sizes",
                {int(level): size for level, size in self.heading_font_sizes.items()},
            )

    def heading_size(self, level: int) -> int:
        """Return the manual font size for a heading level."""
        return self.heading_font_sizes.get(level, self.heading_fallback_size)
