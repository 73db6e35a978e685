#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/constants.py
"""Default values and shared constants for md2docx.

Spacing, indentation and table widths are expressed in twentieths of a point
(twips, ``dxa`` in OOXML terms), the unit Word itself stores.

"""

from __future__ import annotations

from typing import Literal

# ============================================================================
# Dependencies
# ============================================================================

DEPS_DOCX_RENDER = [("python-docx", "docx", ">=1.1.0")]
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# ============================================================================
# Paragraph styles
# ============================================================================

HEADING_STYLE_PREFIX = "Heading"
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Manual heading sizes used when a heading style is missing from the template
DEFAULT_HEADING_FONT_SIZES: dict[int, int] = {1: 24, 2: 20, 3: 16}
DEFAULT_HEADING_FALLBACK_SIZE = 14

# ============================================================================
# Spacing and indentation (twips)
# ============================================================================

HEADING_SPACING_AFTER = 200
PARAGRAPH_SPACING_AFTER = 150
CODE_BLOCK_SPACING_AFTER = 150
BLOCKQUOTE_SPACING_AFTER = 150
THEMATIC_BREAK_SPACING_AFTER = 200

BLOCKQUOTE_LEFT_INDENT = 720
BLOCKQUOTE_RIGHT_INDENT = 360
LIST_INDENT_PER_LEVEL = 360

# ============================================================================
# DOCX rendering defaults
# ============================================================================

DEFAULT_DOCX_FONT = "Calibri"
DEFAULT_DOCX_FONT_SIZE = 11
DEFAULT_DOCX_CODE_FONT = "Courier New"
DEFAULT_DOCX_CODE_FONT_SIZE = 10
DEFAULT_CODE_BACKGROUND: str | None = "EEEEEE"
DEFAULT_DOCX_TABLE_STYLE: str | None = None
DEFAULT_TABLE_WIDTH = 9000
DEFAULT_BULLET_GLYPH = "• "
DEFAULT_LINK_COLOR = "0000FF"
DEFAULT_IMAGE_WIDTH_INCHES = 4.0
DEFAULT_CREATOR = "md2docx"

HYPERLINK_RELATIONSHIP_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/hyperlink"
THEMATIC_BREAK_BORDER_SIZE = "6"
THEMATIC_BREAK_BORDER_COLOR = "auto"

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff")

# ============================================================================
# Run kinds
# ============================================================================

RunKind = Literal["text", "soft_break", "hard_break"]
ListKind = Literal["bullet", "ordered"]

# ============================================================================
# Configuration discovery
# ============================================================================

CONFIG_FILENAMES = [".md2docx.toml", ".md2docx.yaml", ".md2docx.yml", ".md2docx.json"]
CONFIG_ENV_VAR = "MD2DOCX_CONFIG"
PYPROJECT_TOOL_SECTION = "md2docx"

# ============================================================================
# CLI exit codes
# ============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
