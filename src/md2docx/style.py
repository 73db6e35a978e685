#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/style.py
"""Character style state carried down the inline tree.

A ``RunStyle`` is an immutable value. Descending into an emphasis, strong,
underline or link node produces a new value with one more flag switched on;
returning from the node simply drops it, so siblings never inherit a
nested node's formatting.

"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

from md2docx.constants import DEFAULT_LINK_COLOR

LINK_COLOR = DEFAULT_LINK_COLOR


@dataclass(frozen=True)
class RunStyle:
    """Formatting applied to a single run of text.

    Parameters
    ----------
    bold : bool, default = False
        Render the run in bold
    italic : bool, default = False
        Render the run in italics
    underline : bool, default = False
        Underline the run
    monospace : bool, default = False
        Use the code font
    color : str or None, default = None
        RGB hex colour override, e.g. ``"0000FF"``
    font_size : float or None, default = None
        Font size override in points

    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    monospace: bool = False
    color: Optional[str] = None
    font_size: Optional[float] = None

    def merge(self, **changes: Any) -> RunStyle:
        """Return a copy of this style with ``changes`` applied.

        Boolean flags are combined with logical OR: once an ancestor has
        switched a flag on, a descendant cannot switch it off again.

        Parameters
        ----------
        **changes
            Field values to apply

        Returns
        -------
        RunStyle
            New style value; ``self`` is left untouched

        """
        resolved: dict[str, Any] = {}
        for name, value in changes.items():
            current = getattr(self, name)
            if isinstance(current, bool):
                resolved[name] = current or bool(value)
            else:
                resolved[name] = value
        return replace(self, **resolved)

    @property
    def is_plain(self) -> bool:
        """Return True when no formatting is applied."""
        return self == PLAIN

    def to_dict(self) -> dict[str, Any]:
        """Return the style as a plain dictionary."""
        return asdict(self)


PLAIN = RunStyle()
BOLD = RunStyle(bold=True)
