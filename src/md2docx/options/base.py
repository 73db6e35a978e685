#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for parser and renderer options.

Options are frozen dataclasses. Each field carries a ``help`` entry in its
metadata, which the configuration loader uses when reporting unknown keys.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2docx.constants import DEFAULT_CREATOR


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all option fields, in declaration order."""
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    fail_on_resource_errors : bool, default=False
        Whether to raise RenderingError when a resource (such as a local
        image) cannot be embedded. If False, a warning is logged and the
        image's alt text is written instead.
    creator : str or None, default="md2docx"
        Creator application name for document metadata. Set to None to
        leave the creator property untouched.

    """

    fail_on_resource_errors: bool = field(
        default=False,
        metadata={"help": "Raise RenderingError on resource failures (images) instead of logging warnings"},
    )
    creator: str | None = field(
        default=DEFAULT_CREATOR,
        metadata={"help": "Creator application name for document metadata (None = leave unset)"},
    )

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    extract_metadata : bool, default=True
        Whether to copy document metadata onto ``Document.metadata``

    """

    extract_metadata: bool = field(
        default=True,
        metadata={"help": "Copy document metadata (front matter) onto the document"},
    )
