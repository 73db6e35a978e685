#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/sinks/base.py
"""Base class for document sinks.

A sink takes a finished ``OutputDocument`` and serializes it to some
container format. Sinks also tell the block renderer which named paragraph
styles they can honour, so that headings can fall back to manual
formatting when a style is missing.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from md2docx.exceptions import InvalidOptionsError
from md2docx.model import OutputDocument
from md2docx.options.base import BaseRendererOptions


class DocumentSink(ABC):
    """Abstract base class for output document sinks.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Sink options

    Examples
    --------
    A sink that only collects paragraph text:

        >>> class TextSink(DocumentSink):
        ...     def available_styles(self):
        ...         return None
        ...
        ...     def write(self, document, output):
        ...         text = "\\n".join(p.text for p in document.paragraphs())
        ...         output.write(text.encode("utf-8"))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def available_styles(self) -> set[str] | None:
        """Return the paragraph style names this sink can apply.

        Returns
        -------
        set of str or None
            Style names, or None when every style name is accepted

        """

    @abstractmethod
    def write(self, document: OutputDocument, output: Union[str, Path, IO[bytes]]) -> None:
        """Serialize ``document`` to a path or binary stream.

        Parameters
        ----------
        document : OutputDocument
            Rendered document model
        output : str, Path, or IO[bytes]
            Output destination

        Raises
        ------
        RenderingError
            If the document cannot be produced or written

        """

    def write_to_bytes(self, document: OutputDocument) -> bytes:
        """Serialize ``document`` and return the bytes.

        Parameters
        ----------
        document : OutputDocument
            Rendered document model

        Returns
        -------
        bytes
            Serialized document

        """
        buffer = BytesIO()
        self.write(document, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, sink_name: str) -> None:
        """Raise ``InvalidOptionsError`` unless ``options`` is None or an ``expected_type``."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=sink_name,
                expected_type=expected_type,
                received_type=type(options),
            )
