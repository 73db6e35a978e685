#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document sinks that serialize the output document model."""

from md2docx.sinks.base import DocumentSink
from md2docx.sinks.docx import DocxSink

__all__ = ["DocumentSink", "DocxSink"]
