"""Helpers shared by the md2docx tests."""

import base64
from io import BytesIO

import docx
from docx.oxml.ns import qn

from md2docx.model import OutputDocument
from md2docx.options import DocxRendererOptions
from md2docx.sinks.docx import DocxSink

# Base64 encoded 1x1 pixel PNG
MINIMAL_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/w8AAn8B9FpQHLwAAAAASUVORK5CYII="
MINIMAL_PNG_BYTES = base64.b64decode(MINIMAL_PNG_B64)


def reopen(data: bytes):
    """Open serialized .docx bytes with python-docx."""
    return docx.Document(BytesIO(data))


def write_and_reopen(document: OutputDocument, options: DocxRendererOptions | None = None, **sink_kwargs):
    """Write ``document`` through a ``DocxSink`` and open the result."""
    return reopen(DocxSink(options, **sink_kwargs).write_to_bytes(document))


def hyperlink_elements(paragraph) -> list:
    """Return the ``w:hyperlink`` children of a python-docx paragraph."""
    return paragraph._p.findall(qn("w:hyperlink"))


def hyperlink_text(hyperlink) -> str:
    """Concatenate the text inside a ``w:hyperlink`` element."""
    return "".join(t.text or "" for t in hyperlink.iter(qn("w:t")))


def non_empty_paragraphs(docx_document) -> list:
    """Body paragraphs that carry text."""
    return [p for p in docx_document.paragraphs if p.text.strip()]
