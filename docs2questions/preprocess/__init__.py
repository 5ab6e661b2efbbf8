"""Document loading and text extraction."""

from .errors import CorruptDocument, DocumentError, UnsupportedFormat
from .extractor import extract_text
from .pdfplumber_proc import PDFPlumberLoader
from .schema import (
    PDF_MEDIA_TYPE,
    DocumentMetadata,
    Page,
    ParsedDocument,
    RawDocument,
)

__all__ = [
    "PDFPlumberLoader",
    "extract_text",
    "RawDocument",
    "Page",
    "ParsedDocument",
    "DocumentMetadata",
    "PDF_MEDIA_TYPE",
    "DocumentError",
    "UnsupportedFormat",
    "CorruptDocument",
]
