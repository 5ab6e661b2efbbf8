"""Schema models for loaded documents.

A `RawDocument` is the caller-owned byte buffer handed to a loader. Loaders
turn it into a `ParsedDocument`: an ordered tuple of `Page` objects, each
holding its text runs in content-stream order. Models are implemented with
standard library dataclasses and are immutable.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

PDF_MEDIA_TYPE = "application/pdf"
PDF_MAGIC = b"%PDF-"

# Runs on one page are joined with a single space
RUN_SEPARATOR = " "


@dataclass(frozen=True)
class RawDocument:
    """An opaque document buffer plus its declared media type.

    Attributes
    ----------
    data : bytes
        Raw document bytes.
    media_type : str
        Declared MIME type (e.g., "application/pdf").
    name : Optional[str]
        Display name of the upload, if known.
    """

    data: bytes
    media_type: str = PDF_MEDIA_TYPE
    name: Optional[str] = None

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    @property
    def base_media_type(self) -> str:
        """Media type without parameters, lower-cased."""
        return self.media_type.split(";", 1)[0].strip().lower()

    @classmethod
    def from_path(cls, path: str | Path) -> "RawDocument":
        """Read a file from disk and guess its media type from the name."""
        path = Path(path)
        guessed_type, _ = mimetypes.guess_type(path.name)
        return cls(
            data=path.read_bytes(),
            media_type=guessed_type or "application/octet-stream",
            name=path.name,
        )


@dataclass(frozen=True)
class Page:
    """One page of a parsed document.

    Attributes
    ----------
    number : int
        1-based page number.
    runs : Tuple[str, ...]
        Text runs in the order they appear in the page's content stream.
    """

    number: int
    runs: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return RUN_SEPARATOR.join(self.runs)


@dataclass
class DocumentMetadata:
    """Metadata about the loaded document and the load run.

    Attributes
    ----------
    source : Optional[str]
        Name of the input document, if known.
    page_count : int
        Number of pages decoded.
    size_bytes : Optional[int]
        Size of the input buffer.
    mime_type : Optional[str]
        Declared media type.
    processor_name : Optional[str]
        Loader that produced the document (e.g., "pdfplumber").
    latency : Optional[float]
        Load latency in milliseconds.
    """

    source: Optional[str] = None
    page_count: int = 0
    size_bytes: Optional[int] = None
    mime_type: Optional[str] = None
    processor_name: Optional[str] = None
    latency: Optional[float] = None


@dataclass(frozen=True)
class ParsedDocument:
    """Ordered pages of a document; page order equals document order."""

    pages: Tuple[Page, ...] = ()
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)

    @property
    def page_count(self) -> int:
        return len(self.pages)
