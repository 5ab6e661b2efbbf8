"""PDFPlumber-based document loader.

This module defines a loader that uses pdfplumber to turn an in-memory PDF
buffer into a `ParsedDocument`: one `Page` per PDF page, each carrying the
page's text runs in content-stream order.

Best for: PDFs with embedded text (not scanned images requiring OCR).
"""

from __future__ import annotations

import io
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any, List, Sequence

import pdfplumber

from docs2questions.utils.logging import get_logger

from .errors import CorruptDocument, UnsupportedFormat
from .schema import (
    PDF_MAGIC,
    PDF_MEDIA_TYPE,
    DocumentMetadata,
    Page,
    ParsedDocument,
    RawDocument,
)

logger = get_logger(__name__)


def _partition(indices: Sequence[int], parts: int) -> List[List[int]]:
    """Split page indices into at most `parts` contiguous, ordered batches."""
    if not indices:
        return []
    parts = max(1, min(parts, len(indices)))
    size, remainder = divmod(len(indices), parts)
    batches: List[List[int]] = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < remainder else 0)
        batches.append(list(indices[start:end]))
        start = end
    return batches


@dataclass(frozen=True)
class PDFPlumberLoader:
    """PDF loader using pdfplumber.

    All parser settings are instance state, so loaders with different
    settings can coexist in one process.

    Parameters
    ----------
    max_workers : int
        Upper bound on concurrent page-decode workers (default: 4). Values
        of 1 or less decode inline on the calling thread.
    x_tolerance : float
        Horizontal tolerance for grouping characters into words (default: 3).
    y_tolerance : float
        Vertical tolerance for grouping characters into words (default: 3).
    min_text_threshold : int
        Minimum number of characters expected from a text-based PDF. Fewer
        characters log a warning (default: 10).
    """

    max_workers: int = 4
    x_tolerance: float = 3
    y_tolerance: float = 3
    min_text_threshold: int = 10

    @classmethod
    def from_config(cls, config: Any) -> "PDFPlumberLoader":
        return cls(
            max_workers=int(config.get("loader.max_workers", 4)),
            x_tolerance=float(config.get("loader.x_tolerance", 3)),
            y_tolerance=float(config.get("loader.y_tolerance", 3)),
            min_text_threshold=int(config.get("loader.min_text_threshold", 10)),
        )

    def _check_format(self, raw: RawDocument) -> None:
        """Reject anything that is not declared and shaped as a PDF."""
        if raw.base_media_type != PDF_MEDIA_TYPE:
            raise UnsupportedFormat(
                f"Unsupported media type {raw.media_type!r}; expected {PDF_MEDIA_TYPE}"
            )
        if raw.data.lstrip()[: len(PDF_MAGIC)] != PDF_MAGIC:
            raise UnsupportedFormat(
                f"{raw.name or 'Document'} is not a PDF (missing %PDF- header)"
            )

    def _open(self, data: bytes) -> Any:
        try:
            return pdfplumber.open(io.BytesIO(data))
        except Exception as e:
            logger.error(f"Error opening PDF: {e}")
            raise CorruptDocument(f"PDF container could not be parsed: {e}") from e

    def _decode_page(self, pdf: Any, index: int) -> Page:
        number = index + 1
        try:
            words = pdf.pages[index].extract_words(
                x_tolerance=self.x_tolerance,
                y_tolerance=self.y_tolerance,
                keep_blank_chars=True,
                use_text_flow=True,
            )
        except Exception as e:
            logger.error(f"Failed to decode page {number}: {e}")
            raise CorruptDocument(
                f"Page {number} could not be decoded: {e}", page_number=number
            ) from e

        runs = tuple(word.get("text", "") for word in words if word.get("text"))
        logger.debug(f"Page {number}: extracted {len(runs)} text runs")
        return Page(number=number, runs=runs)

    def _decode_batch(self, data: bytes, indices: Sequence[int]) -> List[Page]:
        # Each worker owns its own parser handle; pdfminer objects are not shared.
        with self._open(data) as pdf:
            return [self._decode_page(pdf, index) for index in indices]

    def _count_pages(self, raw: RawDocument) -> int:
        with self._open(raw.data) as pdf:
            try:
                return len(pdf.pages)
            except Exception as e:
                logger.error(f"Error reading page tree of {raw.name or '<buffer>'}: {e}")
                raise CorruptDocument(f"PDF page tree could not be parsed: {e}") from e

    def load(self, raw: RawDocument) -> ParsedDocument:
        """Parse a PDF buffer into pages of text runs.

        Parameters
        ----------
        raw : RawDocument
            Caller-owned document buffer.

        Returns
        -------
        ParsedDocument
            Pages in document order. A PDF without pages yields an empty
            document.

        Raises
        ------
        UnsupportedFormat
            If the declared type is not ``application/pdf`` or the buffer is
            not a PDF. Raised before any parsing is attempted.
        CorruptDocument
            If the container or a page cannot be decoded.
        """
        self._check_format(raw)

        start = time.time()
        page_count = self._count_pages(raw)
        batches = _partition(range(page_count), self.max_workers)

        pages: List[Page] = []
        if len(batches) == 1:
            pages = self._decode_batch(raw.data, batches[0])
        elif batches:
            # map() yields in submission order, so pages stay in document order
            with ThreadPoolExecutor(max_workers=len(batches)) as pool:
                for batch_pages in pool.map(partial(self._decode_batch, raw.data), batches):
                    pages.extend(batch_pages)

        latency = (time.time() - start) * 1000.0
        total_chars = sum(len(run) for page in pages for run in page.runs)
        if pages and total_chars < self.min_text_threshold:
            logger.warning(
                f"PDF appears to be scanned or has minimal text: {raw.name or '<buffer>'}. "
                f"Extracted fewer than {self.min_text_threshold} characters."
            )

        logger.info(
            f"Loaded {len(pages)} pages ({total_chars} chars) from "
            f"{raw.name or '<buffer>'} in {latency:.1f}ms"
        )

        return ParsedDocument(
            pages=tuple(pages),
            metadata=DocumentMetadata(
                source=raw.name,
                page_count=len(pages),
                size_bytes=raw.size_bytes,
                mime_type=raw.media_type,
                processor_name="pdfplumber",
                latency=latency,
            ),
        )
