"""Linear text extraction from parsed documents."""

from __future__ import annotations

from docs2questions.utils.logging import get_logger

from .schema import ParsedDocument

logger = get_logger(__name__)

PAGE_SEPARATOR = "\n"


def extract_text(doc: ParsedDocument) -> str:
    """Concatenate all text runs of a document into one string.

    Runs on a page are joined with a single space and pages with a single
    newline, so an N-page document always contains N-1 page separators (empty
    pages included). Runs are never reordered, deduplicated or normalized.
    """
    text = PAGE_SEPARATOR.join(page.text for page in doc.pages)
    logger.debug(f"Extracted {len(text)} chars from {doc.page_count} pages")
    return text
