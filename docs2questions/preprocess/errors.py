"""Errors raised while loading documents."""

from __future__ import annotations

from typing import Optional


class DocumentError(Exception):
    """Base class for document loading failures."""


class UnsupportedFormat(DocumentError):
    """Raised when the input is not a PDF (declared type or magic header)."""


class CorruptDocument(DocumentError):
    """Raised when a PDF is accepted but its container or a page cannot be decoded.

    Attributes
    ----------
    page_number : Optional[int]
        1-based page that failed, or None when the container itself is broken.
    """

    def __init__(self, message: str, page_number: Optional[int] = None):
        super().__init__(message)
        self.page_number = page_number
