"""Shared fixtures for docs2questions tests."""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Union

import pytest

PDF_BYTES = b"%PDF-1.4\n%fake\n"

PageContent = Union[Sequence[str], Exception]


class DummyPage:
    """Stands in for a pdfplumber page; yields one word dict per run."""

    def __init__(self, content: PageContent):
        self.content = content
        self.calls: List[dict] = []

    def extract_words(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.content, Exception):
            raise self.content
        return [
            {"text": text, "x0": 0.0, "top": 0.0, "x1": 1.0, "bottom": 1.0}
            for text in self.content
        ]


class DummyPDF:
    def __init__(self, pages: Sequence[PageContent]):
        self.pages = [DummyPage(content) for content in pages]

    def __enter__(self):
        return self

    def __exit__(self, *args):
        pass


@pytest.fixture(autouse=True)
def _reset_package_logging():
    """Undo handler/propagation changes made by logging setup helpers."""
    yield
    root = logging.getLogger("docs2questions")
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def pdf_document():
    """A RawDocument that passes the PDF format checks."""
    from docs2questions.preprocess.schema import RawDocument

    return RawDocument(data=PDF_BYTES, media_type="application/pdf", name="test.pdf")


@pytest.fixture
def fake_pdf(monkeypatch) -> Callable[[Sequence[PageContent]], List[DummyPDF]]:
    """Replace pdfplumber.open with a document made of the given pages.

    Returns the list of DummyPDF instances opened so far, so tests can
    inspect how pages were decoded.
    """
    opened: List[DummyPDF] = []

    def install(pages: Sequence[PageContent]) -> List[DummyPDF]:
        def dummy_open(stream):
            pdf = DummyPDF(pages)
            opened.append(pdf)
            return pdf

        monkeypatch.setattr(
            "docs2questions.preprocess.pdfplumber_proc.pdfplumber.open", dummy_open
        )
        return opened

    return install
