"""Plain-text extraction for the document formats WordFinder searches.

PyMuPDF (fitz) handles the page-based formats, python-docx handles Word
documents and BeautifulSoup strips markup. Anything else is decoded as
text unless it looks binary.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Protocol

import fitz  # PyMuPDF
from bs4 import BeautifulSoup
from docx import Document as DocxDocument

from wordfinder.utils.text import normalize_whitespace

LOGGER = logging.getLogger(__name__)

FITZ_EXTENSIONS = frozenset({".pdf", ".xps", ".oxps", ".epub", ".mobi", ".fb2", ".cbz", ".svg"})
DOCX_EXTENSIONS = frozenset({".docx", ".docm", ".dotx"})
MARKUP_EXTENSIONS = frozenset({".html", ".htm", ".xhtml", ".xml"})

# Bytes inspected when deciding whether an unknown file is text.
_SNIFF_BYTES = 8192


class ExtractionError(Exception):
    """Raised when a file cannot be turned into text."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class ContentExtractor(Protocol):
    def extract(self, path: Path) -> str:
        """Return the textual content of ``path`` or raise :class:`ExtractionError`."""
        ...


def extract_fitz_text(path: Path) -> str:
    """Extract text from a PyMuPDF-supported document page by page."""
    try:
        doc = fitz.open(path)
    except Exception as exc:
        raise ExtractionError(f"Cannot open document: {exc}", path) from exc

    parts = []
    try:
        for index in range(len(doc)):
            try:
                text = doc[index].get_text() or ""
            except Exception as exc:
                LOGGER.warning("Failed to read page %s in %s: %s", index, path, exc)
                continue
            if text:
                parts.append(text)
    finally:
        doc.close()
    return "\n".join(parts)


def extract_docx_text(path: Path) -> str:
    """Extract paragraph and table text from a Word document."""
    try:
        doc = DocxDocument(str(path))
    except Exception as exc:
        raise ExtractionError(f"Cannot open Word document: {exc}", path) from exc

    parts = [paragraph.text for paragraph in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            parts.append("  ".join(cell.text for cell in row.cells))
    return normalize_whitespace("\n".join(parts))


def extract_markup_text(path: Path) -> str:
    """Extract visible text from an HTML or XML file."""
    try:
        markup = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as exc:
        raise ExtractionError(f"Cannot read file: {exc}", path) from exc

    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup(["script", "style"]):
        tag.extract()
    return normalize_whitespace(soup.get_text("\n"))


def extract_plain_text(path: Path) -> str:
    """Decode a text file, rejecting content that looks binary."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ExtractionError(f"Cannot read file: {exc}", path) from exc

    if b"\x00" in data[:_SNIFF_BYTES]:
        raise ExtractionError("Unsupported binary format", path)
    return data.decode("utf-8", errors="replace")


class DefaultExtractor:
    """Dispatches extraction to a backend chosen by file extension."""

    def __init__(self) -> None:
        self._backends: Dict[str, Callable[[Path], str]] = {}
        for suffix in FITZ_EXTENSIONS:
            self._backends[suffix] = extract_fitz_text
        for suffix in DOCX_EXTENSIONS:
            self._backends[suffix] = extract_docx_text
        for suffix in MARKUP_EXTENSIONS:
            self._backends[suffix] = extract_markup_text

    def backend_for(self, path: Path) -> Callable[[Path], str]:
        return self._backends.get(path.suffix.lower(), extract_plain_text)

    def extract(self, path: Path) -> str:
        backend = self.backend_for(path)
        LOGGER.debug("Extracting %s with %s", path, backend.__name__)
        try:
            return backend(path)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Parser failed: {exc}", path) from exc
