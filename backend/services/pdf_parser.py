"""PDF text extraction for the upload route.

The audit engine only ever sees the plain text produced here.
"""

import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)


def extract_text(pdf_bytes: bytes) -> str:
    """Plain text of every page, pages separated by a newline.

    Raises whatever pdfplumber raises for bytes that are not a readable PDF.
    """
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        page_texts = [page.extract_text() or "" for page in pdf.pages]
    text = "\n".join(page_texts).strip()
    logger.debug("Extracted %d chars from %d page(s)", len(text), len(page_texts))
    return text


def has_enough_text(text: str, min_chars: int) -> bool:
    """Caller-side guard: extraction produced something worth auditing."""
    return len(text.strip()) >= min_chars
