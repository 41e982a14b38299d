"""Extract plain text from an uploaded PDF resume."""
from __future__ import annotations

import io
import mimetypes
import re
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from hirelens.exceptions import EmptyExtractionError, FileTypeError, PdfParseError
from hirelens.log import get_logger

log = get_logger(__name__)

PDF_MIME_TYPE = "application/pdf"


def _fix_spacing(text: str) -> str:
    """Re-insert spaces when PDF extraction merges words together.

    Detects the problem by checking if the space-to-character ratio is
    abnormally low, then applies heuristic space insertion.
    """
    if not text or len(text) < 50:
        return text
    space_ratio = text.count(" ") / len(text)
    if space_ratio > 0.08:
        return text

    log.debug("Low space ratio (%.2f%%) — applying spacing fix", space_ratio * 100)
    fixed = re.sub(r"([a-z])([A-Z])", r"\1 \2", text)
    fixed = re.sub(r"([a-zA-Z])(\d)", r"\1 \2", fixed)
    fixed = re.sub(r"(\d)([a-zA-Z])", r"\1 \2", fixed)
    fixed = re.sub(r"([.!?,;:])([A-Za-z])", r"\1 \2", fixed)
    return fixed


def guess_content_type(path: Path) -> str:
    return mimetypes.guess_type(path.name)[0] or "application/octet-stream"


def check_content_type(content_type: str | None) -> None:
    ct = (content_type or "").split(";")[0].strip().lower()
    if ct != PDF_MIME_TYPE:
        raise FileTypeError("Please upload a PDF file.")


def extract_pdf_text(data: bytes, content_type: str | None = PDF_MIME_TYPE) -> str:
    """Return the text of every page, in page order, joined by newlines."""
    check_content_type(content_type)
    if not data:
        raise EmptyExtractionError("The uploaded file is empty.")

    try:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            reader.decrypt("")
        pages: list[str] = []
        for page in reader.pages:
            raw = page.extract_text() or ""
            pages.append(_fix_spacing(raw))
    except (PdfReadError, ValueError, KeyError, OSError) as exc:
        log.warning("PDF parsing failed: %s", exc)
        raise PdfParseError("Failed to parse PDF file.") from exc

    text = "\n".join(pages).strip()
    if not text:
        raise EmptyExtractionError(
            "Could not extract text from the PDF. The file might be empty or image-based."
        )
    log.info("Extracted %d chars from %d PDF page(s)", len(text), len(pages))
    return text
