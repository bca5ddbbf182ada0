"""
PDF rendering via PyMuPDF.

The preview widget never parses PDFs itself; it asks this module for the
page count and for one page rasterised to PNG at a given zoom factor.

Documents that cannot be opened (malformed, empty, encrypted) raise
DocumentRenderError so callers can fall back to a plain download link.
"""

import fitz  # PyMuPDF
import structlog

logger = structlog.get_logger(__name__)


class DocumentRenderError(Exception):
    """The document could not be opened or rendered."""


def _open(data: bytes) -> fitz.Document:
    if not data:
        raise DocumentRenderError("Document is empty.")
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        logger.warning("pdf_open_failed", error=str(exc))
        raise DocumentRenderError("Failed to load PDF document.") from exc

    if not doc.is_pdf:
        doc.close()
        logger.warning("pdf_open_failed", error="not a PDF")
        raise DocumentRenderError("Failed to load PDF document.")
    if doc.needs_pass:
        doc.close()
        raise DocumentRenderError("PDF document is password protected.")
    if doc.page_count < 1:
        doc.close()
        raise DocumentRenderError("PDF document has no pages.")
    return doc


def count_pages(data: bytes) -> int:
    doc = _open(data)
    try:
        return doc.page_count
    finally:
        doc.close()


def render_page_png(data: bytes, *, page_number: int, zoom: float) -> bytes:
    """
    Rasterise one page (1-based) to PNG bytes.

    Args:
        data: Raw PDF bytes.
        page_number: 1-based page index, must be within the document.
        zoom: Scale factor applied on both axes (1.0 = 72 dpi).
    """
    doc = _open(data)
    try:
        if not 1 <= page_number <= doc.page_count:
            raise DocumentRenderError(
                f"Page {page_number} out of range (1-{doc.page_count})."
            )
        page = doc.load_page(page_number - 1)
        pix = page.get_pixmap(matrix=fitz.Matrix(zoom, zoom), alpha=False)
        return pix.tobytes("png")
    except (RuntimeError, ValueError) as exc:
        logger.warning("pdf_render_failed", page=page_number, zoom=zoom, error=str(exc))
        raise DocumentRenderError("Failed to render PDF page.") from exc
    finally:
        doc.close()
