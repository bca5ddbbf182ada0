"""
Certificate previews.

A certificate renders either as an inline image or as the paginated PDF
widget. The widget is server-driven: its control state lives in
PdfViewerState, is carried in query parameters, and every transition returns
a new, clamped state. Pages are rasterised by src.integrations.pdf_renderer.
"""

import math
from dataclasses import dataclass, replace
from typing import Literal
from urllib.parse import urlencode
from uuid import UUID

import structlog
from django.urls import reverse

from src.apps.certificates.models import Certificate
from src.apps.certificates.selectors import get_public_certificate
from src.apps.files import services as file_services
from src.common.exceptions import NotFoundError
from src.common.types import PreviewKind
from src.integrations import pdf_renderer
from src.integrations.pdf_renderer import DocumentRenderError

logger = structlog.get_logger(__name__)

MIN_ZOOM = 0.5
MAX_ZOOM = 3.0
ZOOM_STEP = 0.2
DEFAULT_ZOOM = 1.0


@dataclass(frozen=True)
class PdfPreview:
    url: str
    title: str
    viewer_url: str
    kind: Literal[PreviewKind.PDF] = PreviewKind.PDF
    template_name: str = "frontend/partials/pdf_preview.html"


@dataclass(frozen=True)
class ImagePreview:
    url: str
    title: str
    kind: Literal[PreviewKind.IMAGE] = PreviewKind.IMAGE
    template_name: str = "frontend/partials/image_preview.html"


Preview = PdfPreview | ImagePreview


def preview_for(certificate: Certificate) -> Preview:
    if certificate.preview_kind == PreviewKind.PDF:
        return PdfPreview(
            url=certificate.file_url,
            title=certificate.title,
            viewer_url=reverse(
                "frontend:pdf_viewer", kwargs={"cert_id": certificate.id}
            ),
        )
    return ImagePreview(url=certificate.file_url, title=certificate.title)


# ── Viewer state ─────────────────────────────────────────────────────────


def _clamp(value, low, high):
    return max(low, min(high, value))


def clamp_zoom(zoom: float) -> float:
    return round(_clamp(zoom, MIN_ZOOM, MAX_ZOOM), 2)


def _parse_int(raw, default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _parse_float(raw, default: float) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default


@dataclass(frozen=True)
class PdfViewerState:
    """
    page is 1-based and always within [1, page_count]; zoom is always within
    [MIN_ZOOM, MAX_ZOOM]. A state with ``error`` set is the fallback: only the
    direct download link is offered.
    """

    page: int = 1
    page_count: int = 1
    zoom: float = DEFAULT_ZOOM
    fullscreen: bool = False
    error: str = ""

    @classmethod
    def create(
        cls,
        *,
        page_count: int,
        page: int = 1,
        zoom: float = DEFAULT_ZOOM,
        fullscreen: bool = False,
    ) -> "PdfViewerState":
        page_count = max(1, page_count)
        return cls(
            page=_clamp(page, 1, page_count),
            page_count=page_count,
            zoom=clamp_zoom(zoom),
            fullscreen=fullscreen,
        )

    @classmethod
    def failed(cls, error: str) -> "PdfViewerState":
        return cls(error=error)

    @classmethod
    def from_query(cls, params, *, page_count: int) -> "PdfViewerState":
        """Build from request.GET; garbage values fall back to defaults."""
        return cls.create(
            page_count=page_count,
            page=_parse_int(params.get("page"), 1),
            zoom=_parse_float(params.get("zoom"), DEFAULT_ZOOM),
            fullscreen=params.get("fullscreen") in ("1", "true", "on"),
        )

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    @property
    def zoom_percent(self) -> int:
        return round(self.zoom * 100)

    @property
    def can_go_back(self) -> bool:
        return self.page > 1

    @property
    def can_go_forward(self) -> bool:
        return self.page < self.page_count

    @property
    def can_zoom_in(self) -> bool:
        return self.zoom < MAX_ZOOM

    @property
    def can_zoom_out(self) -> bool:
        return self.zoom > MIN_ZOOM

    def go_to(self, page: int) -> "PdfViewerState":
        return replace(self, page=_clamp(page, 1, self.page_count))

    def next_page(self) -> "PdfViewerState":
        return self.go_to(self.page + 1)

    def prev_page(self) -> "PdfViewerState":
        return self.go_to(self.page - 1)

    def zoom_in(self) -> "PdfViewerState":
        return replace(self, zoom=clamp_zoom(self.zoom + ZOOM_STEP))

    def zoom_out(self) -> "PdfViewerState":
        return replace(self, zoom=clamp_zoom(self.zoom - ZOOM_STEP))

    def toggle_fullscreen(self) -> "PdfViewerState":
        return replace(self, fullscreen=not self.fullscreen)

    def as_query(self) -> str:
        params = {"page": self.page, "zoom": f"{self.zoom:g}"}
        if self.fullscreen:
            params["fullscreen"] = "1"
        return urlencode(params)


@dataclass(frozen=True)
class PdfViewer:
    certificate: Certificate
    state: PdfViewerState

    @property
    def viewer_url(self) -> str:
        return reverse("frontend:pdf_viewer", kwargs={"cert_id": self.certificate.id})

    @property
    def page_url(self) -> str:
        base = reverse("frontend:pdf_page", kwargs={"cert_id": self.certificate.id})
        return f"{base}?{self.state.as_query()}"

    def link(self, state: PdfViewerState) -> str:
        return f"{self.viewer_url}?{state.as_query()}"

    @property
    def next_url(self) -> str:
        return self.link(self.state.next_page())

    @property
    def prev_url(self) -> str:
        return self.link(self.state.prev_page())

    @property
    def zoom_in_url(self) -> str:
        return self.link(self.state.zoom_in())

    @property
    def zoom_out_url(self) -> str:
        return self.link(self.state.zoom_out())

    @property
    def fullscreen_url(self) -> str:
        return self.link(self.state.toggle_fullscreen())


# ── Viewer operations ────────────────────────────────────────────────────


def _get_public_pdf(*, cert_id: UUID) -> Certificate:
    certificate = get_public_certificate(cert_id=cert_id)
    if certificate is None or certificate.preview_kind != PreviewKind.PDF:
        raise NotFoundError("Certificate not found.")
    return certificate


def _read_document(certificate: Certificate) -> bytes:
    try:
        return file_services.read_object(key=certificate.storage_key)
    except OSError as exc:
        logger.warning(
            "pdf_read_failed",
            cert_id=str(certificate.id),
            key=certificate.storage_key,
            error=str(exc),
        )
        raise DocumentRenderError("Failed to load PDF document.") from exc


def open_pdf_viewer(*, cert_id: UUID, params=None) -> PdfViewer:
    """
    Viewer for a public PDF certificate. Load failures do not raise; they
    come back as the fallback state.
    """
    certificate = _get_public_pdf(cert_id=cert_id)

    try:
        page_count = pdf_renderer.count_pages(_read_document(certificate))
    except DocumentRenderError as exc:
        return PdfViewer(certificate=certificate, state=PdfViewerState.failed(str(exc)))

    state = PdfViewerState.from_query(params or {}, page_count=page_count)
    return PdfViewer(certificate=certificate, state=state)


def render_pdf_page(*, cert_id: UUID, params=None) -> bytes:
    """
    PNG bytes for the page selected by ``params`` (page, zoom) of a public PDF
    certificate. Out-of-range values are clamped first.

    Raises:
        NotFoundError: unknown, private, or non-PDF certificate.
        DocumentRenderError: the document cannot be read or rendered.
    """
    certificate = _get_public_pdf(cert_id=cert_id)
    data = _read_document(certificate)
    state = PdfViewerState.from_query(params or {}, page_count=pdf_renderer.count_pages(data))
    return pdf_renderer.render_page_png(data, page_number=state.page, zoom=state.zoom)
