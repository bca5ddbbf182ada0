"""
Tests for the PDF viewer state, renderer and preview selection.
"""
from uuid import uuid4

import pytest

from src.apps.certificates import previews
from src.apps.certificates.previews import PdfViewerState
from src.apps.files import services as file_services
from src.common.exceptions import NotFoundError
from src.integrations import pdf_renderer
from src.integrations.pdf_renderer import DocumentRenderError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestPdfViewerState:
    """Clamped widget transitions"""

    def test_starts_on_first_page_at_default_zoom(self):
        state = PdfViewerState.create(page_count=3)

        assert (state.page, state.zoom, state.fullscreen) == (1, 1.0, False)
        assert not state.has_error

    def test_page_navigation_is_clamped(self):
        state = PdfViewerState.create(page_count=3)

        assert state.prev_page().page == 1
        assert state.next_page().next_page().next_page().next_page().page == 3
        assert state.go_to(-5).page == 1
        assert state.go_to(99).page == 3

    def test_zoom_steps_and_bounds(self):
        state = PdfViewerState.create(page_count=1)

        assert state.zoom_in().zoom == 1.2
        assert state.zoom_out().zoom == 0.8
        assert state.zoom_out().zoom_out().zoom_out().zoom_out().zoom == previews.MIN_ZOOM

        zoomed = state
        for _ in range(20):
            zoomed = zoomed.zoom_in()
        assert zoomed.zoom == previews.MAX_ZOOM
        assert not zoomed.can_zoom_in

    def test_transitions_return_new_states(self):
        state = PdfViewerState.create(page_count=2)

        moved = state.next_page()

        assert state.page == 1
        assert moved.page == 2

    def test_toggle_fullscreen(self):
        state = PdfViewerState.create(page_count=1)

        assert state.toggle_fullscreen().fullscreen is True
        assert state.toggle_fullscreen().toggle_fullscreen().fullscreen is False

    def test_from_query_clamps_and_ignores_garbage(self):
        state = PdfViewerState.from_query(
            {"page": "12", "zoom": "9", "fullscreen": "1"}, page_count=4
        )
        assert (state.page, state.zoom, state.fullscreen) == (4, 3.0, True)

        state = PdfViewerState.from_query({"page": "abc", "zoom": "nan"}, page_count=4)
        assert (state.page, state.zoom, state.fullscreen) == (1, 1.0, False)

    def test_query_round_trip(self):
        state = PdfViewerState.create(page_count=5, page=3, zoom=1.4, fullscreen=True)

        assert state.as_query() == "page=3&zoom=1.4&fullscreen=1"

    def test_failed_state(self):
        state = PdfViewerState.failed("Failed to load PDF document.")

        assert state.has_error
        assert state.error == "Failed to load PDF document."


class TestPdfRenderer:
    """PyMuPDF wrapper"""

    def test_count_pages(self, pdf_bytes):
        assert pdf_renderer.count_pages(pdf_bytes) == 3

    def test_render_page_png(self, pdf_bytes):
        png = pdf_renderer.render_page_png(pdf_bytes, page_number=2, zoom=1.0)

        assert png.startswith(PNG_SIGNATURE)

    def test_zoom_enlarges_output(self, pdf_bytes):
        small = pdf_renderer.render_page_png(pdf_bytes, page_number=1, zoom=0.5)
        large = pdf_renderer.render_page_png(pdf_bytes, page_number=1, zoom=2.0)

        assert len(large) > len(small)

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"this is not a pdf",
            b"<html><body>x</body></html>",
            PNG_SIGNATURE + b"\x00" * 32,
        ],
        ids=["empty", "text", "html", "png"],
    )
    def test_malformed_documents_raise(self, data):
        with pytest.raises(DocumentRenderError):
            pdf_renderer.count_pages(data)

    def test_rendered_image_is_not_accepted_as_pdf(self, pdf_bytes):
        png = pdf_renderer.render_page_png(pdf_bytes, page_number=1, zoom=0.5)

        with pytest.raises(DocumentRenderError):
            pdf_renderer.count_pages(png)

    def test_out_of_range_page_raises(self, pdf_bytes):
        with pytest.raises(DocumentRenderError):
            pdf_renderer.render_page_png(pdf_bytes, page_number=4, zoom=1.0)


class TestOpenPdfViewer:
    """Viewer backed by the stored document"""

    def test_opens_stored_pdf(self, uploaded_pdf):
        viewer = previews.open_pdf_viewer(cert_id=uploaded_pdf.id, params={"page": "2"})

        assert viewer.state.page_count == 3
        assert viewer.state.page == 2
        assert viewer.next_url == f"/c/{uploaded_pdf.id}/viewer/?page=3&zoom=1"
        assert viewer.page_url == f"/c/{uploaded_pdf.id}/viewer/page.png?page=2&zoom=1"

    def test_missing_object_gives_fallback_state(self, uploaded_pdf):
        file_services.delete_object(key=uploaded_pdf.storage_key)

        viewer = previews.open_pdf_viewer(cert_id=uploaded_pdf.id)

        assert viewer.state.has_error

    def test_malformed_document_gives_fallback_state(self, make_certificate, png_file):
        key = file_services.store_object(key=f"{uuid4()}/broken.pdf", file=png_file)
        cert = make_certificate(file_type="application/pdf", storage_key=key)

        viewer = previews.open_pdf_viewer(cert_id=cert.id)

        assert viewer.state.has_error

    def test_image_certificates_have_no_viewer(self, make_certificate):
        cert = make_certificate(file_type="image/png")

        with pytest.raises(NotFoundError):
            previews.open_pdf_viewer(cert_id=cert.id)

    def test_private_certificates_have_no_viewer(self, uploaded_pdf):
        uploaded_pdf.is_public = False
        uploaded_pdf.save()

        with pytest.raises(NotFoundError):
            previews.open_pdf_viewer(cert_id=uploaded_pdf.id)

    def test_render_pdf_page_clamps(self, uploaded_pdf):
        png = previews.render_pdf_page(cert_id=uploaded_pdf.id, params={"page": "50", "zoom": "10"})

        assert png.startswith(PNG_SIGNATURE)
