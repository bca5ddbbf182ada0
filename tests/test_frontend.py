"""
Tests for the server-rendered pages.
"""
from uuid import uuid4

import pytest

from src.apps.certificates.models import Certificate
from src.apps.files import services as file_services


@pytest.mark.django_db
class TestPages:
    """Routes and thin pages"""

    def test_root_redirects_to_login(self, client):
        response = client.get("/")

        assert response.status_code == 302
        assert response["Location"] == "/login/"

    @pytest.mark.parametrize("path", ["/login/", "/register/", "/upload/", "/profile/"])
    def test_thin_pages_render(self, client, path):
        assert client.get(path).status_code == 200

    def test_upload_page_checks_size_before_type(self, client):
        html = client.get("/upload/").content.decode()

        assert html.index("file.size > MAX_SIZE") < html.index("ALLOWED.includes(file.type)")

    def test_unknown_route_renders_not_found_page(self, client):
        response = client.get("/definitely/not/here/")

        assert response.status_code == 404
        assert b"Page not found" in response.content


@pytest.mark.django_db
class TestExplorePage:
    """Public feed and htmx search"""

    def test_full_page(self, client, make_certificate):
        make_certificate(title="AWS Developer")
        make_certificate(title="Hidden AWS", is_public=False)

        response = client.get("/explore/")

        assert response.status_code == 200
        assert b"<html" in response.content
        assert b"AWS Developer" in response.content
        assert b"Hidden AWS" not in response.content

    def test_htmx_search_returns_fragment(self, client, make_certificate):
        make_certificate(title="AWS Developer")
        make_certificate(title="Azure Fundamentals")

        response = client.get("/explore/", {"q": "aws"}, headers={"HX-Request": "true"})

        assert response.status_code == 200
        assert b"<html" not in response.content
        assert b"AWS Developer" in response.content
        assert b"Azure Fundamentals" not in response.content


@pytest.mark.django_db
class TestCertificateDetailPage:
    """Share links"""

    def test_public_certificate(self, client, make_certificate):
        cert = make_certificate(title="Kubernetes Admin")

        response = client.get(f"/c/{cert.id}/")

        assert response.status_code == 200
        assert b"Kubernetes Admin" in response.content
        assert b"Alice Smith" in response.content
        assert f"http://testserver/c/{cert.id}/".encode() in response.content
        assert Certificate.objects.get(id=cert.id).views == 1

    def test_private_and_missing_render_not_found(self, client, make_certificate):
        private = make_certificate(is_public=False)

        private_response = client.get(f"/c/{private.id}/")
        missing_response = client.get(f"/c/{uuid4()}/")

        assert private_response.status_code == missing_response.status_code == 404
        assert b"Certificate not found" in private_response.content
        assert b"Certificate not found" in missing_response.content
        assert Certificate.objects.get(id=private.id).views == 0

    def test_pdf_certificate_loads_viewer(self, client, uploaded_pdf):
        response = client.get(f"/c/{uploaded_pdf.id}/")

        assert f"/c/{uploaded_pdf.id}/viewer/".encode() in response.content


@pytest.mark.django_db
class TestPdfViewerPages:
    """Widget fragment and page images"""

    def test_viewer_fragment(self, client, uploaded_pdf):
        response = client.get(f"/c/{uploaded_pdf.id}/viewer/", {"page": "9"})

        assert response.status_code == 200
        assert b"Page 3 of 3" in response.content
        assert b'target="_blank"' in response.content

    def test_viewer_fallback(self, client, uploaded_pdf):
        file_services.delete_object(key=uploaded_pdf.storage_key)

        response = client.get(f"/c/{uploaded_pdf.id}/viewer/")

        assert response.status_code == 200
        assert b"cannot be previewed" in response.content
        assert uploaded_pdf.file_url.encode() in response.content

    def test_page_image(self, client, uploaded_pdf):
        response = client.get(f"/c/{uploaded_pdf.id}/viewer/page.png", {"page": "2", "zoom": "1.2"})

        assert response.status_code == 200
        assert response["Content-Type"] == "image/png"
        assert response.content.startswith(b"\x89PNG")

    def test_page_image_is_not_cached_after_going_private(self, client, uploaded_pdf):
        response = client.get(f"/c/{uploaded_pdf.id}/viewer/page.png")

        assert "no-store" in response["Cache-Control"]
        assert "public" not in response["Cache-Control"]

        uploaded_pdf.is_public = False
        uploaded_pdf.save(update_fields=["is_public"])

        assert client.get(f"/c/{uploaded_pdf.id}/viewer/page.png").status_code == 404

    def test_page_image_for_unknown_certificate(self, client, db):
        assert client.get(f"/c/{uuid4()}/viewer/page.png").status_code == 404


@pytest.mark.django_db
class TestPublicProfilePage:
    """Public profile share links"""

    def test_renders_public_certificates_and_stats(self, client, profile, make_certificate):
        make_certificate(title="Visible Cert", views=4)
        make_certificate(title="Secret Cert", views=50, is_public=False)

        response = client.get("/u/alice/")

        assert response.status_code == 200
        assert b"Alice Smith" in response.content
        assert b"Visible Cert" in response.content
        assert b"Secret Cert" not in response.content
        assert b"http://testserver/u/alice/" in response.content

    def test_unknown_profile(self, client):
        response = client.get("/u/nobody/")

        assert response.status_code == 404
        assert b"Profile not found" in response.content
