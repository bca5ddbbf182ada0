"""
Shared fixtures for the test suite.
"""
from datetime import date

import fitz
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from ninja_jwt.tokens import AccessToken

from src.apps.certificates import services as cert_services
from src.apps.certificates.models import Certificate
from src.apps.profiles.models import Profile
from src.apps.users.models import User
from src.common.context import ActorContext


def make_pdf(pages: int = 1) -> bytes:
    doc = fitz.open()
    for number in range(pages):
        page = doc.new_page()
        page.insert_text((72, 72), f"Certificate page {number + 1}")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_bytes():
    """A valid three-page PDF"""
    return make_pdf(pages=3)


@pytest.fixture
def pdf_file(pdf_bytes):
    return SimpleUploadedFile("aws-architect.pdf", pdf_bytes, content_type="application/pdf")


@pytest.fixture
def png_file():
    return SimpleUploadedFile("badge.png", b"\x89PNG\r\n\x1a\n" + b"\x00" * 64, content_type="image/png")


@pytest.fixture
def text_file():
    return SimpleUploadedFile("notes.txt", b"not a certificate", content_type="text/plain")


@pytest.fixture
def user(db):
    return User.objects.create_user(email="alice@example.com", password="s3cret-pass")


@pytest.fixture
def profile(user):
    return Profile.objects.create(user=user, username="alice", display_name="Alice Smith")


@pytest.fixture
def other_profile(db):
    other = User.objects.create_user(email="bob@example.com", password="s3cret-pass")
    return Profile.objects.create(user=other, username="bob", display_name="Bob Jones")


@pytest.fixture
def actor(user):
    return ActorContext.for_user(user)


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {AccessToken.for_user(user)}"}


@pytest.fixture
def metadata():
    return {
        "title": "AWS Solutions Architect",
        "issuer": "Amazon Web Services",
        "issue_date": "2024-03-15",
        "description": "Associate level",
    }


@pytest.fixture
def make_certificate(profile):
    """Insert a certificate row directly (no storage object behind it)."""

    def _make(owner: Profile | None = None, **overrides) -> Certificate:
        owner = owner or profile
        fields = {
            "title": "Certificate",
            "issuer": "Issuer",
            "issue_date": date(2024, 1, 1),
            "file_url": "http://testserver/media/certificates/x.png",
            "storage_key": f"{owner.user_id}/x.png",
            "file_type": "image/png",
            "is_public": True,
        }
        fields.update(overrides)
        return Certificate.objects.create(owner=owner, **fields)

    return _make


@pytest.fixture
def uploaded_pdf(profile, actor, pdf_file, metadata):
    """A public PDF certificate whose file is really in storage."""
    result = cert_services.upload_certificate(actor=actor, file=pdf_file, **metadata)
    assert result.ok
    return Certificate.objects.get(id=result.certificate_id)
