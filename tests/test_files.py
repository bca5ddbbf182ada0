"""
Tests for the file gate and storage key layout.
"""
import re
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from src.apps.files import services as file_services
from src.apps.files.utils import generate_storage_key
from src.common.exceptions import FileRejectedError
from src.common.types import RejectionReason


class TestValidateCertificateFile:
    """Type/size gate"""

    @pytest.mark.parametrize("content_type,expected", [
        ("application/pdf", "application/pdf"),
        ("image/jpeg", "image/jpeg"),
        ("image/jpg", "image/jpeg"),
        ("image/png", "image/png"),
        ("IMAGE/PNG; charset=binary", "image/png"),
    ])
    def test_accepts_allowed_types(self, content_type, expected):
        file = SimpleUploadedFile("cert", b"data", content_type=content_type)
        assert file_services.validate_certificate_file(file) == expected

    @pytest.mark.parametrize("content_type", ["text/plain", "image/gif", "application/zip"])
    def test_rejects_other_types(self, content_type):
        file = SimpleUploadedFile("cert.bin", b"data", content_type=content_type)

        with pytest.raises(FileRejectedError) as exc_info:
            file_services.validate_certificate_file(file)

        assert exc_info.value.reason == RejectionReason.INVALID_TYPE
        assert exc_info.value.message == (
            "Invalid file type. Please select a PDF or image file (JPEG, PNG)."
        )
        assert exc_info.value.file_name == "cert.bin"

    def test_rejects_files_over_ten_megabytes(self):
        file = SimpleUploadedFile(
            "big.pdf", b"x" * (file_services.MAX_FILE_SIZE + 1), content_type="application/pdf"
        )

        with pytest.raises(FileRejectedError) as exc_info:
            file_services.validate_certificate_file(file)

        assert exc_info.value.reason == RejectionReason.TOO_LARGE
        assert exc_info.value.message == "File too large. Please select a file smaller than 10MB."

    def test_exactly_ten_megabytes_is_allowed(self):
        file = SimpleUploadedFile(
            "edge.pdf", b"x" * file_services.MAX_FILE_SIZE, content_type="application/pdf"
        )
        assert file_services.validate_certificate_file(file) == "application/pdf"

    def test_size_is_checked_before_type(self):
        file = SimpleUploadedFile("big.txt", b"x" * 20, content_type="text/plain")

        with pytest.raises(FileRejectedError) as exc_info:
            file_services.validate_certificate_file(file, max_size=10)

        assert exc_info.value.reason == RejectionReason.TOO_LARGE

    def test_missing_content_type_is_guessed_from_name(self):
        file = SimpleUploadedFile("scan.png", b"data", content_type="")
        assert file_services.validate_certificate_file(file) == "image/png"


class TestPartitionFiles:
    """Batch gating"""

    def test_rejected_files_do_not_affect_siblings(self, pdf_file, png_file, text_file):
        accepted, rejections = file_services.partition_files([pdf_file, text_file, png_file])

        assert [(f.name, mime) for f, mime in accepted] == [
            ("aws-architect.pdf", "application/pdf"),
            ("badge.png", "image/png"),
        ]
        assert len(rejections) == 1
        assert rejections[0].file_name == "notes.txt"
        assert rejections[0].reason == RejectionReason.INVALID_TYPE


class TestStorage:
    """Certificate object store"""

    def test_store_read_and_delete(self, db, pdf_file, pdf_bytes):
        key = file_services.store_object(key=f"{uuid4()}/doc.pdf", file=pdf_file)

        assert file_services.object_exists(key=key)
        assert file_services.read_object(key=key) == pdf_bytes
        assert file_services.public_url(key=key) == f"http://testserver/media/certificates/{key}"

        file_services.delete_object(key=key)
        assert not file_services.object_exists(key=key)


class TestGenerateStorageKey:
    """Storage key layout"""

    def test_key_layout(self):
        owner_id = uuid4()
        now = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)

        key = generate_storage_key(owner_id, "My Cert.PDF", now=now)

        assert re.fullmatch(rf"{owner_id}/{int(now.timestamp() * 1000)}-[0-9a-f]{{8}}\.pdf", key)

    def test_keys_do_not_collide(self):
        owner_id = uuid4()
        now = datetime(2024, 3, 15, tzinfo=timezone.utc)

        keys = {generate_storage_key(owner_id, "a.png", now=now) for _ in range(50)}

        assert len(keys) == 50
