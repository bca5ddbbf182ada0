"""
Certificate models.

A Certificate pairs an uploaded file with title/issuer/date metadata and a
visibility flag. It is created only by the upload pipeline, after the file is
already in object storage. From then on file_url and storage_key never change;
views only grows; is_public and description are owner-editable.
"""

from django.db import models

from src.common.models import BaseModel
from src.common.types import FileType, PreviewKind


class CertificateFileType(models.TextChoices):
    PDF = FileType.PDF.value, "PDF"
    JPEG = FileType.JPEG.value, "JPEG image"
    PNG = FileType.PNG.value, "PNG image"


class Certificate(BaseModel):
    owner = models.ForeignKey(
        "profiles.Profile",
        on_delete=models.CASCADE,
        related_name="certificates",
        db_column="user_id",
    )
    title = models.CharField(max_length=255)
    issuer = models.CharField(max_length=255)
    issue_date = models.DateField()
    description = models.TextField(blank=True, default="")

    file_url = models.URLField(
        max_length=1024,
        help_text="Public URL of the stored file. Set once at creation.",
    )
    storage_key = models.CharField(
        max_length=512,
        help_text="Object storage key the file was written under.",
    )
    file_type = models.CharField(
        max_length=32,
        choices=CertificateFileType.choices,
    )

    views = models.PositiveIntegerField(default=0)
    is_public = models.BooleanField(default=True)

    class Meta:
        db_table = "certificates"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_public", "-created_at"], name="cert_public_feed_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.issuer})"

    @property
    def preview_kind(self) -> PreviewKind:
        if self.file_type == FileType.PDF:
            return PreviewKind.PDF
        return PreviewKind.IMAGE
