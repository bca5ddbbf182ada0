"""
Certificate API schemas.
"""

from datetime import date
from uuid import UUID

from ninja import Schema


# ── Request ─────────────────────────────────────────────────────────────


class CertificateUpdateSchema(Schema):
    is_public: bool | None = None
    description: str | None = None


# ── Response ────────────────────────────────────────────────────────────


class FileRejectionSchema(Schema):
    file_name: str
    reason: str
    message: str


class UploadResponseSchema(Schema):
    id: UUID
    share_url: str


class BatchUploadResponseSchema(Schema):
    ids: list[UUID]
    share_urls: list[str]
    rejected: list[FileRejectionSchema] = []


class OwnerSchema(Schema):
    username: str
    display_name: str
    avatar_url: str = ""


class CertificateListItemSchema(Schema):
    id: UUID
    title: str
    issuer: str
    issue_date: date
    description: str = ""
    file_url: str
    file_type: str
    views: int
    created_at: str
    owner: OwnerSchema | None = None


class OwnCertificateSchema(CertificateListItemSchema):
    is_public: bool


class CertificateDetailSchema(CertificateListItemSchema):
    preview_kind: str
    share_url: str


class MessageSchema(Schema):
    message: str


class ErrorSchema(Schema):
    detail: str
