"""
Certificate API endpoints.

Mounted at: /api/v1/certificates/

Upload (single and batch) is multipart: the shared metadata form plus one or
more files, JWT required. The public feed and detail are anonymous; private
and unknown ids both answer 404.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja import File, Form, Router, UploadedFile
from ninja_jwt.authentication import JWTAuth

from src.apps.certificates import selectors as cert_selectors
from src.apps.certificates import services as cert_services
from src.apps.certificates.models import Certificate
from src.apps.certificates.schemas import (
    BatchUploadResponseSchema,
    CertificateDetailSchema,
    CertificateListItemSchema,
    CertificateUpdateSchema,
    ErrorSchema,
    OwnCertificateSchema,
    UploadResponseSchema,
)
from src.apps.certificates.services import UploadResult
from src.common.context import ActorContext
from src.common.exceptions import NotFoundError, UploadFailedError
from src.common.links import certificate_share_url

router = Router(tags=["Certificates"])


# ── Helpers ──────────────────────────────────────────────────────────────


def owner_summary(profile) -> dict | None:
    if profile is None:
        return None
    return {
        "username": profile.username,
        "display_name": profile.display_name,
        "avatar_url": profile.avatar_url,
    }


def certificate_fields(cert: Certificate) -> dict:
    return {
        "id": cert.id,
        "title": cert.title,
        "issuer": cert.issuer,
        "issue_date": cert.issue_date,
        "description": cert.description,
        "file_url": cert.file_url,
        "file_type": cert.file_type,
        "views": cert.views,
        "created_at": cert.created_at.isoformat(),
    }


def certificate_list_item(cert: Certificate) -> dict:
    d = certificate_fields(cert)
    d["owner"] = owner_summary(cert.owner)
    return d


def parse_cert_id(raw: str) -> UUID:
    """Malformed ids are reported like unknown ones."""
    try:
        return UUID(raw)
    except ValueError:
        raise NotFoundError("Certificate not found.")


def own_certificate(cert: Certificate) -> dict:
    d = certificate_list_item(cert)
    d["is_public"] = cert.is_public
    return d


def _raise_upload_failure(result: UploadResult, created_ids: list | None = None) -> None:
    raise UploadFailedError(
        result.error or "Storage write failed.",
        extra={"created_ids": [str(i) for i in created_ids or []]},
    )


# ── Upload ───────────────────────────────────────────────────────────────


@router.post(
    "",
    response={201: UploadResponseSchema, 400: ErrorSchema, 401: ErrorSchema, 502: ErrorSchema},
    auth=JWTAuth(),
    summary="Upload a certificate",
)
def upload_certificate(
    request: HttpRequest,
    title: str = Form(""),
    issuer: str = Form(""),
    issue_date: str = Form(""),
    description: str = Form(""),
    is_public: bool = Form(True),
    file: UploadedFile = File(None),
):
    result = cert_services.upload_certificate(
        actor=ActorContext.from_request(request),
        file=file,
        title=title,
        issuer=issuer,
        issue_date=issue_date,
        description=description,
        is_public=is_public,
    )
    if not result.ok:
        _raise_upload_failure(result)

    return 201, {
        "id": result.certificate_id,
        "share_url": certificate_share_url(result.certificate_id),
    }


@router.post(
    "/batch",
    response={201: BatchUploadResponseSchema, 400: ErrorSchema, 401: ErrorSchema, 502: ErrorSchema},
    auth=JWTAuth(),
    summary="Upload several certificate files with one metadata form",
)
def upload_certificates(
    request: HttpRequest,
    files: list[UploadedFile] = File(...),
    title: str = Form(""),
    issuer: str = Form(""),
    issue_date: str = Form(""),
    description: str = Form(""),
    is_public: bool = Form(True),
):
    result = cert_services.upload_certificates(
        actor=ActorContext.from_request(request),
        files=files,
        title=title,
        issuer=issuer,
        issue_date=issue_date,
        description=description,
        is_public=is_public,
    )
    if not result.ok:
        _raise_upload_failure(result.failure, result.created_ids)

    return 201, {
        "ids": result.created_ids,
        "share_urls": [certificate_share_url(i) for i in result.created_ids],
        "rejected": [
            {"file_name": r.file_name, "reason": str(r.reason), "message": r.message}
            for r in result.rejections
        ],
    }


# ── Public feed ─────────────────────────────────────────────────────────


@router.get(
    "/public",
    response=list[CertificateListItemSchema],
    summary="List public certificates, optionally filtered",
)
def list_public_certificates(request: HttpRequest, q: str = ""):
    certs = cert_selectors.filter_certificates(cert_selectors.list_public_certificates(), q)
    return [certificate_list_item(c) for c in certs]


# ── Detail ───────────────────────────────────────────────────────────────


@router.get(
    "/{cert_id}",
    response={200: CertificateDetailSchema, 404: ErrorSchema},
    summary="Get a public certificate (counts one view)",
)
def get_certificate(request: HttpRequest, cert_id: str):
    detail = cert_services.get_certificate_detail(cert_id=parse_cert_id(cert_id))

    d = certificate_fields(detail.certificate)
    d.update({
        "owner": owner_summary(detail.owner),
        "preview_kind": str(detail.preview.kind),
        "share_url": detail.share_url,
    })
    return d


# ── Owner edits ─────────────────────────────────────────────────────────


@router.patch(
    "/{cert_id}",
    response={200: OwnCertificateSchema, 400: ErrorSchema, 404: ErrorSchema},
    auth=JWTAuth(),
    summary="Change visibility or description of an owned certificate",
)
def update_certificate(request: HttpRequest, cert_id: str, payload: CertificateUpdateSchema):
    cert = cert_services.update_certificate(
        actor=ActorContext.from_request(request),
        cert_id=parse_cert_id(cert_id),
        is_public=payload.is_public,
        description=payload.description,
    )
    return own_certificate(cert)
