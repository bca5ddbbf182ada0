"""
Certificate services (write operations).

Upload flow (per file):
  1. Gate: actor authenticated, metadata complete, file type/size allowed.
     Nothing is written if any check fails.
  2. Write the binary to object storage under {owner_id}/{epoch_ms}-{rand}{ext}
  3. Resolve the object's public URL
  4. Insert the Certificate row
  5. If 3 or 4 fails, delete the object written in 2 (compensating delete)

Storage and database are different systems, so no transaction spans the
two writes. Every run that gets past the gate ends in one UploadOutcome.

Batch flow:
  Metadata and auth are checked once, files are gated one by one, then the
  accepted files run the upload flow sequentially. The batch stops at the
  first failed upload and reports what was created before it.

Detail flow:
  1. Fetch by (id, is_public=True)
  2. Fetch the owner profile separately (missing profile -> ownerless)
  3. views = <value read in 1> + 1
"""

from dataclasses import asdict, dataclass, field
from datetime import date
from uuid import UUID

import structlog
from django.core.files.uploadedfile import UploadedFile
from django.db import DatabaseError, transaction
from django.utils.dateparse import parse_date

from src.apps.certificates.models import Certificate
from src.apps.certificates.previews import Preview, preview_for
from src.apps.certificates.selectors import get_owner_certificate, get_public_certificate
from src.apps.files import services as file_services
from src.apps.files.services import FileRejection
from src.apps.files.utils import generate_storage_key
from src.apps.profiles.models import Profile
from src.apps.profiles.selectors import get_profile_by_user_id
from src.common.context import ActorContext, require_authenticated
from src.common.exceptions import (
    MissingInformationError,
    NotFoundError,
    ValidationError,
)
from src.common.links import certificate_share_url
from src.common.types import UploadOutcome

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CertificateMetadata:
    title: str
    issuer: str
    issue_date: date
    description: str = ""
    is_public: bool = True


@dataclass(frozen=True)
class UploadResult:
    outcome: UploadOutcome
    certificate_id: UUID | None = None
    storage_key: str | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == UploadOutcome.CREATED


@dataclass(frozen=True)
class BatchUploadResult:
    created_ids: list[UUID] = field(default_factory=list)
    rejections: list[FileRejection] = field(default_factory=list)
    failure: UploadResult | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class CertificateDetail:
    certificate: Certificate
    owner: Profile | None
    preview: Preview
    share_url: str


# ── Metadata ─────────────────────────────────────────────────────────────


def clean_metadata(
    *,
    title: str | None,
    issuer: str | None,
    issue_date: date | str | None,
    description: str | None = "",
    is_public: bool = True,
) -> CertificateMetadata:
    """Trim and check the upload form. Raises before anything is written."""
    title = (title or "").strip()
    issuer = (issuer or "").strip()
    raw_date = issue_date.strip() if isinstance(issue_date, str) else issue_date

    missing = [
        name
        for name, value in (("title", title), ("issuer", issuer), ("issue_date", raw_date))
        if not value
    ]
    if missing:
        raise MissingInformationError(
            "Missing information. Please fill in all required fields.",
            extra={"missing_fields": missing},
        )

    if isinstance(raw_date, date):
        parsed = raw_date
    else:
        try:
            parsed = parse_date(raw_date)
        except ValueError:
            parsed = None
        if parsed is None:
            raise ValidationError("Issue date must be a valid date (YYYY-MM-DD).")

    return CertificateMetadata(
        title=title,
        issuer=issuer,
        issue_date=parsed,
        description=(description or "").strip(),
        is_public=bool(is_public),
    )


def _prepare_upload(*, actor: ActorContext, **metadata) -> tuple[UUID, CertificateMetadata]:
    owner_id = require_authenticated(actor)
    cleaned = clean_metadata(**metadata)
    if get_profile_by_user_id(user_id=owner_id) is None:
        raise ValidationError("Create your profile before uploading certificates.")
    return owner_id, cleaned


# ── Upload ───────────────────────────────────────────────────────────────


def upload_certificate(
    *,
    actor: ActorContext,
    file: UploadedFile | None,
    title: str | None,
    issuer: str | None,
    issue_date: date | str | None,
    description: str | None = "",
    is_public: bool = True,
) -> UploadResult:
    """
    Upload one certificate file.

    Gate failures raise (AuthenticationRequiredError, MissingInformationError,
    FileRejectedError, ValidationError). Anything after the gate is reported
    through the returned UploadResult.
    """
    owner_id, metadata = _prepare_upload(
        actor=actor,
        title=title,
        issuer=issuer,
        issue_date=issue_date,
        description=description,
        is_public=is_public,
    )
    if file is None:
        raise ValidationError("No file selected. Please select a certificate file to upload.")

    file_type = file_services.validate_certificate_file(file)
    return _run_upload(owner_id=owner_id, file=file, file_type=file_type, metadata=metadata)


def upload_certificates(
    *,
    actor: ActorContext,
    files: list[UploadedFile],
    title: str | None,
    issuer: str | None,
    issue_date: date | str | None,
    description: str | None = "",
    is_public: bool = True,
) -> BatchUploadResult:
    """
    Upload several files that share one metadata form.

    Rejected files are skipped; valid siblings still upload. Uploads run one
    after another and the batch aborts on the first failed upload.
    """
    owner_id, metadata = _prepare_upload(
        actor=actor,
        title=title,
        issuer=issuer,
        issue_date=issue_date,
        description=description,
        is_public=is_public,
    )
    if not files:
        raise ValidationError("No file selected. Please select a certificate file to upload.")

    accepted, rejections = file_services.partition_files(files)
    if not accepted:
        raise ValidationError(
            "None of the selected files can be uploaded.",
            extra={"rejected": [asdict(r) for r in rejections]},
        )

    created_ids: list[UUID] = []
    for file, file_type in accepted:
        result = _run_upload(owner_id=owner_id, file=file, file_type=file_type, metadata=metadata)
        if not result.ok:
            logger.warning(
                "batch_upload_aborted",
                owner_id=str(owner_id),
                created=len(created_ids),
                remaining=len(accepted) - len(created_ids),
                outcome=str(result.outcome),
            )
            return BatchUploadResult(created_ids=created_ids, rejections=rejections, failure=result)
        created_ids.append(result.certificate_id)

    return BatchUploadResult(created_ids=created_ids, rejections=rejections)


def _run_upload(
    *,
    owner_id: UUID,
    file: UploadedFile,
    file_type: str,
    metadata: CertificateMetadata,
) -> UploadResult:
    key = generate_storage_key(owner_id, file.name or "")

    try:
        key = file_services.store_object(key=key, file=file)
    except Exception as exc:
        logger.error("upload_storage_failed", owner_id=str(owner_id), key=key, error=str(exc))
        return UploadResult(outcome=UploadOutcome.STORAGE_FAILED, error=str(exc))

    try:
        file_url = file_services.public_url(key=key)
        certificate = _insert_certificate(
            owner_id=owner_id,
            file_url=file_url,
            storage_key=key,
            file_type=file_type,
            metadata=metadata,
        )
    except Exception as exc:
        return _compensate(key=key, error=exc)

    logger.info(
        "certificate_uploaded",
        cert_id=str(certificate.id),
        owner_id=str(owner_id),
        file_type=file_type,
        is_public=certificate.is_public,
    )
    return UploadResult(
        outcome=UploadOutcome.CREATED,
        certificate_id=certificate.id,
        storage_key=key,
    )


def _insert_certificate(
    *,
    owner_id: UUID,
    file_url: str,
    storage_key: str,
    file_type: str,
    metadata: CertificateMetadata,
) -> Certificate:
    # Savepoint so a failed insert leaves any outer transaction usable.
    with transaction.atomic():
        return Certificate.objects.create(
            owner_id=owner_id,
            title=metadata.title,
            issuer=metadata.issuer,
            issue_date=metadata.issue_date,
            description=metadata.description,
            file_url=file_url,
            storage_key=storage_key,
            file_type=file_type,
            is_public=metadata.is_public,
        )


def _compensate(*, key: str, error: Exception) -> UploadResult:
    """Delete the object whose metadata row could not be written."""
    logger.warning("upload_metadata_failed", key=key, error=str(error))
    try:
        file_services.delete_object(key=key)
    except Exception as cleanup_exc:
        logger.error("upload_orphaned", key=key, error=str(cleanup_exc))
        return UploadResult(outcome=UploadOutcome.ORPHANED, storage_key=key, error=str(error))

    logger.info("upload_compensated", key=key)
    return UploadResult(outcome=UploadOutcome.COMPENSATED, storage_key=key, error=str(error))


# ── Detail & views ───────────────────────────────────────────────────────


def get_certificate_detail(*, cert_id: UUID) -> CertificateDetail:
    """
    Public detail lookup. Private and unknown ids raise the same NotFoundError.
    Counts one view on success.
    """
    certificate = get_public_certificate(cert_id=cert_id)
    if certificate is None:
        raise NotFoundError("Certificate not found.")

    owner = get_profile_by_user_id(user_id=certificate.owner_id)
    record_view(certificate=certificate)

    return CertificateDetail(
        certificate=certificate,
        owner=owner,
        preview=preview_for(certificate),
        share_url=certificate_share_url(certificate.id),
    )


def record_view(*, certificate: Certificate) -> int:
    """
    Set views to the value read at fetch time plus one.

    This is a read-modify-write with no locking: two viewers that read the
    same value both write value + 1 and one view is lost. View counts are
    advisory. A failed write is logged and the request carries on.
    """
    new_count = certificate.views + 1
    try:
        _write_views(cert_id=certificate.id, views=new_count)
    except DatabaseError as exc:
        logger.warning("view_count_update_failed", cert_id=str(certificate.id), error=str(exc))
        return certificate.views

    certificate.views = new_count
    return new_count


def _write_views(*, cert_id: UUID, views: int) -> None:
    Certificate.objects.filter(id=cert_id).update(views=views)


# ── Owner edits ──────────────────────────────────────────────────────────


@transaction.atomic
def update_certificate(
    *,
    actor: ActorContext,
    cert_id: UUID,
    is_public: bool | None = None,
    description: str | None = None,
) -> Certificate:
    """Owners may change visibility and description. Nothing else is editable."""
    owner_id = require_authenticated(actor)

    certificate = get_owner_certificate(cert_id=cert_id, owner_id=owner_id)
    if certificate is None:
        raise NotFoundError("Certificate not found.")

    fields_to_update = ["updated_at"]
    if is_public is not None:
        certificate.is_public = is_public
        fields_to_update.append("is_public")
    if description is not None:
        certificate.description = description.strip()
        fields_to_update.append("description")

    certificate.save(update_fields=fields_to_update)

    logger.info(
        "certificate_updated",
        cert_id=str(certificate.id),
        fields=fields_to_update[1:],
    )
    return certificate
