"""
File services: the type/size gate and the certificate object store.

The object store is the "certificates" storage alias. Nothing here touches
the database: storage writes and metadata writes are separate steps and the
certificates app compensates between them.
"""

import mimetypes
from dataclasses import dataclass

import structlog
from django.core.files.storage import Storage, storages
from django.core.files.uploadedfile import UploadedFile

from src.common.exceptions import FileRejectedError
from src.common.links import absolute_url
from src.common.types import FileType, RejectionReason

logger = structlog.get_logger(__name__)

# ── Allowed MIME types ──────────────────────────────────────────────────

ALLOWED_CERTIFICATE_TYPES = frozenset(t.value for t in FileType)

# Legacy or vendor spellings that browsers still send.
MIME_ALIASES = {
    "image/jpg": FileType.JPEG.value,
    "image/pjpeg": FileType.JPEG.value,
}

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB

CERTIFICATE_STORAGE_ALIAS = "certificates"


@dataclass(frozen=True)
class FileRejection:
    file_name: str
    reason: str
    message: str


def _detect_mime_type(file: UploadedFile) -> str:
    """Declared MIME type of the upload, guessed from the name when absent."""
    content_type = (getattr(file, "content_type", "") or "").split(";")[0].strip().lower()
    if not content_type:
        guessed, _ = mimetypes.guess_type(file.name or "")
        content_type = guessed or "application/octet-stream"
    return MIME_ALIASES.get(content_type, content_type)


def validate_certificate_file(
    file: UploadedFile,
    max_size: int = MAX_FILE_SIZE,
) -> str:
    """
    Validate a candidate certificate file. Returns the normalized MIME type.

    Raises:
        FileRejectedError: If file is too large or of a type outside the allow-list.
    """
    name = file.name or ""

    if file.size and file.size > max_size:
        max_mb = max_size / (1024 * 1024)
        raise FileRejectedError(
            f"File too large. Please select a file smaller than {max_mb:.0f}MB.",
            reason=RejectionReason.TOO_LARGE,
            file_name=name,
        )

    content_type = _detect_mime_type(file)

    if content_type not in ALLOWED_CERTIFICATE_TYPES:
        raise FileRejectedError(
            "Invalid file type. Please select a PDF or image file (JPEG, PNG).",
            reason=RejectionReason.INVALID_TYPE,
            file_name=name,
        )

    return content_type


def partition_files(
    files: list[UploadedFile],
) -> tuple[list[tuple[UploadedFile, str]], list[FileRejection]]:
    """
    Run the gate over a batch. Each file is judged on its own; rejected files
    are dropped without affecting their siblings.

    Returns (accepted [(file, mime_type)], rejections).
    """
    accepted: list[tuple[UploadedFile, str]] = []
    rejections: list[FileRejection] = []

    for file in files:
        try:
            accepted.append((file, validate_certificate_file(file)))
        except FileRejectedError as exc:
            rejections.append(
                FileRejection(file_name=exc.file_name, reason=exc.reason, message=exc.message)
            )
            logger.info("file_rejected", file_name=exc.file_name, reason=str(exc.reason))

    return accepted, rejections


# ── Object storage ──────────────────────────────────────────────────────


def get_certificate_storage() -> Storage:
    return storages[CERTIFICATE_STORAGE_ALIAS]


def store_object(*, key: str, file: UploadedFile) -> str:
    """
    Write the binary under ``key``. Returns the key the backend actually used
    (backends may suffix it on collision rather than overwrite).
    """
    storage = get_certificate_storage()
    if hasattr(file, "seek"):
        file.seek(0)
    stored_key = storage.save(key, file)

    logger.info(
        "object_stored",
        key=stored_key,
        original_name=file.name,
        size=file.size,
    )
    return stored_key


def public_url(*, key: str) -> str:
    """Publicly reachable URL for a stored object."""
    return absolute_url(get_certificate_storage().url(key))


def read_object(*, key: str) -> bytes:
    with get_certificate_storage().open(key, "rb") as fh:
        return fh.read()


def object_exists(*, key: str) -> bool:
    return get_certificate_storage().exists(key)


def delete_object(*, key: str) -> None:
    get_certificate_storage().delete(key)
    logger.info("object_deleted", key=key)
