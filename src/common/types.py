# Shared enums (FileType, PreviewKind, UploadOutcome, ...)
"""
Shared enums used across multiple apps.

These are plain Python StrEnums for use in service logic.
Django model choices are defined on the models themselves.
"""

from enum import StrEnum


class FileType(StrEnum):
    PDF = "application/pdf"
    JPEG = "image/jpeg"
    PNG = "image/png"


class PreviewKind(StrEnum):
    PDF = "pdf"
    IMAGE = "image"


class RejectionReason(StrEnum):
    INVALID_TYPE = "invalid_type"
    TOO_LARGE = "too_large"


class UploadOutcome(StrEnum):
    """Terminal states of the storage-then-metadata upload saga."""
    CREATED = "CREATED"
    STORAGE_FAILED = "STORAGE_FAILED"
    # Metadata write failed, stored object deleted again.
    COMPENSATED = "COMPENSATED"
    # Metadata write failed and the compensating delete failed too.
    ORPHANED = "ORPHANED"
