"""
Certificate selectors (read operations).

Visibility:
  - Anonymous callers only ever see rows with is_public=True.
  - Owners see all of their own certificates through the profile endpoints.
"""

from collections.abc import Iterable
from uuid import UUID

from django.db.models import QuerySet

from src.apps.certificates.models import Certificate


def get_public_certificate(*, cert_id: UUID) -> Certificate | None:
    """
    Single lookup keyed on (id, is_public). A private id and an unknown id
    run the same query and both come back as None.
    """
    return Certificate.objects.filter(id=cert_id, is_public=True).first()


def get_owner_certificate(*, cert_id: UUID, owner_id: UUID) -> Certificate | None:
    return Certificate.objects.filter(id=cert_id, owner_id=owner_id).first()


def list_public_certificates() -> QuerySet[Certificate]:
    """Every public certificate with its owner profile, newest first."""
    return (
        Certificate.objects
        .filter(is_public=True)
        .select_related("owner")
        .order_by("-created_at")
    )


def get_owner_certificates(*, owner_id: UUID) -> QuerySet[Certificate]:
    """All certificates of one owner, public and private."""
    return (
        Certificate.objects
        .filter(owner_id=owner_id)
        .select_related("owner")
        .order_by("-created_at")
    )


def get_public_owner_certificates(*, owner_id: UUID) -> QuerySet[Certificate]:
    return get_owner_certificates(owner_id=owner_id).filter(is_public=True)


def filter_certificates(certificates: Iterable[Certificate], query: str) -> list[Certificate]:
    """
    Case-insensitive substring search over title, issuer, owner username and
    owner display name (any one field matching is enough). An empty query
    keeps everything. Runs in memory over an already fetched set.
    """
    certificates = list(certificates)
    needle = (query or "").lower()
    if not needle:
        return certificates

    def _matches(cert: Certificate) -> bool:
        fields = (cert.title, cert.issuer, cert.owner.username, cert.owner.display_name)
        return any(needle in (value or "").lower() for value in fields)

    return [cert for cert in certificates if _matches(cert)]
