"""
Profile selectors (read operations).
"""

from uuid import UUID

from django.db.models import Count, Sum

from src.apps.profiles.models import Profile


def get_profile_by_user_id(*, user_id: UUID) -> Profile | None:
    return Profile.objects.filter(user_id=user_id).first()


def get_profile_by_username(*, username: str) -> Profile | None:
    return Profile.objects.filter(username=username.strip().lower()).first()


def username_exists(*, username: str) -> bool:
    return Profile.objects.filter(username=username).exists()


def get_profile_stats(*, profile: Profile, public_only: bool) -> dict:
    """
    Certificate count, summed views and join date.

    Visitors only see numbers derived from public certificates.
    """
    qs = profile.certificates.all()
    if public_only:
        qs = qs.filter(is_public=True)

    totals = qs.aggregate(total_certificates=Count("id"), total_views=Sum("views"))
    return {
        "total_certificates": totals["total_certificates"] or 0,
        "total_views": totals["total_views"] or 0,
        "member_since": profile.created_at,
    }
