"""
Absolute share links for public pages.
"""

from urllib.parse import urljoin

from django.conf import settings
from django.urls import reverse


def absolute_url(path: str) -> str:
    """Prefix a site-relative path with PUBLIC_BASE_URL; absolute URLs pass through."""
    base = settings.PUBLIC_BASE_URL.rstrip("/") + "/"
    return urljoin(base, path)


def certificate_share_url(cert_id) -> str:
    return absolute_url(reverse("frontend:certificate_detail", kwargs={"cert_id": cert_id}))


def profile_share_url(username: str) -> str:
    return absolute_url(reverse("frontend:public_profile", kwargs={"username": username}))
