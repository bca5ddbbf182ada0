"""
Profile frontend views.

The owner's profile page is thin: it loads /api/v1/profiles/me* client-side
with the JWT. Public profiles are rendered on the server so share links work
for anonymous visitors.
"""

from django.shortcuts import render
from django.views.decorators.cache import never_cache

from src.apps.certificates import selectors as cert_selectors
from src.apps.profiles import selectors as profile_selectors
from src.common.links import profile_share_url


@never_cache
def profile_view(request):
    return render(request, "frontend/profile.html", {"active_page": "profile"})


def public_profile_view(request, username: str):
    profile = profile_selectors.get_profile_by_username(username=username)
    if profile is None:
        return render(
            request,
            "frontend/profile_not_found.html",
            {"username": username},
            status=404,
        )

    return render(request, "frontend/public_profile.html", {
        "profile": profile,
        "stats": profile_selectors.get_profile_stats(profile=profile, public_only=True),
        "certificates": cert_selectors.get_public_owner_certificates(owner_id=profile.user_id),
        "share_url": profile_share_url(profile.username),
    })
