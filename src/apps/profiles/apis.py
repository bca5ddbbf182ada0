"""
Profile API endpoints.

Mounted at: /api/v1/profiles/

/me endpoints are the owner's view (JWT, private certificates included).
/{username} endpoints are what any visitor sees: public certificates only,
stats computed over public certificates only.
"""

from django.http import HttpRequest
from ninja import Router
from ninja_jwt.authentication import JWTAuth

from src.apps.certificates.apis import certificate_list_item, own_certificate
from src.apps.certificates.schemas import CertificateListItemSchema, OwnCertificateSchema
from src.apps.certificates import selectors as cert_selectors
from src.apps.profiles import selectors as profile_selectors
from src.apps.profiles import services as profile_services
from src.apps.profiles.models import Profile
from src.apps.profiles.schemas import ErrorSchema, ProfileUpdateSchema, PublicProfileSchema
from src.common.context import ActorContext, require_authenticated
from src.common.exceptions import NotFoundError
from src.common.links import profile_share_url

router = Router(tags=["Profiles"])


def _profile_out(profile: Profile, *, public_only: bool) -> dict:
    stats = profile_selectors.get_profile_stats(profile=profile, public_only=public_only)
    return {
        "id": profile.user_id,
        "username": profile.username,
        "display_name": profile.display_name,
        "bio": profile.bio,
        "avatar_url": profile.avatar_url,
        "created_at": profile.created_at.isoformat(),
        "share_url": profile_share_url(profile.username),
        "stats": {**stats, "member_since": stats["member_since"].isoformat()},
    }


def _own_profile(request: HttpRequest) -> Profile:
    user_id = require_authenticated(ActorContext.from_request(request))
    profile = profile_selectors.get_profile_by_user_id(user_id=user_id)
    if profile is None:
        raise NotFoundError("Profile not found.")
    return profile


def _public_profile(username: str) -> Profile:
    profile = profile_selectors.get_profile_by_username(username=username)
    if profile is None:
        raise NotFoundError("Profile not found.")
    return profile


# ── Own profile ─────────────────────────────────────────────────────────


@router.get(
    "/me",
    response={200: PublicProfileSchema, 404: ErrorSchema},
    auth=JWTAuth(),
    summary="Get the current user's profile",
)
def get_my_profile(request: HttpRequest):
    return _profile_out(_own_profile(request), public_only=False)


@router.patch(
    "/me",
    response={200: PublicProfileSchema, 400: ErrorSchema, 404: ErrorSchema},
    auth=JWTAuth(),
    summary="Update display name, bio or avatar",
)
def update_my_profile(request: HttpRequest, payload: ProfileUpdateSchema):
    profile = profile_services.update_profile(
        actor=ActorContext.from_request(request),
        display_name=payload.display_name,
        bio=payload.bio,
        avatar_url=payload.avatar_url,
    )
    return _profile_out(profile, public_only=False)


@router.get(
    "/me/certificates",
    response={200: list[OwnCertificateSchema], 404: ErrorSchema},
    auth=JWTAuth(),
    summary="List the current user's certificates (public and private)",
)
def list_my_certificates(request: HttpRequest):
    profile = _own_profile(request)
    certs = cert_selectors.get_owner_certificates(owner_id=profile.user_id)
    return [own_certificate(c) for c in certs]


# ── Public profiles ─────────────────────────────────────────────────────


@router.get(
    "/{username}",
    response={200: PublicProfileSchema, 404: ErrorSchema},
    summary="Get a public profile",
)
def get_public_profile(request: HttpRequest, username: str):
    return _profile_out(_public_profile(username), public_only=True)


@router.get(
    "/{username}/certificates",
    response={200: list[CertificateListItemSchema], 404: ErrorSchema},
    summary="List a user's public certificates",
)
def list_public_profile_certificates(request: HttpRequest, username: str):
    profile = _public_profile(username)
    certs = cert_selectors.get_public_owner_certificates(owner_id=profile.user_id)
    return [certificate_list_item(c) for c in certs]
