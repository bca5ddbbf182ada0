"""
Profile services (write operations).

Usernames are chosen once at registration. Later updates only touch
display_name, bio and avatar_url.
"""

import re

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator
from django.db import IntegrityError, transaction

from src.apps.profiles.models import Profile
from src.apps.profiles.selectors import get_profile_by_user_id, username_exists
from src.common.context import ActorContext, require_authenticated
from src.common.exceptions import ConflictError, NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

USERNAME_RE = re.compile(r"^[a-z0-9_]{3,30}$")


def normalize_username(username: str) -> str:
    username = (username or "").strip().lower()
    if not USERNAME_RE.match(username):
        raise ValidationError(
            "Username must be 3-30 characters: lowercase letters, digits or underscores."
        )
    return username


@transaction.atomic
def create_profile(*, user, username: str, display_name: str = "") -> Profile:
    username = normalize_username(username)
    display_name = (display_name or "").strip() or username

    if username_exists(username=username):
        raise ConflictError(f"Username '{username}' is already taken.")

    # The unique index is the real guard; the check above only gives a
    # friendlier error in the common case.
    try:
        with transaction.atomic():
            profile = Profile.objects.create(
                user=user,
                username=username,
                display_name=display_name,
            )
    except IntegrityError:
        raise ConflictError(f"Username '{username}' is already taken.")

    logger.info("profile_created", user_id=str(user.id), username=username)
    return profile


def _clean_avatar_url(avatar_url: str) -> str:
    avatar_url = avatar_url.strip()
    if not avatar_url:
        return ""
    try:
        URLValidator(schemes=["http", "https"])(avatar_url)
    except DjangoValidationError:
        raise ValidationError("Avatar URL must be a valid http(s) URL.")
    return avatar_url


@transaction.atomic
def update_profile(
    *,
    actor: ActorContext,
    display_name: str | None = None,
    bio: str | None = None,
    avatar_url: str | None = None,
) -> Profile:
    user_id = require_authenticated(actor)

    profile = get_profile_by_user_id(user_id=user_id)
    if profile is None:
        raise NotFoundError("Profile not found.")

    fields_to_update = ["updated_at"]
    if display_name is not None:
        display_name = display_name.strip()
        if not display_name:
            raise ValidationError("Display name cannot be empty.")
        profile.display_name = display_name
        fields_to_update.append("display_name")
    if bio is not None:
        profile.bio = bio.strip()
        fields_to_update.append("bio")
    if avatar_url is not None:
        profile.avatar_url = _clean_avatar_url(avatar_url)
        fields_to_update.append("avatar_url")

    profile.save(update_fields=fields_to_update)

    logger.info("profile_updated", user_id=str(user_id), fields=fields_to_update[1:])
    return profile
