"""
Authentication services.

Handles registration (user + profile in one transaction) and logout
(refresh-token blacklisting). Login itself is ninja_jwt's token/pair.
"""

import structlog
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from ninja_jwt.exceptions import TokenError
from ninja_jwt.tokens import RefreshToken

from src.apps.profiles.services import create_profile, normalize_username
from src.apps.users.models import User
from src.apps.users.services import create_user
from src.common.exceptions import ValidationError

logger = structlog.get_logger(__name__)


# ── Registration ────────────────────────────────────────────────────────


@transaction.atomic
def register_account(
    *,
    email: str,
    password: str,
    username: str,
    display_name: str = "",
) -> User:
    """
    Create a user and their profile.

    The username is checked before anything is written; a duplicate email or
    username raises ConflictError and rolls both rows back.
    """
    username = normalize_username(username)

    try:
        validate_password(password, User(email=email))
    except DjangoValidationError as e:
        raise ValidationError(" ".join(e.messages))

    user = create_user(email=email, password=password)
    create_profile(user=user, username=username, display_name=display_name)

    logger.info("account_registered", user_id=str(user.id), username=username)
    return user


# ── Logout ──────────────────────────────────────────────────────────────


def logout_user(*, refresh_token: str) -> None:
    try:
        token = RefreshToken(refresh_token)
        token.blacklist()
        logger.info("user_logged_out", jti=token["jti"])
    except TokenError as e:
        raise ValidationError(f"Invalid or expired token: {e}")
