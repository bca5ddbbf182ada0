"""
User services (write operations).
"""

import structlog
from django.db import transaction

from .models import User
from .selectors import user_exists
from src.common.exceptions import ConflictError, ValidationError

logger = structlog.get_logger(__name__)

@transaction.atomic
def create_user(*, email: str, password: str) -> User:
    email = email.lower().strip()
    if not email:
        raise ValidationError("Email is required.")
    if not password:
        raise ValidationError("Password is required.")

    if user_exists(email=email):
        raise ConflictError(f"A user with email '{email}' already exists.")

    user = User.objects.create_user(email=email, password=password)

    logger.info("user_created", user_id=str(user.id), email=user.email)
    return user
