from django.contrib.auth.models import AbstractUser
from django.db import models

from src.common.models import BaseModel

from .managers import UserManager


class User(AbstractUser, BaseModel):
    """
    Authentication identity.

    Email is the login. Public-facing identity (username, display name)
    lives on profiles.Profile, whose primary key is this user's id.
    """

    # ── Kill fields inherited from AbstractUser ─────────────────────
    username = None
    first_name = None
    last_name = None

    email = models.EmailField(unique=True, db_index=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        db_table = "users"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.email
