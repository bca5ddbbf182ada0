"""
Profile model.

A Profile is the public identity of an authenticated user. Its primary key
is the user's id, so "the actor's profile" is a single primary-key lookup.
The username is unique (enforced by the database) and never changes.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Profile(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="profile",
        db_column="id",
    )
    username = models.CharField(
        max_length=30,
        unique=True,
        help_text="Lowercase handle used in public profile links. Immutable.",
    )
    display_name = models.CharField(max_length=100)
    bio = models.TextField(blank=True, default="")
    avatar_url = models.URLField(max_length=1024, blank=True, default="")

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "profiles"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"@{self.username}"

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.display_name.split() if part).upper()
