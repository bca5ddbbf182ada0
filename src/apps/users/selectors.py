"""
User selectors (read-only queries).

Selectors are for reads, services are for writes.
"""

from src.apps.users.models import User


def user_exists(*, email: str) -> bool:
    return User.objects.filter(email__iexact=email).exists()
