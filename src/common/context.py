"""
Actor context.

Services never read the current user from ambient state. Callers build an
ActorContext (from a ninja request, a template view, or a test) and pass it
explicitly, which keeps upload/profile/detail operations testable on their own.
"""

from dataclasses import dataclass
from uuid import UUID

from src.common.exceptions import AuthenticationRequiredError


@dataclass(frozen=True)
class ActorContext:
    user_id: UUID | None = None
    email: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> "ActorContext":
        return cls()

    @classmethod
    def for_user(cls, user) -> "ActorContext":
        if user is None or not getattr(user, "is_authenticated", False):
            return cls.anonymous()
        return cls(user_id=user.id, email=user.email)

    @classmethod
    def from_request(cls, request) -> "ActorContext":
        """JWT-authenticated ninja requests carry the user on ``request.auth``."""
        user = getattr(request, "auth", None) or getattr(request, "user", None)
        return cls.for_user(user)


def require_authenticated(actor: ActorContext) -> UUID:
    """Return the actor's user id or raise AuthenticationRequiredError."""
    if not actor.is_authenticated:
        raise AuthenticationRequiredError("Authentication required. Please log in.")
    return actor.user_id
