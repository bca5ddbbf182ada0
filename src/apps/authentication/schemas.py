"""
Authentication schemas.
"""

from uuid import UUID

from ninja import Schema
from ninja_jwt.schema import TokenObtainPairInputSchema
from ninja_jwt.tokens import RefreshToken

from src.apps.users.models import User


# ── Custom token obtain (login) ─────────────────────────────────────────


class CustomTokenObtainPairInput(TokenObtainPairInputSchema):
    @classmethod
    def get_token(cls, user: User) -> RefreshToken:
        token = super().get_token(user)
        token["email"] = user.email
        profile = getattr(user, "profile", None)
        token["username"] = profile.username if profile else ""
        return token


# ── Request schemas ─────────────────────────────────────────────────────


class RegisterSchema(Schema):
    email: str
    password: str
    username: str
    display_name: str = ""


class LogoutRequestSchema(Schema):
    refresh: str


# ── Response schemas ────────────────────────────────────────────────────


class MeSchema(Schema):
    id: UUID
    email: str
    username: str | None = None
    display_name: str | None = None

    @staticmethod
    def resolve_username(obj) -> str | None:
        profile = getattr(obj, "profile", None)
        return profile.username if profile else None

    @staticmethod
    def resolve_display_name(obj) -> str | None:
        profile = getattr(obj, "profile", None)
        return profile.display_name if profile else None


class RegisterResponseSchema(Schema):
    message: str
    user: MeSchema


class MessageResponseSchema(Schema):
    message: str


class ErrorResponseSchema(Schema):
    detail: str
