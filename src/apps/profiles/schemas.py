"""
Profile API schemas.
"""

from uuid import UUID

from ninja import Schema


# ── Request ─────────────────────────────────────────────────────────────


class ProfileUpdateSchema(Schema):
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


# ── Response ────────────────────────────────────────────────────────────


class ProfileStatsSchema(Schema):
    total_certificates: int
    total_views: int
    member_since: str


class PublicProfileSchema(Schema):
    id: UUID
    username: str
    display_name: str
    bio: str
    avatar_url: str
    created_at: str
    share_url: str
    stats: ProfileStatsSchema


class ErrorSchema(Schema):
    detail: str
