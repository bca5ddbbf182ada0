"""
Authentication API endpoints.

Login is via ninja_jwt's NinjaJWTDefaultController (token/pair, token/refresh).
"""

from django.http import HttpRequest
from ninja import Router
from ninja_jwt.authentication import JWTAuth

from src.apps.authentication import services as auth_services
from src.apps.authentication.schemas import (
    ErrorResponseSchema,
    LogoutRequestSchema,
    MeSchema,
    MessageResponseSchema,
    RegisterResponseSchema,
    RegisterSchema,
)

router = Router(tags=["Authentication"])


# ── Register ────────────────────────────────────────────────────────────


@router.post(
    "/register",
    response={201: RegisterResponseSchema, 400: ErrorResponseSchema, 409: ErrorResponseSchema},
    summary="Register a new user and profile",
)
def register(request: HttpRequest, payload: RegisterSchema):
    user = auth_services.register_account(
        email=payload.email,
        password=payload.password,
        username=payload.username,
        display_name=payload.display_name,
    )
    return 201, {
        "message": "Account created. You can now sign in.",
        "user": user,
    }


# ── Logout ──────────────────────────────────────────────────────────────


@router.post(
    "/logout",
    response={200: MessageResponseSchema, 400: ErrorResponseSchema},
    auth=JWTAuth(),
    summary="Logout — blacklist the refresh token",
)
def logout(request: HttpRequest, payload: LogoutRequestSchema):
    auth_services.logout_user(refresh_token=payload.refresh)
    return 200, {"message": "Successfully logged out."}


# ── Current identity ────────────────────────────────────────────────────


@router.get(
    "/me",
    response=MeSchema,
    auth=JWTAuth(),
    summary="Get the current user",
)
def me(request: HttpRequest):
    return request.auth
