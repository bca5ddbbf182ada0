"""
Application exceptions and django-ninja error handlers.

Services raise these exceptions; the API layer catches them
via ninja's exception handlers and returns proper HTTP responses.
Template views catch NotFoundError themselves and render the not-found page.
"""

import structlog
from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI

logger = structlog.get_logger(__name__)


class ApplicationError(Exception):
    """Base for all business-logic errors."""

    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class NotFoundError(ApplicationError):
    """Resource not found (or not visible to the caller)."""
    pass


class AuthenticationRequiredError(ApplicationError):
    """The operation needs an authenticated actor."""
    pass


class ValidationError(ApplicationError):
    """Business rule validation failed."""
    pass


class MissingInformationError(ValidationError):
    """Required form fields were blank."""
    pass


class FileRejectedError(ValidationError):
    """A candidate file failed the type/size gate."""

    def __init__(self, message: str, *, reason: str, file_name: str = ""):
        super().__init__(message, extra={"reason": reason, "file_name": file_name})
        self.reason = reason
        self.file_name = file_name


class ConflictError(ApplicationError):
    """Resource already exists or state conflict."""
    pass


class UploadFailedError(ApplicationError):
    """Object storage or metadata write failed after validation passed."""
    pass


def configure_exception_handlers(api: NinjaAPI) -> None:
    """Register custom exception handlers on a NinjaAPI instance."""

    @api.exception_handler(NotFoundError)
    def handle_not_found(request: HttpRequest, exc: NotFoundError) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message, **exc.extra},
            status=404,
        )

    @api.exception_handler(AuthenticationRequiredError)
    def handle_authentication_required(
        request: HttpRequest, exc: AuthenticationRequiredError
    ) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message},
            status=401,
        )

    @api.exception_handler(ValidationError)
    def handle_validation(request: HttpRequest, exc: ValidationError) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message, **exc.extra},
            status=400,
        )

    @api.exception_handler(ConflictError)
    def handle_conflict(request: HttpRequest, exc: ConflictError) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message, **exc.extra},
            status=409,
        )

    @api.exception_handler(UploadFailedError)
    def handle_upload_failed(request: HttpRequest, exc: UploadFailedError) -> HttpResponse:
        logger.error("upload_failed", message=exc.message, **exc.extra)
        return api.create_response(
            request,
            {"detail": "Upload failed. Please try again.", "error": exc.message, **exc.extra},
            status=502,
        )
