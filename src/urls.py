"""
Root URL configuration.

- /api/v1/                 → NinjaExtraAPI (JWT auth, REST endpoints)
- /admin/                  → Django admin
- /login/, /upload/, ...   → Frontend (Django templates)
- /u/<username>/, /c/<id>/ → Public share pages (server-rendered)
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from ninja_extra import NinjaExtraAPI
from ninja_jwt.controller import NinjaJWTDefaultController

from src.apps.authentication.apis import router as auth_router
from src.apps.certificates.apis import router as cert_router
from src.apps.profiles.apis import router as profile_router
from src.common.exceptions import configure_exception_handlers

# ── Main API ────────────────────────────────────────────────────────────

api = NinjaExtraAPI(
    title="CertShare API",
    version="1.0.0",
    description="Upload, share and browse certificates",
    urls_namespace="api",
)

configure_exception_handlers(api)

# ninja_jwt: /api/v1/token/pair, /api/v1/token/refresh, /api/v1/token/verify
api.register_controllers(NinjaJWTDefaultController)

api.add_router("/auth", auth_router)
api.add_router("/certificates", cert_router)
api.add_router("/profiles", profile_router)

# ── URL patterns ────────────────────────────────────────────────────────

urlpatterns = [
    path("api/v1/", api.urls),

    # Django admin
    path("admin/", admin.site.urls),

    # Frontend (templates) — must be last
    path("", include("src.apps.frontend.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = "src.apps.frontend.views.not_found_view"
