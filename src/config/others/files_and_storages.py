"""
Static files, media files, and storage configuration.

Certificate binaries live in their own storage alias ("certificates") so the
backend can be swapped for an object store without touching the ORM.
"""

from src.config.env import BASE_DIR, env

# ── Static files ────────────────────────────────────────────────────────

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# ── Media files ─────────────────────────────────────────────────────────

# Served by Django only when DEBUG is on; production serves it from the proxy.
MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "mediafiles"

# ── Certificate object storage ──────────────────────────────────────────

CERTIFICATE_STORAGE_ROOT = env.CERTIFICATE_STORAGE_ROOT or str(MEDIA_ROOT / "certificates")

# ── Upload limits ───────────────────────────────────────────────────────
# Files above this are spooled to disk; the 10 MiB business ceiling is
# enforced by the files app, not here.

FILE_UPLOAD_MAX_MEMORY_SIZE = 2 * 1024 * 1024

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "certificates": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
        "OPTIONS": {
            "location": CERTIFICATE_STORAGE_ROOT,
            "base_url": f"{MEDIA_URL}certificates/",
        },
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}
