"""
Test settings.

Optimized for speed. Uses SQLite, in-memory certificate storage, simple hasher.
"""

from src.config.django.base import *  # noqa: F401, F403

# ── Speed ───────────────────────────────────────────────────────────────

DEBUG = False
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
AUTH_PASSWORD_VALIDATORS = []

ALLOWED_HOSTS = ["testserver", "localhost"]
PUBLIC_BASE_URL = "http://testserver"

# ── Database (SQLite for fast test runs) ────────────────────────────────

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    },
}

# ── Storage (nothing touches disk) ──────────────────────────────────────

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.InMemoryStorage",
    },
    "certificates": {
        "BACKEND": "django.core.files.storage.InMemoryStorage",
        "OPTIONS": {
            "base_url": "/media/certificates/",
        },
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

# ── Cache (local memory) ───────────────────────────────────────────────

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    },
}

# ── Sessions ────────────────────────────────────────────────────────────

SESSION_ENGINE = "django.contrib.sessions.backends.db"
