"""
Object storage key utilities.
"""

import uuid
from datetime import datetime
from pathlib import Path

from django.utils import timezone


def generate_storage_key(owner_id, original_filename: str, now: datetime | None = None) -> str:
    """
    Generate a collision-resistant storage key for a certificate file.
    Structure: {owner_id}/{epoch_ms}-{random}.{ext}
    """
    now = now or timezone.now()
    ext = Path(original_filename or "").suffix.lower()
    stamp = int(now.timestamp() * 1000)
    return f"{owner_id}/{stamp}-{uuid.uuid4().hex[:8]}{ext}"
