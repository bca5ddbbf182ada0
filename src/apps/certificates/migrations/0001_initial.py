import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("profiles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Certificate",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("issuer", models.CharField(max_length=255)),
                ("issue_date", models.DateField()),
                ("description", models.TextField(blank=True, default="")),
                (
                    "file_url",
                    models.URLField(
                        help_text="Public URL of the stored file. Set once at creation.",
                        max_length=1024,
                    ),
                ),
                (
                    "storage_key",
                    models.CharField(
                        help_text="Object storage key the file was written under.",
                        max_length=512,
                    ),
                ),
                (
                    "file_type",
                    models.CharField(
                        choices=[
                            ("application/pdf", "PDF"),
                            ("image/jpeg", "JPEG image"),
                            ("image/png", "PNG image"),
                        ],
                        max_length=32,
                    ),
                ),
                ("views", models.PositiveIntegerField(default=0)),
                ("is_public", models.BooleanField(default=True)),
                (
                    "owner",
                    models.ForeignKey(
                        db_column="user_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="certificates",
                        to="profiles.profile",
                    ),
                ),
            ],
            options={
                "db_table": "certificates",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["is_public", "-created_at"], name="cert_public_feed_idx"),
                ],
            },
        ),
    ]
