from django.contrib import admin

from .models import Certificate


@admin.register(Certificate)
class CertificateAdmin(admin.ModelAdmin):
    list_display = ("title", "issuer", "owner", "file_type", "is_public", "views", "created_at")
    list_filter = ("is_public", "file_type")
    search_fields = ("title", "issuer", "owner__username", "owner__display_name")
    readonly_fields = ("owner", "file_url", "storage_key", "file_type", "views", "created_at", "updated_at")

    def has_add_permission(self, request):
        return False
