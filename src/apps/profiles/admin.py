from django.contrib import admin

from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("username", "display_name", "user", "created_at")
    search_fields = ("username", "display_name", "user__email")
    readonly_fields = ("user", "username", "created_at", "updated_at")

    def has_add_permission(self, request):
        return False
