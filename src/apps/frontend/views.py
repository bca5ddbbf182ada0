"""
Frontend views.

These are intentionally thin — they only render templates.
Login, registration, upload and the owner's profile fetch their data
client-side via the JWT API (auth.js). Public pages live with their apps.
"""

from django.shortcuts import redirect, render
from django.views.decorators.cache import never_cache


def home_view(request):
    return redirect("frontend:login")


@never_cache
def login_view(request):
    return render(request, "frontend/login.html")


@never_cache
def register_view(request):
    return render(request, "frontend/register.html")


@never_cache
def upload_view(request):
    return render(request, "frontend/upload.html", {"active_page": "upload"})


def not_found_view(request, exception=None):
    return render(request, "frontend/404.html", status=404)
