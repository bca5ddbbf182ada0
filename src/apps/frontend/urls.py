from django.urls import path

from src.apps.certificates import views as certificate_views
from src.apps.frontend import views
from src.apps.profiles import views as profile_views

app_name = "frontend"

urlpatterns = [
    path("", views.home_view, name="home"),
    path("login/", views.login_view, name="login"),
    path("register/", views.register_view, name="register"),
    path("upload/", views.upload_view, name="upload"),
    path("profile/", profile_views.profile_view, name="profile"),
    path("explore/", certificate_views.explore_view, name="explore"),
    path("u/<str:username>/", profile_views.public_profile_view, name="public_profile"),
    path("c/<uuid:cert_id>/", certificate_views.certificate_detail_view, name="certificate_detail"),
    path("c/<uuid:cert_id>/viewer/", certificate_views.pdf_viewer_view, name="pdf_viewer"),
    path("c/<uuid:cert_id>/viewer/page.png", certificate_views.pdf_page_view, name="pdf_page"),
]
