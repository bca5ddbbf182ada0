from django.apps import AppConfig


class ProfilesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.apps.profiles'
    label = 'profiles'
    verbose_name = "Profiles"
