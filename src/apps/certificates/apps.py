from django.apps import AppConfig


class CertificatesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.apps.certificates'
    label = 'certificates'
    verbose_name = "Certificates"
