from django.apps import AppConfig


class EwayConfig(AppConfig):
    name = 'eway'
    verbose_name = 'eWAY'
    default_auto_field = 'django.db.models.AutoField'
