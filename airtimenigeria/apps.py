from django.apps import AppConfig


class AirtimeNigeriaAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'airtimenigeria'
    verbose_name = 'AirtimeNigeria'
