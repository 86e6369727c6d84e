from django.apps import AppConfig


class SitecontentConfig(AppConfig):

    name = "menumanager.sitecontent"
    default_auto_field = "django.db.models.BigAutoField"
    verbose_name = "Site content"
