from django.apps import AppConfig


class MenusConfig(AppConfig):

    name = "menumanager.menus"
    default_auto_field = "django.db.models.BigAutoField"
    verbose_name = "Menus"
