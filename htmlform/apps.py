from django.apps import AppConfig


class HtmlFormConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "htmlform"
    verbose_name = "HTML form rendering"
