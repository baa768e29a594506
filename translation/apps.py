"""Django translation app configuration."""

from django.apps import AppConfig


class TranslationConfig(AppConfig):
    """Configuration for translation app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "translation"
    verbose_name = "Localization Strings"
