"""Django project package for the localization strings service."""
