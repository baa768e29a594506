"""Development environment specific settings.

Included after logging.py, so LOGGING is already defined in this scope.
"""

INTERNAL_IPS = [
    "127.0.0.1",
]

# Log the SQL issued by the translation store to the log file while developing
LOGGING["loggers"]["django.db.backends"]["level"] = "DEBUG"  # noqa: F821
