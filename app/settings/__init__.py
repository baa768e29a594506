"""
Django settings package for the localization strings project.

Uses split settings: core.py holds the base settings, logging.py the LOGGING
configuration and dev.py the overrides for local development.
"""

from split_settings.tools import include, optional

from .core import *  # noqa
from .core import ENV, TESTING

# Always include logging
include("logging.py")

# Development overrides are not applied to test runs
if ENV == "DEV" and not TESTING:
    include(optional("dev.py"))
