"""Utility functions for translation app."""

import logging

from django.conf import settings
from django.db.models import Count, Exists, OuterRef

from .models import SourceText, Translation

logger = logging.getLogger(__name__)


def get_translation_coverage(using: str = "default") -> dict:
    """
    Get translation coverage statistics.

    Only translations attached to an existing source text are counted. The
    default language is always fully covered by the source texts.

    Args:
        using: Database alias to read from

    Returns:
        Dictionary keyed by language code with translated/total/percentage
    """
    total_keys = SourceText.objects.using(using).count()
    if total_keys == 0:
        return {}

    default_language = getattr(settings, "TRANSLATION_DEFAULT_LANGUAGE", "en-US")
    coverage = {
        default_language: {
            "translated": total_keys,
            "total": total_keys,
            "percentage": 100.0,
        }
    }

    counts = (
        attached_translations(using)
        .exclude(lang_id=default_language)
        .values("lang_id")
        .annotate(translated=Count("id"))
        .order_by("lang_id")
    )
    for row in counts:
        coverage[row["lang_id"]] = {
            "translated": row["translated"],
            "total": total_keys,
            "percentage": (row["translated"] / total_keys) * 100,
        }

    return coverage


def attached_translations(using: str = "default"):
    """Translations whose key has a source text."""
    return Translation.objects.using(using).filter(Exists(SourceText.objects.filter(sid=OuterRef("source_text_id"))))


def get_orphaned_translations(using: str = "default"):
    """
    Translations stored for a key that has no source text.

    Such rows are created when a translation is written for an unknown key.

    Args:
        using: Database alias to read from

    Returns:
        QuerySet of orphaned Translation rows ordered by key and language
    """
    orphans = Translation.objects.using(using).filter(~Exists(SourceText.objects.filter(sid=OuterRef("source_text_id"))))
    return orphans.order_by("source_text_id", "lang_id")
