"""Models for translation app."""

from django.db import models


class SourceText(models.Model):
    """Canonical English text identified by a string key."""

    sid = models.CharField(
        max_length=200,
        primary_key=True,
        help_text="Unique identifier for this source text",
    )
    text = models.TextField(
        blank=True,
        help_text="The canonical English text",
    )

    class Meta:
        """Meta configuration for SourceText."""

        ordering = ["sid"]
        verbose_name = "Source Text"
        verbose_name_plural = "Source Texts"

    def __str__(self):
        """Return string representation."""
        return self.sid


class Translation(models.Model):
    """Translated text of a source text for one language."""

    # No database constraint: translations may be written for a key that has no source text yet.
    source_text = models.ForeignKey(
        SourceText,
        on_delete=models.CASCADE,
        related_name="translations",
        db_column="sid",
        db_constraint=False,
        help_text="Source text this translation belongs to",
    )
    lang_id = models.CharField(
        max_length=10,
        help_text="Locale tag, e.g. de-DE",
    )
    translated_text = models.TextField(
        blank=True,
        help_text="The translated text",
    )

    class Meta:
        """Meta configuration for Translation."""

        ordering = ["lang_id"]
        verbose_name = "Translation"
        verbose_name_plural = "Translations"
        constraints = [
            models.UniqueConstraint(fields=["source_text", "lang_id"], name="translation_unique_sid_lang"),
        ]

    def __str__(self):
        """Return string representation."""
        return f"{self.source_text_id} [{self.lang_id}]"

    @property
    def sid(self):
        """Key of the source text, available even when the source text row is missing."""
        return self.source_text_id
