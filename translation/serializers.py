"""Serializers shaping translation models into transfer objects."""

from typing import Any


class TranslationSerializer:
    """Serializer for Translation model responses."""

    @staticmethod
    def to_dict(translation) -> dict[str, Any]:
        """Convert Translation instance to its language/text view.

        Args:
            translation: Translation model instance

        Returns:
            Dictionary with ``langId`` and ``text``
        """
        return {
            "langId": translation.lang_id,
            "text": translation.translated_text,
        }


class SourceTextSerializer:
    """Serializer for SourceText model responses."""

    @staticmethod
    def to_dict(source_text) -> dict[str, Any]:
        """Convert SourceText instance to the detail view with all its translations.

        Args:
            source_text: SourceText model instance

        Returns:
            Dictionary with ``sid``, ``text`` and ``translations``
        """
        return {
            "sid": source_text.sid,
            "text": source_text.text,
            "translations": [TranslationSerializer.to_dict(t) for t in source_text.translations.all()],
        }

    @staticmethod
    def to_row(source_text, text: str) -> dict[str, Any]:
        """Build a list-with-language row for a source text."""
        return {"sid": source_text.sid, "text": text}
