"""Service layer for translation business logic."""

import logging
from typing import Any

from django.conf import settings

from .results import Result
from .serializers import SourceTextSerializer, TranslationSerializer
from .store import TranslationStore
from .validators import TranslationValidator

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-US"


class TranslationService:
    """Business operations on source texts and translations.

    All results carry plain dictionaries shaped by the serializers; the
    store's model instances never leave this layer.
    """

    def __init__(self, store: TranslationStore):
        """Initialize the service.

        Args:
            store: Store handling persistence for this service
        """
        self.store = store
        self.default_language = getattr(settings, "TRANSLATION_DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)

    def list_all_keys(self) -> Result:
        """Return all source text keys."""
        return self.store.list_all_keys()

    def get_by_key(self, sid: str) -> Result:
        """Return the detail of one key with all its translations."""
        return self.store.get_by_key(sid).map(SourceTextSerializer.to_dict)

    def create_source_text(self, detail: dict[str, Any]) -> Result:
        """Create a source text with its optional initial translations.

        Args:
            detail: Dictionary with ``sid``, ``text`` and optional ``translations``
                (a list of ``{"langId", "text"}`` dictionaries)

        Returns:
            Result with the created detail, a conflict if the key exists,
            or the validation messages
        """
        errors = TranslationValidator.validate_detail(detail)
        if errors:
            return Result.invalid(errors)

        sid = detail["sid"]
        translations = [(item["langId"], item["text"]) for item in detail.get("translations") or []]

        result = self.store.create_source_text(sid, detail["text"], translations)
        if result.is_success:
            logger.info(f"Created source text '{sid}' with {len(translations)} translation(s)")
        return result.map(SourceTextSerializer.to_dict)

    def update_translation(self, sid: str, lang_id: str, text: str) -> Result:
        """Create or overwrite the translation of a key for one language.

        No source text is required for sid: the translation is stored even
        when the key does not exist.
        """
        errors = TranslationValidator.validate_translation_update(sid, lang_id, text)
        if errors:
            return Result.invalid(errors)

        result = self.store.upsert_translation(sid, lang_id, text)
        logger.info(f"Updated translation '{sid}' [{lang_id}]")
        return result.map(TranslationSerializer.to_dict)

    def update_source_text(self, sid: str, text: str) -> Result:
        """
        Replace the canonical English text of an existing key.

        Args:
            sid: Key of the source text
            text: New text; may be empty but must be a string

        Returns:
            Result with the updated detail, not found, or the validation messages
        """
        errors = TranslationValidator.validate_text("text", text)
        if errors:
            return Result.invalid(errors)

        result = self.store.update_source_text(sid, text)
        if result.is_success:
            logger.info(f"Updated source text '{sid}'")
        return result.map(SourceTextSerializer.to_dict)

    def delete_translation(self, sid: str, lang_id: str) -> Result:
        """Delete the translation of a key for one language."""
        result = self.store.delete_translation(sid, lang_id)
        if result.is_success:
            logger.info(f"Deleted translation '{sid}' [{lang_id}]")
        return result

    def delete_source_text(self, sid: str) -> Result:
        """Delete a key together with all its translations."""
        result = self.store.delete_source_text(sid)
        if result.is_success:
            logger.info(f"Deleted source text '{sid}'")
        return result

    def list_with_language(self, lang_id: str) -> Result:
        """List the text of every key in one language.

        For the default language every key is listed with its source text.
        For any other code only keys having a translation for exactly that
        code are listed; there is no fallback to the source text or to a
        related regional variant. Codes are compared case-sensitively.

        Args:
            lang_id: Locale tag, e.g. de-DE

        Returns:
            Result with a list of ``{"sid", "text"}`` rows ordered by key
        """
        result = self.store.list_with_language_rows(lang_id)
        if not result.is_success:
            return result

        rows = []
        for source_text in result.value:
            if lang_id == self.default_language:
                rows.append(SourceTextSerializer.to_row(source_text, source_text.text))
            elif source_text.language_translations:
                translation = source_text.language_translations[0]
                rows.append(SourceTextSerializer.to_row(source_text, translation.translated_text))

        return Result.success(rows)
