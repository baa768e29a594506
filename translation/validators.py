"""Input validation for translation service operations."""

from typing import Any

from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator

SID_MAX_LENGTH = 200
LANG_ID_MAX_LENGTH = 10


class TranslationValidator:
    """Collect validation messages for service inputs.

    Each method returns a list of human-readable messages; an empty list
    means the input is valid.
    """

    @staticmethod
    def _check_length(field: str, value: str, limit: int) -> list[str]:
        try:
            MaxLengthValidator(limit)(value)
        except ValidationError as e:
            return [f"{field}: {message}" for message in e.messages]
        return []

    @staticmethod
    def validate_key(field: str, value: Any, max_length: int) -> list[str]:
        """Validate a required, non-blank identifier such as a SID or language code."""
        if value is None:
            return [f"{field}: This field is required."]
        if not isinstance(value, str):
            return [f"{field}: Must be a string."]
        if not value.strip():
            return [f"{field}: This field may not be blank."]
        return TranslationValidator._check_length(field, value, max_length)

    @staticmethod
    def validate_text(field: str, value: Any) -> list[str]:
        """Validate a required text value. Empty strings are allowed."""
        if value is None:
            return [f"{field}: This field is required."]
        if not isinstance(value, str):
            return [f"{field}: Must be a string."]
        return []

    @staticmethod
    def validate_detail(detail: Any) -> list[str]:
        """Validate a source text detail payload.

        Args:
            detail: Dictionary with ``sid``, ``text`` and optional ``translations``

        Returns:
            List of validation messages
        """
        if not isinstance(detail, dict):
            return ["Request body must be an object."]

        errors = []
        errors += TranslationValidator.validate_key("sid", detail.get("sid"), SID_MAX_LENGTH)
        errors += TranslationValidator.validate_text("text", detail.get("text"))

        translations = detail.get("translations")
        if translations is None:
            return errors
        if not isinstance(translations, list):
            errors.append("translations: Must be a list.")
            return errors

        seen = set()
        for index, item in enumerate(translations):
            prefix = f"translations[{index}]"
            if not isinstance(item, dict):
                errors.append(f"{prefix}: Must be an object.")
                continue
            lang_id = item.get("langId")
            errors += TranslationValidator.validate_key(f"{prefix}.langId", lang_id, LANG_ID_MAX_LENGTH)
            errors += TranslationValidator.validate_text(f"{prefix}.text", item.get("text"))
            if isinstance(lang_id, str):
                if lang_id in seen:
                    errors.append(f"{prefix}.langId: Duplicate language '{lang_id}'.")
                seen.add(lang_id)

        return errors

    @staticmethod
    def validate_translation_update(sid: Any, lang_id: Any, text: Any) -> list[str]:
        """Validate the inputs of a translation upsert."""
        errors = []
        errors += TranslationValidator.validate_key("sid", sid, SID_MAX_LENGTH)
        errors += TranslationValidator.validate_key("langId", lang_id, LANG_ID_MAX_LENGTH)
        errors += TranslationValidator.validate_text("text", text)
        return errors
