"""Persistence layer for source texts and their translations."""

import logging
from typing import Iterable

from django.db import IntegrityError, transaction
from django.db.models import Prefetch

from .models import SourceText, Translation
from .results import Result

logger = logging.getLogger(__name__)


class TranslationStore:
    """CRUD access to SourceText and Translation rows.

    The store keeps keys unique and holds at most one translation per key and
    language. Expected outcomes are classified into Result objects; no
    business policy is applied here.
    """

    def __init__(self, using: str = "default"):
        """Initialize the store.

        Args:
            using: Database alias all queries are routed to
        """
        self.using = using

    def _source_texts(self):
        return SourceText.objects.using(self.using)

    def _translations(self):
        return Translation.objects.using(self.using)

    def _fetch(self, sid: str):
        return self._source_texts().prefetch_related("translations").filter(pk=sid).first()

    def _fetched(self, sid: str) -> Result:
        source_text = self._fetch(sid)
        if source_text is None:
            return Result.not_found(f"SID '{sid}' not found")
        return Result.success(source_text)

    def list_all_keys(self) -> Result:
        """Return the keys of all source texts, ordered by key."""
        return Result.success(list(self._source_texts().values_list("sid", flat=True)))

    def get_by_key(self, sid: str) -> Result:
        """Return the source text stored under sid with its translations prefetched."""
        return self._fetched(sid)

    def create_source_text(self, sid: str, text: str, translations: Iterable[tuple[str, str]] = ()) -> Result:
        """Insert a source text together with its initial translations.

        The primary key insert is not preceded by an existence check; a
        duplicate key raises IntegrityError at write time, which is reported
        as a conflict. Translation rows already stored for the key (written
        before the source text existed) are overwritten, not duplicated.

        Args:
            sid: Key of the new source text
            text: Canonical English text
            translations: (lang_id, translated_text) pairs

        Returns:
            Result with the created SourceText, or a conflict
        """
        try:
            with transaction.atomic(using=self.using):
                self._source_texts().create(sid=sid, text=text)
                rows = [Translation(source_text_id=sid, lang_id=lang_id, translated_text=value) for lang_id, value in translations]
                if rows:
                    self._translations().bulk_create(
                        rows,
                        update_conflicts=True,
                        unique_fields=["source_text", "lang_id"],
                        update_fields=["translated_text"],
                    )
                return self._fetched(sid)
        except IntegrityError as e:
            logger.info(f"Rejected duplicate source text '{sid}': {e}")
            return Result.conflict(f"SID '{sid}' already exists")

    def upsert_translation(self, sid: str, lang_id: str, text: str) -> Result:
        """Create or overwrite the translation of sid for lang_id.

        The write goes through even when no source text exists for sid.
        Concurrent writers to the same pair are serialized by the row lock
        and the unique constraint; the last one to commit wins.
        """
        translation, created = self._translations().update_or_create(
            source_text_id=sid,
            lang_id=lang_id,
            defaults={"translated_text": text},
        )
        if created:
            logger.debug(f"Inserted translation {translation}")
        return Result.success(translation)

    def update_source_text(self, sid: str, text: str) -> Result:
        """Replace the text of an existing source text.

        The row is locked before the update and stays locked until it has
        been read back, so a concurrent delete cannot slip in between.

        Args:
            sid: Key of the source text
            text: New canonical English text

        Returns:
            Result with the updated SourceText, or not found
        """
        with transaction.atomic(using=self.using):
            locked = list(self._source_texts().select_for_update().filter(pk=sid).values_list("sid", flat=True))
            if not locked:
                return Result.not_found(f"SID '{sid}' not found")
            self._source_texts().filter(pk=sid).update(text=text)
            return self._fetched(sid)

    def delete_translation(self, sid: str, lang_id: str) -> Result:
        """Delete the translation of sid for lang_id."""
        deleted, _ = self._translations().filter(source_text_id=sid, lang_id=lang_id).delete()
        if not deleted:
            return Result.not_found(f"Translation for SID '{sid}' and language '{lang_id}' not found")
        return Result.success()

    def delete_source_text(self, sid: str) -> Result:
        """Delete a source text; its translations are removed with it."""
        with transaction.atomic(using=self.using):
            deleted, per_model = self._source_texts().filter(pk=sid).delete()
        if not deleted:
            return Result.not_found(f"SID '{sid}' not found")
        logger.debug(f"Deleted source text '{sid}' with {per_model.get(Translation._meta.label, 0)} translation(s)")
        return Result.success()

    def list_with_language_rows(self, lang_id: str) -> Result:
        """Return every source text with only its lang_id translation prefetched.

        The matching translation, if any, is available as the
        ``language_translations`` list attribute of each source text.
        """
        queryset = self._source_texts().prefetch_related(
            Prefetch(
                "translations",
                queryset=Translation.objects.filter(lang_id=lang_id),
                to_attr="language_translations",
            )
        )
        return Result.success(list(queryset))
