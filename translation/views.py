"""JSON API views for translation app."""

import json
import logging

from django.contrib.auth.mixins import LoginRequiredMixin
from django.db import DatabaseError
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .responses import error_response, result_response
from .services import TranslationService
from .store import TranslationStore

logger = logging.getLogger(__name__)


def get_translation_service() -> TranslationService:
    """Build a service backed by a store on the default database."""
    return TranslationService(TranslationStore())


@method_decorator(csrf_exempt, name="dispatch")
class TranslationAPIView(LoginRequiredMixin, View):
    """Base view for translation API endpoints.

    Requires an authenticated user and turns unexpected database failures
    into a generic error response.
    """

    def setup(self, request, *args, **kwargs):
        """Create the service for this request."""
        super().setup(request, *args, **kwargs)
        self.service = get_translation_service()

    def handle_no_permission(self):
        """Answer unauthenticated API calls with 401 instead of a login redirect."""
        return error_response("Authentication required", status=401)

    def dispatch(self, request, *args, **kwargs):
        """Dispatch the request, converting database failures into a 500 response."""
        try:
            return super().dispatch(request, *args, **kwargs)
        except DatabaseError as e:
            logger.error(f"Unexpected database error in {request.path}: {e}", exc_info=True)
            return error_response("An internal error occurred", status=500)

    def parse_body(self, request):
        """Decode the JSON request body.

        Returns:
            Tuple of (data, error_response); exactly one of them is None
        """
        try:
            return json.loads(request.body or b"null"), None
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None, error_response("Invalid JSON", status=400)

    def parse_text(self, request):
        """Decode a ``{"text": ...}`` body and return (text, error_response)."""
        data, error = self.parse_body(request)
        if error:
            return None, error
        if not isinstance(data, dict):
            return None, error_response("Request body must be an object.", status=400)
        return data.get("text"), None


class SidListAPIView(TranslationAPIView):
    """List all source text keys."""

    def get(self, request):
        """Return all keys."""
        return result_response(self.service.list_all_keys(), "list_all_keys")


class TranslationCollectionAPIView(TranslationAPIView):
    """List texts for a language and create new source texts."""

    def get(self, request):
        """Return the text of every key in the requested language."""
        lang_id = request.GET.get("langId", self.service.default_language)
        return result_response(self.service.list_with_language(lang_id), "list_with_language", lang_id)

    def post(self, request):
        """Create a source text with optional translations."""
        data, error = self.parse_body(request)
        if error:
            return error
        return result_response(self.service.create_source_text(data), "create_source_text", data)


class SourceTextDetailAPIView(TranslationAPIView):
    """Fetch or delete one source text."""

    def get(self, request, sid):
        """Return the source text with all its translations."""
        return result_response(self.service.get_by_key(sid), "get_by_key", sid)

    def delete(self, request, sid):
        """Delete the source text and all its translations."""
        return result_response(self.service.delete_source_text(sid), "delete_source_text", sid)


class SourceTextUpdateAPIView(TranslationAPIView):
    """Update the English text of a source text."""

    def put(self, request, sid):
        """Replace the source text."""
        text, error = self.parse_text(request)
        if error:
            return error
        return result_response(self.service.update_source_text(sid, text), "update_source_text", {"sid": sid, "text": text})


class TranslationDetailAPIView(TranslationAPIView):
    """Upsert or delete the translation of a key for one language."""

    def put(self, request, sid, lang_id):
        """Create or overwrite the translation."""
        text, error = self.parse_text(request)
        if error:
            return error
        params = {"sid": sid, "langId": lang_id, "text": text}
        return result_response(self.service.update_translation(sid, lang_id, text), "update_translation", params)

    def delete(self, request, sid, lang_id):
        """Delete the translation."""
        params = {"sid": sid, "langId": lang_id}
        return result_response(self.service.delete_translation(sid, lang_id), "delete_translation", params)
