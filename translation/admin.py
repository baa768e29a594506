"""Admin configuration for translation app."""

from django.contrib import admin
from django.db.models import Count

from .models import SourceText, Translation


class TranslationInline(admin.TabularInline):
    """Inline editor for the translations of a source text."""

    model = Translation
    fields = ["lang_id", "translated_text"]
    extra = 0


@admin.register(SourceText)
class SourceTextAdmin(admin.ModelAdmin):
    """Admin interface for SourceText model."""

    list_display = ["sid", "text_preview", "translation_count"]
    search_fields = ["sid", "text"]
    ordering = ["sid"]
    inlines = [TranslationInline]

    def get_readonly_fields(self, request, obj=None):
        """Keys are immutable once created."""
        if obj is not None:
            return ["sid"]
        return []

    def get_queryset(self, request):
        """Annotate the number of translations per source text."""
        return super().get_queryset(request).annotate(num_translations=Count("translations"))

    def text_preview(self, obj):
        """Show a preview of the text."""
        if obj.text:
            preview = obj.text[:50]
            if len(obj.text) > 50:
                preview += "..."
            return preview
        return "-"

    text_preview.short_description = "Text Preview"

    def translation_count(self, obj):
        """Show how many languages the text is translated into."""
        return obj.num_translations

    translation_count.short_description = "Translations"
    translation_count.admin_order_field = "num_translations"


@admin.register(Translation)
class TranslationAdmin(admin.ModelAdmin):
    """Admin interface for Translation model."""

    list_display = ["source_text_id", "lang_id", "translated_text"]
    list_filter = ["lang_id"]
    search_fields = ["source_text__sid", "translated_text"]
    ordering = ["source_text_id", "lang_id"]
    raw_id_fields = ["source_text"]
