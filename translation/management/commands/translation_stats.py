"""Management command to show translation statistics."""

from django.core.management.base import BaseCommand

from ...models import SourceText
from ...utils import attached_translations, get_orphaned_translations, get_translation_coverage


class Command(BaseCommand):
    """Show translation statistics and coverage."""

    help = "Display translation statistics and coverage information"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--detailed",
            action="store_true",
            help="Show coverage per language",
        )
        parser.add_argument(
            "--orphans",
            action="store_true",
            help="List translations stored for keys that have no source text",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        self.show_overview()

        if options["detailed"]:
            self.show_detailed_coverage()

        if options["orphans"]:
            self.show_orphaned_translations()

    def show_overview(self):
        """Show overview statistics."""
        translations = attached_translations()
        total_keys = SourceText.objects.count()
        total_translations = translations.count()
        languages = translations.values("lang_id").distinct().count()

        self.stdout.write(self.style.SUCCESS("Translation Overview"))
        self.stdout.write("=" * 50)
        self.stdout.write(f"Source texts:     {total_keys}")
        self.stdout.write(f"Translations:     {total_translations}")
        self.stdout.write(f"Languages:        {languages}")
        self.stdout.write("")

    def show_detailed_coverage(self):
        """Show detailed coverage per language."""
        coverage = get_translation_coverage()

        self.stdout.write(self.style.SUCCESS("Coverage by Language"))
        self.stdout.write("=" * 50)

        for lang_id, info in coverage.items():
            percentage = info["percentage"]
            status_color = self.style.SUCCESS if percentage == 100 else (self.style.WARNING if percentage >= 50 else self.style.ERROR)

            self.stdout.write(f"{lang_id}: {status_color(f'{percentage:.1f}%')} ({info['translated']}/{info['total']})")

        self.stdout.write("")

    def show_orphaned_translations(self):
        """List translations whose key has no source text."""
        self.stdout.write(self.style.SUCCESS("Orphaned Translations"))
        self.stdout.write("=" * 50)

        orphans = get_orphaned_translations()
        if not orphans.exists():
            self.stdout.write("No orphaned translations")
        for translation in orphans:
            self.stdout.write(f"  - {translation.source_text_id} [{translation.lang_id}]")

        self.stdout.write("")
