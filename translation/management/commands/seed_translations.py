"""Management command to seed the demo source texts and translations."""

from django.core.management.base import BaseCommand

from ...results import ResultStatus
from ...services import TranslationService
from ...store import TranslationStore

SEED_DATA = [
    {
        "sid": "goodbye_message",
        "text": "Goodbye",
        "translations": [{"langId": "de-DE", "text": "Auf Wiedersehen"}],
    },
    {
        "sid": "welcome_message",
        "text": "Welcome to Jedox Translator",
        "translations": [{"langId": "de-DE", "text": "Willkommen bei Jedox Translator"}],
    },
]


class Command(BaseCommand):
    """Create the demo keys used by the admin UI."""

    help = "Seed the demo source texts and their German translations"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo keys before seeding them again",
        )
        parser.add_argument(
            "--database",
            default="default",
            help="Database alias to seed",
        )

    def handle(self, *args, **options):
        """Handle the command."""
        service = TranslationService(TranslationStore(using=options["database"]))

        if options["reset"]:
            for detail in SEED_DATA:
                if service.delete_source_text(detail["sid"]).is_success:
                    self.stdout.write(f"Deleted: {detail['sid']}")

        created = 0
        for detail in SEED_DATA:
            result = service.create_source_text(detail)
            if result.is_success:
                created += 1
                self.stdout.write(f"Created: {detail['sid']}")
            elif result.status == ResultStatus.CONFLICT:
                self.stdout.write(self.style.WARNING(f"Skipped existing: {detail['sid']}"))
            else:
                self.stderr.write(f"Error seeding \"{detail['sid']}\": {'; '.join(result.errors)}")

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} source text(s)."))
