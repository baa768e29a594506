import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SourceText",
            fields=[
                (
                    "sid",
                    models.CharField(
                        help_text="Unique identifier for this source text",
                        max_length=200,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("text", models.TextField(blank=True, help_text="The canonical English text")),
            ],
            options={
                "verbose_name": "Source Text",
                "verbose_name_plural": "Source Texts",
                "ordering": ["sid"],
            },
        ),
        migrations.CreateModel(
            name="Translation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("lang_id", models.CharField(help_text="Locale tag, e.g. de-DE", max_length=10)),
                ("translated_text", models.TextField(blank=True, help_text="The translated text")),
                (
                    "source_text",
                    models.ForeignKey(
                        db_column="sid",
                        db_constraint=False,
                        help_text="Source text this translation belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="translations",
                        to="translation.sourcetext",
                    ),
                ),
            ],
            options={
                "verbose_name": "Translation",
                "verbose_name_plural": "Translations",
                "ordering": ["lang_id"],
                "constraints": [
                    models.UniqueConstraint(fields=("source_text", "lang_id"), name="translation_unique_sid_lang"),
                ],
            },
        ),
    ]
