from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Page",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255, verbose_name="title")),
                (
                    "menu_title",
                    models.CharField(
                        blank=True,
                        help_text="Shorter title for menus. Defaults to the title.",
                        max_length=255,
                        verbose_name="menu title",
                    ),
                ),
                ("url", models.CharField(max_length=255, unique=True, verbose_name="URL")),
                ("html", models.TextField(blank=True, verbose_name="HTML")),
            ],
            options={
                "ordering": ["url"],
            },
        ),
    ]
