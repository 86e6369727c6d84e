import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("sitecontent", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="MenuSet",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, unique=True, verbose_name="name")),
                ("sort", models.IntegerField(default=0, verbose_name="sort order")),
            ],
            options={
                "ordering": ["sort", "name"],
                "permissions": [("manage_menu_sets", "Manage Menu Sets")],
            },
        ),
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "menu_title",
                    models.CharField(
                        blank=True,
                        help_text="Leave blank to use the menu title of the selected page",
                        max_length=255,
                        verbose_name="menu title",
                    ),
                ),
                (
                    "link",
                    models.TextField(
                        blank=True,
                        help_text="External URL. Cleared whenever a page is selected.",
                        verbose_name="link",
                    ),
                ),
                ("sort", models.IntegerField(blank=True, verbose_name="sort order")),
                ("is_new_window", models.BooleanField(default=False, verbose_name="open in a new window")),
                (
                    "page",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="menu_items",
                        to="sitecontent.page",
                    ),
                ),
                (
                    "menu_set",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="menu_items",
                        to="menus.menuset",
                    ),
                ),
                (
                    "parent_menu_item",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="children",
                        to="menus.menuitem",
                        verbose_name="parent menu item (none = top level)",
                    ),
                ),
            ],
            options={
                "ordering": ["sort", "id"],
                "permissions": [("manage_menu_items", "Manage Menu Items")],
            },
        ),
    ]
