from django.core.exceptions import FieldDoesNotExist
from django.db import models


class Page(models.Model):
    title = models.CharField("title", max_length=255)
    menu_title = models.CharField(
        "menu title", max_length=255, blank=True, help_text="Shorter title for menus. Defaults to the title."
    )
    url = models.CharField("URL", max_length=255, unique=True)
    html = models.TextField("HTML", blank=True)

    # Attribute names that are calculated rather than stored, mapped to the
    # method that calculates them. Used by menu items that link to a page.
    computed_accessors = {
        "link": "get_absolute_url",
        "menu_title": "get_menu_title",
    }

    class Meta:
        ordering = ["url"]

    def __str__(self):
        return f"{self.title} [{self.url}]"

    def get_absolute_url(self):
        return self.url

    def get_menu_title(self):
        return self.menu_title or self.title

    def has_computed(self, name):
        return name in self.computed_accessors

    def invoke_computed(self, name):
        return getattr(self, self.computed_accessors[name])()

    def read_field(self, name):
        try:
            field = self._meta.get_field(name)
        except FieldDoesNotExist:
            return None
        # Reverse relations (e.g. menu_items) are not values of the page
        if not field.concrete:
            return None
        return getattr(self, field.attname)
