"""
Menus for the site. A MenuSet is a named menu (e.g. "Main navigation"), made
of MenuItems. Each MenuItem links either to a Page or to an external URL, and
may have child items for sub menus.
"""
from enum import StrEnum

from django.core.exceptions import FieldDoesNotExist, ValidationError
from django.db import models
from django.db.models import Max

from menumanager.menus.linked_content import LinkedContent
from menumanager.sitecontent.models import Page

# Permission names, as used by user.has_perm
MANAGE_MENU_ITEMS = "menus.manage_menu_items"
MANAGE_MENU_SETS = "menus.manage_menu_sets"


class MenuItemField(StrEnum):
    ID = "id"
    TITLE = "title"
    MENU_TITLE = "menu_title"
    LINK = "link"
    SORT = "sort"
    IS_NEW_WINDOW = "is_new_window"
    IS_NEW_WINDOW_NICE = "is_new_window_nice"


class MenuSet(models.Model):
    name = models.CharField("name", max_length=255, unique=True)
    sort = models.IntegerField("sort order", default=0)

    class Meta:
        ordering = ["sort", "name"]
        permissions = [
            ("manage_menu_sets", "Manage Menu Sets"),
        ]

    def __str__(self):
        return self.name

    def top_level_items(self):
        return self.menu_items.top_level().order_by("sort", "id")

    def can_create(self, user):
        return user.has_perm(MANAGE_MENU_SETS)

    def can_delete(self, user):
        return user.has_perm(MANAGE_MENU_SETS)

    def can_edit(self, user):
        return user.has_perm(MANAGE_MENU_SETS)

    def can_view(self, user):
        return user.has_perm(MANAGE_MENU_SETS)


class MenuItemQuerySet(models.QuerySet):
    def top_level(self):
        return self.filter(parent_menu_item__isnull=True)


class MenuItemManager(models.Manager.from_queryset(MenuItemQuerySet)):
    def get_queryset(self):
        return super().get_queryset().select_related("page")


class MenuItem(models.Model):
    menu_title = models.CharField(
        "menu title", max_length=255, blank=True, help_text="Leave blank to use the menu title of the selected page"
    )
    link = models.TextField("link", blank=True, help_text="External URL. Cleared whenever a page is selected.")
    # Left empty, this is filled in on save to put the item last amongst its siblings
    sort = models.IntegerField("sort order", blank=True)
    is_new_window = models.BooleanField("open in a new window", default=False)
    page = models.ForeignKey(
        Page,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="menu_items",
    )
    menu_set = models.ForeignKey(MenuSet, on_delete=models.CASCADE, related_name="menu_items")
    parent_menu_item = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="children",
        verbose_name="parent menu item (none = top level)",
    )

    objects = MenuItemManager()

    # Attributes of a menu item that are calculated rather than stored,
    # mapped to the method that calculates them.
    computed_accessors = {
        MenuItemField.TITLE: "get_title",
        MenuItemField.IS_NEW_WINDOW_NICE: "is_new_window_nice",
    }

    class Meta:
        ordering = ["sort", "id"]
        permissions = [
            ("manage_menu_items", "Manage Menu Items"),
        ]

    def __str__(self):
        title = self.resolve(MenuItemField.MENU_TITLE)
        if title:
            return title
        return f"Menu item {self.id}"

    def clean(self):
        super().clean()
        if self.parent_menu_item_id is None or self.pk is None:
            return
        if self.parent_menu_item_id == self.pk:
            raise ValidationError({"parent_menu_item": "A menu item cannot be its own parent."})
        if self.parent_menu_item_id in descendant_ids(self):
            raise ValidationError(
                {"parent_menu_item": "A menu item cannot be moved underneath one of its own sub items."}
            )

    def save(self, **kwargs):
        # A selected page always wins over an external link, so that
        # resolve(LINK) returns the page's URL.
        if self.page_id is not None:
            self.link = ""
            update_fields = kwargs.get("update_fields")
            if update_fields is not None:
                kwargs["update_fields"] = {*update_fields, "link"}
        if self.sort is None:
            self.sort = self.next_sort_value()
        super().save(**kwargs)

    def next_sort_value(self):
        if self.parent_menu_item_id is not None:
            siblings = MenuItem.objects.filter(parent_menu_item_id=self.parent_menu_item_id)
        else:
            siblings = MenuItem.objects.filter(menu_set_id=self.menu_set_id).top_level()
        max_sort = siblings.exclude(pk=self.pk).aggregate(max_sort=Max("sort"))["max_sort"]
        return (max_sort or 0) + 1

    # Titles and links

    def get_title(self):
        return self.menu_title

    def is_new_window_nice(self):
        return "Yes" if self.is_new_window else "No"

    @property
    def linked_content(self) -> LinkedContent | None:
        if self.page_id is None:
            return None
        return self.page

    def resolve(self, field: MenuItemField | str):
        """
        Returns the value of `field` for this menu item. If the menu item's own
        value is empty, and a page has been selected, the page's value for
        `field` is returned instead, if it has one.
        """
        name = str(field)
        own_value = self._own_value(name)
        if own_value or name == MenuItemField.ID:
            return own_value

        content = self.linked_content
        if content is None:
            return own_value
        if content.has_computed(name):
            value = content.invoke_computed(name)
        else:
            value = content.read_field(name)
        if value:
            return value
        return own_value

    def _own_value(self, name):
        if name in self.computed_accessors:
            return getattr(self, self.computed_accessors[name])()
        try:
            field = self._meta.get_field(name)
        except FieldDoesNotExist:
            return None
        if not field.concrete:
            return None
        return getattr(self, field.attname)

    # Tree structure

    @property
    def is_top_level(self):
        return self.parent_menu_item_id is None

    def get_parent(self):
        return self.menu_set

    def ordered_children(self):
        return self.children.order_by("sort", "id")

    # Permissions. `user` is anything with a `has_perm` method, normally
    # request.user

    def can_create(self, user):
        return user.has_perm(MANAGE_MENU_ITEMS)

    def can_delete(self, user):
        return user.has_perm(MANAGE_MENU_ITEMS)

    def can_edit(self, user):
        return user.has_perm(MANAGE_MENU_ITEMS)

    def can_view(self, user):
        return user.has_perm(MANAGE_MENU_ITEMS)


def descendant_ids(menu_item):
    """
    Returns the ids of all the sub items of `menu_item`, at any depth,
    breadth first.
    """
    found = []
    seen = {menu_item.id}
    level = [menu_item.id]
    while level:
        level = [
            child_id
            for child_id in MenuItem.objects.filter(parent_menu_item_id__in=level)
            .order_by("sort", "id")
            .values_list("id", flat=True)
            if child_id not in seen
        ]
        seen.update(level)
        found.extend(level)
    return found
