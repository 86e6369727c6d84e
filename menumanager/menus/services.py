import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from menumanager.menus.models import MenuItem, MenuSet, descendant_ids

logger = logging.getLogger(__name__)


def _siblings_for(parent: MenuItem | MenuSet):
    if isinstance(parent, MenuSet):
        return parent.menu_items.top_level()
    return parent.children.all()


@transaction.atomic
def reorder_menu_items(parent: MenuItem | MenuSet, ordered_ids: list[int]) -> None:
    """
    Rewrites the sort order of the direct children of `parent` (a MenuItem, or
    a MenuSet for top level items) to match `ordered_ids`, which must contain
    every child exactly once.
    """
    if not isinstance(ordered_ids, list) or not all(isinstance(i, int) for i in ordered_ids):
        raise ValueError("ordered_ids must be a list of integers")
    if len(set(ordered_ids)) != len(ordered_ids):
        raise ValueError("ordered_ids contains duplicates")

    # Lock the siblings so that concurrent reorders are serialised
    siblings = {item.id: item for item in _siblings_for(parent).select_for_update(of=("self",))}
    if set(ordered_ids) != set(siblings):
        unknown = sorted(set(ordered_ids) - set(siblings))
        missing = sorted(set(siblings) - set(ordered_ids))
        raise ValueError(f"ordered_ids does not match the items being reordered, unknown={unknown} missing={missing}")

    for position, item_id in enumerate(ordered_ids, start=1):
        siblings[item_id].sort = position
    MenuItem.objects.bulk_update(siblings.values(), ["sort"])
    logger.info("Reordered %s menu items under %r: %s", len(ordered_ids), parent, ordered_ids)


@transaction.atomic
def move_menu_item(menu_item: MenuItem, new_parent: MenuItem | None) -> MenuItem:
    """
    Moves `menu_item` (and its sub items) to be the last child of
    `new_parent`, or to the top level of its menu set if `new_parent` is None.
    """
    old_parent, old_sort = menu_item.parent_menu_item, menu_item.sort
    menu_item.parent_menu_item = new_parent
    menu_item.sort = None
    try:
        # Checks for cycles:
        menu_item.full_clean(exclude=["sort"])
    except ValidationError:
        menu_item.parent_menu_item, menu_item.sort = old_parent, old_sort
        raise
    menu_item.save()
    logger.info("Moved menu item %s under %r", menu_item.id, new_parent)
    return menu_item


@transaction.atomic
def delete_menu_item(menu_item: MenuItem) -> int:
    """
    Deletes `menu_item` and all its sub items, returning the number of menu
    items deleted.
    """
    item_id = menu_item.id
    sub_item_ids = descendant_ids(menu_item)
    _, deleted_per_model = menu_item.delete()
    deleted = deleted_per_model.get(MenuItem._meta.label, 0)
    logger.info("Deleted menu item %s and sub items %s, %s menu items in total", item_id, sub_item_ids, deleted)
    return deleted
