from menumanager.menus.models import MenuItem, MenuSet
from menumanager.sitecontent.models import Page
from menumanager.utils.tests.factories import Auto, sequence

MENU_SET_NAME_SEQUENCE = sequence(lambda n: f"Menu {n}")
PAGE_URL_SEQUENCE = sequence(lambda n: f"/page-{n}/")


def create_menu_set(name: str = Auto, sort: int = 0) -> MenuSet:
    return MenuSet.objects.create(name=name or next(MENU_SET_NAME_SEQUENCE), sort=sort)


def create_page(
    *,
    title: str = "A page",
    menu_title: str = "",
    url: str = Auto,
    html: str = "<p>Some content</p>",
) -> Page:
    return Page.objects.create(title=title, menu_title=menu_title, url=url or next(PAGE_URL_SEQUENCE), html=html)


def create_menu_item(
    *,
    menu_set: MenuSet = Auto,
    parent: MenuItem | None = None,
    menu_title: str = "",
    link: str = "",
    page: Page | None = None,
    sort: int | None = None,
    is_new_window: bool = False,
) -> MenuItem:
    if menu_set is Auto:
        menu_set = parent.menu_set if parent is not None else create_menu_set()
    return MenuItem.objects.create(
        menu_set=menu_set,
        parent_menu_item=parent,
        menu_title=menu_title,
        link=link,
        page=page,
        sort=sort,
        is_new_window=is_new_window,
    )


def create_menu_tree(*, depth: int, width: int, menu_set: MenuSet = Auto) -> MenuItem:
    """
    Creates a top level menu item with `width` children at each level,
    `depth` levels deep, and returns the top item.
    """
    top = create_menu_item(menu_set=menu_set, menu_title="Top")
    level = [top]
    for d in range(depth):
        level = [
            create_menu_item(parent=item, menu_title=f"Level {d + 1} item {n}") for item in level for n in range(width)
        ]
    return top
