from unittest import mock

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from menumanager.menus.models import MenuItem, descendant_ids
from menumanager.menus.services import delete_menu_item, move_menu_item, reorder_menu_items
from menumanager.menus.tests import factories
from menumanager.utils.tests.base import TestBase, disable_logging
from menumanager.utils.tests.db import refresh


class TestReorder(TestBase):
    def test_reorder_children(self):
        parent = factories.create_menu_item(menu_title="Parent")
        a, b, c = [factories.create_menu_item(parent=parent, menu_title=t) for t in "abc"]
        reorder_menu_items(parent, [c.id, a.id, b.id])
        assert list(parent.ordered_children()) == [c, a, b]
        assert [item.sort for item in parent.ordered_children()] == [1, 2, 3]

    def test_reorder_top_level(self):
        menu_set = factories.create_menu_set()
        a = factories.create_menu_item(menu_set=menu_set)
        b = factories.create_menu_item(menu_set=menu_set)
        factories.create_menu_item(parent=a)
        reorder_menu_items(menu_set, [b.id, a.id])
        assert list(menu_set.top_level_items()) == [b, a]

    def test_unknown_id(self):
        parent = factories.create_menu_item()
        a = factories.create_menu_item(parent=parent)
        stranger = factories.create_menu_item()
        with pytest.raises(ValueError):
            reorder_menu_items(parent, [a.id, stranger.id])

    def test_missing_id(self):
        parent = factories.create_menu_item()
        a = factories.create_menu_item(parent=parent)
        factories.create_menu_item(parent=parent)
        with pytest.raises(ValueError):
            reorder_menu_items(parent, [a.id])

    def test_duplicates(self):
        parent = factories.create_menu_item()
        a = factories.create_menu_item(parent=parent)
        with pytest.raises(ValueError):
            reorder_menu_items(parent, [a.id, a.id])

    def test_bad_type(self):
        parent = factories.create_menu_item()
        with pytest.raises(ValueError):
            reorder_menu_items(parent, "1,2")

    def test_all_or_nothing(self):
        parent = factories.create_menu_item()
        a = factories.create_menu_item(parent=parent)
        b = factories.create_menu_item(parent=parent)
        with mock.patch.object(MenuItem.objects, "bulk_update", side_effect=IntegrityError):
            with pytest.raises(IntegrityError):
                reorder_menu_items(parent, [b.id, a.id])
        assert list(parent.ordered_children()) == [a, b]
        assert [item.sort for item in parent.ordered_children()] == [1, 2]


class TestMove(TestBase):
    def test_move_to_other_parent(self):
        menu_set = factories.create_menu_set()
        first = factories.create_menu_item(menu_set=menu_set)
        second = factories.create_menu_item(menu_set=menu_set)
        existing = factories.create_menu_item(parent=second)
        moved = factories.create_menu_item(parent=first)
        move_menu_item(moved, second)
        assert list(second.ordered_children()) == [existing, moved]
        assert list(first.ordered_children()) == []

    def test_move_to_top_level(self):
        parent = factories.create_menu_item()
        child = factories.create_menu_item(parent=parent)
        move_menu_item(child, None)
        assert list(parent.menu_set.top_level_items()) == [parent, child]
        assert child.sort == 2

    def test_move_under_own_descendant(self):
        top = factories.create_menu_tree(depth=2, width=1)
        grandchild = top.children.get().children.get()
        old_sort = top.sort
        with pytest.raises(ValidationError):
            move_menu_item(top, grandchild)
        # Left as it was, both in memory and in the database
        assert top.is_top_level
        assert top.sort == old_sort
        assert refresh(top).is_top_level


class TestDelete(TestBase):
    def test_descendant_ids(self):
        top = factories.create_menu_tree(depth=2, width=2)
        children = list(top.ordered_children())
        grandchildren = [gc for child in children for gc in child.ordered_children()]
        found = descendant_ids(top)
        # Breadth first: all children come before any grandchildren
        assert found[:2] == [c.id for c in children]
        assert set(found[2:]) == {gc.id for gc in grandchildren}

    def test_descendant_ids_leaf(self):
        assert descendant_ids(factories.create_menu_item()) == []

    @disable_logging()
    def test_delete_cascades(self):
        top = factories.create_menu_tree(depth=4, width=2)
        sibling = factories.create_menu_item(menu_set=top.menu_set)
        deleted = delete_menu_item(top)
        assert deleted == 1 + 2 + 4 + 8 + 16
        assert list(MenuItem.objects.all()) == [sibling]

    def test_delete_logs(self):
        top = factories.create_menu_tree(depth=1, width=1)
        with self.assertLogs("menumanager.menus.services", level="INFO") as logs:
            delete_menu_item(top)
        assert "2 menu items in total" in logs.output[0]

    def test_failed_delete_removes_nothing(self):
        top = factories.create_menu_tree(depth=2, width=2)
        with mock.patch("django.db.models.deletion.Collector.delete", side_effect=IntegrityError):
            with pytest.raises(IntegrityError):
                delete_menu_item(top)
        assert MenuItem.objects.count() == 7
