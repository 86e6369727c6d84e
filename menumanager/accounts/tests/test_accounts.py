import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.management import call_command

from menumanager.accounts.models import (
    MENU_EDITOR_ROLE_NAME,
    SITE_EDITOR_ROLE_NAME,
    Role,
    parse_permission_spec,
    setup_auth_roles,
)
from menumanager.accounts.tests import factories
from menumanager.menus.models import MANAGE_MENU_ITEMS, MANAGE_MENU_SETS
from menumanager.utils.tests.base import TestBase


def test_parse_permission_spec_standard_action():
    assert parse_permission_spec("sitecontent.Page/change") == ("sitecontent", "page", "change_page")


def test_parse_permission_spec_custom_codename():
    assert parse_permission_spec("menus.MenuItem/manage_menu_items") == ("menus", "menuitem", "manage_menu_items")


def test_parse_permission_spec_bad():
    with pytest.raises(ValueError):
        parse_permission_spec("manage_menu_items")


class TestUserModel(TestBase):
    def test_has_perm(self):
        # Depends on static_roles.yaml
        editor = factories.create_menu_editor()
        user = factories.create_user()
        assert editor.has_perm(MANAGE_MENU_ITEMS)
        assert editor.has_perm(MANAGE_MENU_SETS)
        assert not user.has_perm(MANAGE_MENU_ITEMS)

    def test_has_perm_superuser(self):
        user = factories.create_user(is_superuser=True)
        assert user.has_perm(MANAGE_MENU_ITEMS)

    def test_has_perm_inactive(self):
        editor = factories.create_menu_editor(is_active=False)
        assert not editor.has_perm(MANAGE_MENU_ITEMS)

    def test_anonymous(self):
        assert not AnonymousUser().has_perm(MANAGE_MENU_ITEMS)

    def test_has_module_perms(self):
        editor = factories.create_menu_editor()
        assert editor.has_module_perms("menus")
        assert not editor.has_module_perms("accounts")


class TestSetupAuthRoles(TestBase):
    def test_roles_created(self):
        role = Role.objects.get(name=MENU_EDITOR_ROLE_NAME)
        codenames = set(role.permissions.values_list("codename", flat=True))
        assert codenames == {"manage_menu_items", "manage_menu_sets", "view_page"}

    def test_idempotent(self):
        setup_auth_roles()
        setup_auth_roles()
        assert Role.objects.filter(name=MENU_EDITOR_ROLE_NAME).count() == 1

    def test_check_only(self):
        # Everything exists after setUp, so this should not raise
        setup_auth_roles(check_only=True)

    def test_management_command(self):
        Role.objects.all().delete()
        call_command("setup_auth_roles")
        assert Role.objects.filter(name=SITE_EDITOR_ROLE_NAME).exists()
