"""
User accounts for site editors
"""
import logging

import yaml
from django.conf import settings
from django.contrib import auth
from django.contrib.auth.models import AbstractBaseUser, Permission
from django.contrib.auth.models import UserManager as UserManagerDjango
from django.contrib.auth.validators import UnicodeUsernameValidator
from django.contrib.contenttypes.models import ContentType
from django.core.exceptions import PermissionDenied
from django.db import models, transaction
from django.utils import timezone

# These names need to be synced with /config/static_roles.yaml
MENU_EDITOR_ROLE_NAME = "Menu editors"
SITE_EDITOR_ROLE_NAME = "Site editors"

STANDARD_PERMISSION_ACTIONS = ["add", "change", "delete", "view"]


logger = logging.getLogger(__name__)


class UserManager(UserManagerDjango):
    pass


# Our model is similar to AbstractUser, but our permissions are a bit different:
# we don't have user level permissions, and we have our custom 'Role' instead of
# 'Group' (and the M2M is on Role instead of User). So we inherit from
# AbstractBaseUser instead, and copy-paste some fields and methods


class User(AbstractBaseUser):
    username_validator = UnicodeUsernameValidator()

    username = models.CharField(
        max_length=150,
        unique=True,
        help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
        validators=[username_validator],
        error_messages={
            "unique": "A user with that username already exists.",
        },
    )
    first_name = models.CharField(max_length=30, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    email = models.EmailField("email address", blank=True)
    is_staff = models.BooleanField(
        "staff status",
        default=False,
        help_text="Designates whether the user can log into this admin site.",
    )
    is_active = models.BooleanField(
        "active",
        default=True,
        help_text="Designates whether this user should be treated as active. "
        "Unselect this instead of deleting accounts.",
    )
    date_joined = models.DateTimeField(default=timezone.now)
    is_superuser = models.BooleanField(
        "superuser status",
        default=False,
        help_text="Designates that this user has all permissions without " "explicitly assigning them.",
    )

    objects = UserManager()

    EMAIL_FIELD = "email"
    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["email"]

    def __str__(self):
        return f"{self.full_name} <{self.email}>"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    # Methods copied from AbstractUser
    def clean(self):
        super().clean()
        self.email = self.__class__.objects.normalize_email(self.email)

    def get_full_name(self):
        return self.full_name

    def get_short_name(self):
        return self.first_name

    # Permissions methods, similar to those in PermissionsMixin
    def get_all_permissions(self, obj=None):
        permissions = set()
        for backend in auth.get_backends():
            permissions.update(backend.get_all_permissions(self, obj))
        return permissions

    def has_perm(self, perm, obj=None):
        """
        Return True if the user has the specified permission. Query all
        available auth backends, but return immediately if any backend returns
        True.
        """
        # Active superusers have all permissions.
        if self.is_active and self.is_superuser:
            return True

        for backend in auth.get_backends():
            if not hasattr(backend, "has_perm"):
                continue
            try:
                if backend.has_perm(self, perm, obj):
                    return True
            except PermissionDenied:
                return False
        return False

    def has_perms(self, perm_list, obj=None):
        return all(self.has_perm(perm, obj) for perm in perm_list)

    def has_module_perms(self, app_label):
        """
        Return True if the user has any permissions in the given app label.
        Use similar logic as has_perm(), above.
        """
        # Active superusers have all permissions.
        if self.is_active and self.is_superuser:
            return True

        for backend in auth.get_backends():
            if not hasattr(backend, "has_module_perms"):
                continue
            try:
                if backend.has_module_perms(self, app_label):
                    return True
            except PermissionDenied:
                return False
        return False


class RoleManager(models.Manager):
    use_in_migrations = True

    def get_by_natural_key(self, name):
        return self.get(name=name)


class Role(models.Model):
    """
    Roles are a generic way of categorizing users to apply permissions.
    """

    # This is similar to django.contrib.auth.models.Group, with some changes:
    #
    # * We put the ManyToMany to User on the other side, because this gives us a
    #   nicer admin by default.
    #
    # * We don't have user level permissions - roles only.
    #
    # * See other notes in menumanager.auth
    name = models.CharField(max_length=150, unique=True)
    permissions = models.ManyToManyField(
        Permission,
        blank=True,
        related_name="roles",
    )
    members = models.ManyToManyField(
        User,
        related_name="roles",
        blank=True,
        help_text="This defines which users have access rights "
        "to all the functionality on the website related to this role. ",
    )

    objects = RoleManager()

    class Meta:
        verbose_name_plural = "roles"

    def __str__(self):
        return self.name

    def natural_key(self):
        return (self.name,)


def parse_permission_spec(spec):
    """
    Parses a permission from static_roles.yaml, e.g. "menus.MenuItem/manage_menu_items"
    or "sitecontent.Page/change", into (app_label, model, codename)
    """
    try:
        app_and_model, perm = spec.split("/")
        app_label, model = app_and_model.lower().split(".")
    except ValueError:
        raise ValueError(f"Badly formatted permission {spec!r}, expected 'app_label.Model/permission'")
    if perm in STANDARD_PERMISSION_ACTIONS:
        codename = f"{perm}_{model}"
    else:
        codename = perm
    return app_label, model, codename


def get_or_create_perm(app_label, model, codename, check_only=False):
    ct = ContentType.objects.get_by_natural_key(app_label, model)
    try:
        return Permission.objects.get(codename=codename, content_type=ct)
    except Permission.DoesNotExist:
        if check_only:
            raise ValueError(f"Permission {app_label}.{codename} does not exist")
        # This branch is generally only reached when running tests.
        return Permission.objects.create(codename=codename, name=codename, content_type=ct)


def setup_auth_roles(check_only=False):
    permissions_conf = yaml.load(open(settings.ROLES_CONFIG_FILE), Loader=yaml.SafeLoader)
    roles = permissions_conf["Roles"]
    for role_name, role_details in roles.items():
        perms = [
            get_or_create_perm(*parse_permission_spec(p), check_only=check_only)
            for p in role_details["Permissions"]
        ]
        if check_only:
            continue
        with transaction.atomic():
            role, created = Role.objects.get_or_create(name=role_name)
            role.permissions.set(perms)
        if created:
            logger.info("Created role %s", role_name)
