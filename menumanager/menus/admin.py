import json

from django.contrib import admin
from django.core.exceptions import PermissionDenied
from django.db import transaction
from django.http import Http404, HttpResponseBadRequest, HttpResponseNotAllowed, JsonResponse
from django.urls import path

from menumanager.menus.forms import MenuItemForm
from menumanager.menus.models import MenuItem, MenuSet
from menumanager.menus.services import delete_menu_item, reorder_menu_items


class MenuItemPermissionMixin:
    # Menu items have a single 'manage' permission that covers everything, see
    # MenuItem.can_edit etc.
    def has_add_permission(self, request, obj=None):
        return MenuItem().can_create(request.user)

    def has_change_permission(self, request, obj=None):
        return MenuItem().can_edit(request.user)

    def has_delete_permission(self, request, obj=None):
        return MenuItem().can_delete(request.user)

    def has_view_permission(self, request, obj=None):
        return MenuItem().can_view(request.user)


class MenuItemInlineBase(MenuItemPermissionMixin, admin.TabularInline):
    model = MenuItem
    form = MenuItemForm
    fields = ["menu_title", "page", "link", "is_new_window", "sort"]
    autocomplete_fields = ["page"]
    ordering = ["sort", "id"]
    extra = 0
    show_change_link = True


class SubMenuItemInline(MenuItemInlineBase):
    fk_name = "parent_menu_item"
    verbose_name = "sub menu item"
    verbose_name_plural = "Sub Menu Items"


class TopLevelMenuItemInline(MenuItemInlineBase):
    fk_name = "menu_set"
    verbose_name = "menu item"
    verbose_name_plural = "Menu Items"

    def get_queryset(self, request):
        return super().get_queryset(request).top_level()


class ReorderAdminMixin:
    """
    Adds a '<id>/reorder/' view, which takes a POSTed JSON body
    {"ordered_ids": [...]} and rewrites the sort order of the child
    menu items of the object to match.
    """

    def get_urls(self):
        opts = self.model._meta
        urls = [
            path(
                "<path:object_id>/reorder/",
                self.admin_site.admin_view(self.reorder_view),
                name=f"{opts.app_label}_{opts.model_name}_reorder",
            ),
        ]
        return urls + super().get_urls()

    def reorder_view(self, request, object_id):
        if request.method != "POST":
            return HttpResponseNotAllowed(["POST"])
        if not MenuItem().can_edit(request.user):
            raise PermissionDenied
        parent = self.get_object(request, object_id)
        if parent is None:
            raise Http404()
        try:
            ordered_ids = json.loads(request.body)["ordered_ids"]
            reorder_menu_items(parent, ordered_ids)
        except (ValueError, KeyError, TypeError) as e:
            return HttpResponseBadRequest(f"Invalid reorder request: {e}")
        return JsonResponse({"ordered_ids": ordered_ids})

    def save_formset(self, request, form, formset, change):
        if formset.model is not MenuItem:
            return super().save_formset(request, form, formset, change)
        instances = formset.save(commit=False)
        for obj in formset.deleted_objects:
            delete_menu_item(obj)
        for instance in instances:
            if instance.menu_set_id is None:
                # Sub items are created in the same menu set as their parent.
                instance.menu_set = form.instance.get_parent()
            instance.save()
        formset.save_m2m()


@admin.register(MenuItem)
class MenuItemAdmin(ReorderAdminMixin, MenuItemPermissionMixin, admin.ModelAdmin):
    form = MenuItemForm
    list_display = ["title", "page_title", "link", "opens_in_new_window"]
    list_filter = ["menu_set"]
    search_fields = ["menu_title", "page__title"]
    autocomplete_fields = ["page"]
    list_select_related = ["page"]

    @admin.display(description="Title", ordering="menu_title")
    def title(self, obj):
        return obj.get_title()

    @admin.display(description="Page Title", ordering="page__title")
    def page_title(self, obj):
        return obj.page.title if obj.page_id is not None else ""

    @admin.display(description="Opens in new window?", ordering="is_new_window")
    def opens_in_new_window(self, obj):
        return obj.is_new_window_nice()

    def get_fields(self, request, obj=None):
        fields = list(MenuItemForm._meta.fields)
        if obj is None:
            fields.insert(0, "menu_set")
        return fields

    def get_inlines(self, request, obj):
        # Only one level of sub menus can be edited, from the top level item
        if obj is None or obj.is_top_level:
            return [SubMenuItemInline]
        return []

    def delete_model(self, request, obj):
        delete_menu_item(obj)

    def delete_queryset(self, request, queryset):
        with transaction.atomic():
            for obj in queryset:
                # Items may already have gone as sub items of earlier ones
                if MenuItem.objects.filter(id=obj.id).exists():
                    delete_menu_item(obj)


@admin.register(MenuSet)
class MenuSetAdmin(ReorderAdminMixin, admin.ModelAdmin):
    list_display = ["name", "sort"]
    search_fields = ["name"]
    inlines = [TopLevelMenuItemInline]

    def has_add_permission(self, request):
        return MenuSet().can_create(request.user)

    def has_change_permission(self, request, obj=None):
        return (obj or MenuSet()).can_edit(request.user)

    def has_delete_permission(self, request, obj=None):
        return (obj or MenuSet()).can_delete(request.user)

    def has_view_permission(self, request, obj=None):
        return (obj or MenuSet()).can_view(request.user)
