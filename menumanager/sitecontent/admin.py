from django.contrib import admin

from menumanager.sitecontent.models import Page


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("title", "url", "menu_title")
    search_fields = ("title", "url")
