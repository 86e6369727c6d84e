from django import forms

from menumanager.menus.models import MenuItem


class MenuItemForm(forms.ModelForm):
    class Meta:
        model = MenuItem
        fields = ["menu_title", "page", "link", "is_new_window"]
        labels = {
            "menu_title": "Menu Title (will default to selected page title)",
            "page": "Page",
            "link": "Link (use when not specifying a page)",
            "is_new_window": "Open in a new window?",
        }
        widgets = {
            "link": forms.TextInput(attrs={"size": 60}),
        }
