from django.contrib import admin
from django.http import HttpResponse
from django.urls import path

import menumanager.sitecontent.views

urlpatterns = [
    path("health-check/", lambda request: HttpResponse(b"OK")),
    path("admin/", admin.site.urls),
    # Pages
    path("", menumanager.sitecontent.views.home, name="menumanager-sitecontent-home"),
    path("<path:path>", menumanager.sitecontent.views.find, name="menumanager-sitecontent-find"),
]
