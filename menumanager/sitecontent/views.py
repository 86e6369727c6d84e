from django.http import Http404
from django.template.response import TemplateResponse
from django.utils.safestring import mark_safe

from menumanager.sitecontent.models import Page


def find(request, path: str, template_name="sitecontent/page.html"):
    if path in ("", "/"):
        url = "/"
    else:
        url = "/" + path.strip("/") + "/"

    try:
        page = Page.objects.get(url=url)
    except Page.DoesNotExist:
        raise Http404()

    return TemplateResponse(
        request,
        template_name,
        {
            "title": page.title,
            "page": page,
            "page_html": mark_safe(page.html),
        },
    )


def home(request):
    return find(request, "")
