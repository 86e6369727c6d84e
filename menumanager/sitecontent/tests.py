from menumanager.menus.tests import factories
from menumanager.sitecontent.models import Page
from menumanager.utils.tests.base import TestBase


def test_get_menu_title():
    assert Page(title="About our organisation", menu_title="About").get_menu_title() == "About"
    assert Page(title="About our organisation").get_menu_title() == "About our organisation"


def test_computed_accessors():
    page = Page(title="About", url="/about/")
    assert page.has_computed("link")
    assert page.invoke_computed("link") == "/about/"
    assert page.has_computed("menu_title")
    assert page.invoke_computed("menu_title") == "About"
    assert not page.has_computed("title")


def test_read_field():
    page = Page(title="About", url="/about/")
    assert page.read_field("title") == "About"
    assert page.read_field("url") == "/about/"
    assert page.read_field("not_a_field") is None
    # Methods are not fields
    assert page.read_field("get_absolute_url") is None
    # Nor are reverse relations
    assert page.read_field("menu_items") is None


class FindViewTests(TestBase):
    def test_find(self):
        factories.create_page(title="This is the page title", url="/my-page/", html="<p>This is <b>my</b> page</p>")
        response = self.client.get("/my-page/")
        self.assertContains(response, "This is the page title")
        self.assertContains(response, "This is <b>my</b> page")

    def test_home(self):
        factories.create_page(title="Welcome", url="/")
        response = self.client.get("/")
        self.assertContains(response, "Welcome")

    def test_missing(self):
        response = self.client.get("/no-such-page/")
        assert response.status_code == 404

    def test_health_check(self):
        response = self.client.get("/health-check/")
        assert response.content == b"OK"
