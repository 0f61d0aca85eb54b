import datetime

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from fastapi.testclient import TestClient

from portfolio import dependencies as deps
from portfolio.routers import pages
from portfolio.services.post_store import PostStore
from portfolio.settings import Settings
from tests.conftest import TEMPLATES_DIR, BoomStore, make_post


def make_app(store, settings=None):
    app = FastAPI()
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.dependency_overrides[deps.get_post_store] = lambda: store
    app.dependency_overrides[deps.get_templates] = lambda: templates
    if settings is not None:
        app.dependency_overrides[deps.get_settings] = lambda: settings
    app.include_router(pages.router)
    return app


def test_home_page_shows_site_title_and_year():
    settings = Settings(SITE_TITLE="Hi There", SITE_SUBTITLE="Some devlogs")
    client = TestClient(make_app(PostStore(), settings))

    res = client.get("/")

    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "Hi There" in res.text
    assert "Some devlogs" in res.text
    assert str(datetime.date.today().year) in res.text


def test_blog_list_renders_posts_in_store_order():
    store = PostStore(
        [
            make_post("newer", title="Newer Post", date=datetime.date(2024, 6, 1)),
            make_post("older", title="Older Post", date=datetime.date(2024, 1, 1)),
        ]
    )
    client = TestClient(make_app(store))

    res = client.get("/blog")

    assert res.status_code == 200
    assert "Blog Posts" in res.text
    assert res.text.index("Newer Post") < res.text.index("Older Post")
    assert 'href="/blog/newer"' in res.text


def test_blog_list_handles_empty_store():
    res = TestClient(make_app(PostStore())).get("/blog")

    assert res.status_code == 200
    assert "No posts yet." in res.text


def test_view_post_inserts_content_unescaped():
    store = PostStore(
        [make_post("hello", title="Hello", content='<h2 id="intro">Intro</h2>')]
    )
    client = TestClient(make_app(store))

    res = client.get("/blog/hello")

    assert res.status_code == 200
    assert '<h2 id="intro">Intro</h2>' in res.text
    assert "mermaid" not in res.text


def test_view_post_escapes_metadata():
    store = PostStore([make_post("xss", title="<b>bold</b>")])

    res = TestClient(make_app(store)).get("/blog/xss")

    assert "&lt;b&gt;bold&lt;/b&gt;" in res.text


def test_view_post_includes_scripts_for_flags():
    store = PostStore([make_post("diagram", has_mermaid=True, has_code_blocks=True)])

    res = TestClient(make_app(store)).get("/blog/diagram")

    assert "mermaid" in res.text
    assert "/static/js/code-highlight.js" in res.text


def test_view_post_returns_plain_404_page_when_missing():
    res = TestClient(make_app(PostStore())).get("/blog/does-not-exist")

    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "404 page not found"


def test_blog_pages_return_500_on_unexpected_error():
    client = TestClient(make_app(BoomStore()))

    res = client.get("/blog")
    assert res.status_code == 500
    assert res.json()["detail"] == "Internal Server Error"

    res = client.get("/blog/any")
    assert res.status_code == 500
